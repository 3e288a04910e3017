"""Haversine distance strategy — implements DistanceStrategy without I/O."""

from geodist.application.ports.distance_strategy import DistanceStrategy
from geodist.domain.value_objects.geo_point import GeoPoint


class HaversineDistanceStrategy(DistanceStrategy):
    """Great-circle distance on a sphere of radius 6371 km."""

    def calculate_distance(self, lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        origin = GeoPoint(latitude=lat1, longitude=lon1)
        destination = GeoPoint(latitude=lat2, longitude=lon2)
        return origin.haversine_km(destination)
