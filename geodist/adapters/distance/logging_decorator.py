"""Logging decorator around any DistanceStrategy."""

import logging

from geodist.application.ports.distance_strategy import DistanceStrategy

logger = logging.getLogger(__name__)


class LoggingDistanceStrategy(DistanceStrategy):
    """Logs every successful calculation; failures pass through silently."""

    def __init__(self, wrapped: DistanceStrategy):
        self._wrapped = wrapped

    @property
    def wrapped(self) -> DistanceStrategy:
        return self._wrapped

    def calculate_distance(self, lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        distance = self._wrapped.calculate_distance(lat1, lon1, lat2, lon2)
        logger.info("Calculated distance: %s km", distance)
        return distance
