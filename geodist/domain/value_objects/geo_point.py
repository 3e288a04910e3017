"""GeoPoint value object — immutable, validated (lat, lon) pair."""

import math
from dataclasses import dataclass

from geodist.domain.errors import DistanceCalculationError, InvalidCoordinatesError

EARTH_RADIUS_KM = 6371.0

# Rounding noise allowed on the haversine term before it is treated as an error
_HAVERSINE_TOLERANCE = 1e-12


def _haversine_term(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """sin²(Δφ/2) + cos φ1 · cos φ2 · sin²(Δλ/2), inputs in radians."""
    return (
        math.sin((lat2 - lat1) / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin((lon2 - lon1) / 2) ** 2
    )


def central_angle(a: float) -> float:
    """Central angle in radians for a haversine term ``a``.

    Floating-point overshoot of [0, 1] within tolerance is clamped so asin
    stays in its domain; anything else raises DistanceCalculationError.
    """
    if not math.isfinite(a) or not -_HAVERSINE_TOLERANCE <= a <= 1.0 + _HAVERSINE_TOLERANCE:
        raise DistanceCalculationError(
            f"Mathematical calculation failed: haversine term {a!r} out of range"
        )
    a = min(max(a, 0.0), 1.0)
    return 2 * math.asin(math.sqrt(a))


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.latitude) and math.isfinite(self.longitude)):
            raise InvalidCoordinatesError(
                f"Coordinates must be finite, got ({self.latitude}, {self.longitude})"
            )
        if not -90.0 <= self.latitude <= 90.0:
            raise InvalidCoordinatesError(f"Latitude {self.latitude} is outside [-90, 90]")
        if not -180.0 <= self.longitude <= 180.0:
            raise InvalidCoordinatesError(f"Longitude {self.longitude} is outside [-180, 180]")

    def haversine_km(self, other: "GeoPoint") -> float:
        """Calculate distance in km between two points using the Haversine formula."""
        a = _haversine_term(
            math.radians(self.latitude),
            math.radians(self.longitude),
            math.radians(other.latitude),
            math.radians(other.longitude),
        )
        return central_angle(a) * EARTH_RADIUS_KM
