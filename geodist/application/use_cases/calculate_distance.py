"""DistanceCalculator — runs the active strategy and reports failures."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from geodist.adapters.distance.logging_decorator import LoggingDistanceStrategy
from geodist.application.ports.distance_strategy import (
    DistanceStrategy,
    DistanceStrategyFactory,
)
from geodist.domain.errors import DistanceCalculationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DistanceResult:
    """Outcome of one calculation: a distance or the reason there is none."""

    distance_km: float | None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class DistanceCalculator:
    """Holds one logging-wrapped strategy at a time."""

    def __init__(self, factory: DistanceStrategyFactory):
        self._strategy = self._build(factory)

    @staticmethod
    def _build(factory: DistanceStrategyFactory) -> DistanceStrategy:
        return LoggingDistanceStrategy(factory.create_strategy())

    @property
    def strategy(self) -> DistanceStrategy:
        return self._strategy

    def set_strategy(self, factory: DistanceStrategyFactory) -> None:
        """Replace the active strategy; the next call uses the new one."""
        self._strategy = self._build(factory)

    def calculate(self, lat1: float, lon1: float, lat2: float, lon2: float) -> DistanceResult:
        """Run the active strategy.

        Any DistanceCalculationError is logged and turned into a result
        without a distance. Other exceptions propagate.
        """
        try:
            distance = self._strategy.calculate_distance(lat1, lon1, lat2, lon2)
        except DistanceCalculationError as e:
            logger.error("Error: %s", e)
            return DistanceResult(distance_km=None, error=str(e))
        return DistanceResult(distance_km=distance)

    def calculate_distance(self, lat1: float, lon1: float, lat2: float, lon2: float) -> float | None:
        """Distance in km, or None when the calculation failed."""
        return self.calculate(lat1, lon1, lat2, lon2).distance_km
