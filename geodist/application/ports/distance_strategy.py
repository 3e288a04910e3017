"""Port interfaces for distance strategies and the factories that build them."""

from abc import ABC, abstractmethod


class DistanceStrategy(ABC):
    @abstractmethod
    def calculate_distance(self, lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        """Return the distance in km between (lat1, lon1) and (lat2, lon2).

        May block (remote variants). Raises DistanceCalculationError or a
        subtype when no distance can be produced.
        """
        ...


class DistanceStrategyFactory(ABC):
    @abstractmethod
    def create_strategy(self) -> DistanceStrategy:
        """Build a fresh strategy instance."""
        ...
