"""Domain errors raised by configuration lookup and distance strategies."""

from __future__ import annotations


class GeodistError(Exception):
    """Base geodist error."""


class ConfigKeyNotFound(GeodistError, KeyError):
    """Configuration lookup for an absent key."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Configuration key {key} not found.")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.args[0]


class DistanceCalculationError(GeodistError):
    """A strategy could not produce a distance."""


class InvalidCoordinatesError(DistanceCalculationError, ValueError):
    """Latitude or longitude outside the valid range."""


class RemoteApiError(DistanceCalculationError):
    """Distance matrix API failure."""


class RemoteApiTransportError(RemoteApiError):
    """The HTTP request could not be delivered or returned a non-2xx status."""


class RemoteApiStatusError(RemoteApiError):
    """The API answered with a status other than OK."""

    def __init__(self, status: str):
        self.status = status
        super().__init__(f"Google Maps API error: {status}")
