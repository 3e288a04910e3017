"""Google Maps Distance Matrix strategy — implements DistanceStrategy."""

from __future__ import annotations

import logging
import math

import httpx

from geodist.application.ports.distance_strategy import DistanceStrategy
from geodist.config import DISTANCE_MATRIX_URL
from geodist.domain.errors import (
    RemoteApiError,
    RemoteApiStatusError,
    RemoteApiTransportError,
)
from geodist.domain.value_objects.geo_point import GeoPoint

logger = logging.getLogger(__name__)

STATUS_OK = "OK"
METERS_PER_KM = 1000


class GoogleMapsDistanceStrategy(DistanceStrategy):
    """Driving distance from the Google Maps Distance Matrix API."""

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DISTANCE_MATRIX_URL,
        timeout: float = 10.0,
        client: httpx.Client | None = None,
    ):
        self._api_key = api_key
        self._base_url = base_url
        self._timeout = timeout
        self._client = client

    @property
    def api_key(self) -> str:
        return self._api_key

    def calculate_distance(self, lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        origin = GeoPoint(latitude=lat1, longitude=lon1)
        destination = GeoPoint(latitude=lat2, longitude=lon2)
        data = self._fetch(origin, destination)
        return self._parse_distance_km(data)

    def _fetch(self, origin: GeoPoint, destination: GeoPoint) -> dict:
        params = {
            "units": "metric",
            "origins": f"{origin.latitude},{origin.longitude}",
            "destinations": f"{destination.latitude},{destination.longitude}",
            "key": self._api_key,
        }
        logger.debug("Distance matrix request %s → %s", params["origins"], params["destinations"])
        try:
            if self._client is not None:
                response = self._client.get(self._base_url, params=params, timeout=self._timeout)
                response.raise_for_status()
            else:
                with httpx.Client(timeout=self._timeout) as client:
                    response = client.get(self._base_url, params=params)
                    response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise RemoteApiTransportError(
                f"Error fetching data from Google Maps API: {self._redact(str(e))}"
            ) from e

        try:
            data = response.json()
        except ValueError as e:
            raise RemoteApiError("Google Maps API returned invalid JSON") from e
        if not isinstance(data, dict):
            raise RemoteApiError("Google Maps API returned an unexpected payload")
        return data

    def _redact(self, message: str) -> str:
        # httpx error messages embed the request URL, key included
        if not self._api_key:
            return message
        return message.replace(self._api_key, "***")

    @staticmethod
    def _parse_distance_km(data: dict) -> float:
        status = data.get("status")
        if status != STATUS_OK:
            logger.warning("Distance matrix request failed with status %s", status)
            raise RemoteApiStatusError(str(status))

        try:
            element = data["rows"][0]["elements"][0]
        except (KeyError, IndexError, TypeError) as e:
            raise RemoteApiError("Google Maps API returned an unexpected payload") from e
        if not isinstance(element, dict):
            raise RemoteApiError("Google Maps API returned an unexpected payload")

        # Per-element status (e.g. ZERO_RESULTS when no route exists)
        element_status = element.get("status", STATUS_OK)
        if element_status != STATUS_OK:
            logger.warning("Distance matrix element failed with status %s", element_status)
            raise RemoteApiStatusError(str(element_status))

        try:
            meters = float(element["distance"]["value"])
        except (KeyError, TypeError, ValueError) as e:
            raise RemoteApiError("Google Maps API returned an unexpected payload") from e
        if not math.isfinite(meters) or meters < 0:
            raise RemoteApiError(f"Google Maps API returned an invalid distance: {meters}")

        return meters / METERS_PER_KM
