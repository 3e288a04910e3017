"""Factories that build DistanceStrategy instances."""

from __future__ import annotations

import httpx

from geodist.adapters.distance.google_maps_strategy import GoogleMapsDistanceStrategy
from geodist.adapters.distance.haversine_strategy import HaversineDistanceStrategy
from geodist.application.ports.distance_strategy import DistanceStrategyFactory
from geodist.config import DISTANCE_MATRIX_URL, GOOGLE_API_KEY, ConfigStore


class HaversineStrategyFactory(DistanceStrategyFactory):
    def create_strategy(self) -> HaversineDistanceStrategy:
        return HaversineDistanceStrategy()


class GoogleMapsStrategyFactory(DistanceStrategyFactory):
    """Builds GoogleMapsDistanceStrategy instances bound to one API key."""

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

    @classmethod
    def from_config(
        cls,
        config: ConfigStore,
        *,
        base_url: str = DISTANCE_MATRIX_URL,
        timeout: float = 10.0,
        client: httpx.Client | None = None,
    ) -> "GoogleMapsStrategyFactory":
        """Read the API key from ``config``.

        Raises:
            ConfigKeyNotFound: if no API key is configured.
        """
        return cls(config.get(GOOGLE_API_KEY), base_url=base_url, timeout=timeout, client=client)

    def create_strategy(self) -> GoogleMapsDistanceStrategy:
        return GoogleMapsDistanceStrategy(
            self._api_key,
            base_url=self._base_url,
            timeout=self._timeout,
            client=self._client,
        )
