"""Application configuration via Pydantic Settings.

Settings are read from the environment (and an optional .env file) and then
frozen into a ConfigStore that is passed explicitly to whoever needs it.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from pydantic import Field
from pydantic_settings import BaseSettings

from geodist.domain.errors import ConfigKeyNotFound

GOOGLE_API_KEY = "google_api_key"
DISTANCE_MATRIX_URL = "https://maps.googleapis.com/maps/api/distancematrix/json"


class Settings(BaseSettings):
    # Google Maps
    google_maps_api_key: str = Field(default="", validation_alias="GOOGLE_MAPS_API_KEY")
    distance_matrix_url: str = Field(
        default=DISTANCE_MATRIX_URL,
        validation_alias="DISTANCE_MATRIX_URL",
    )
    http_timeout_seconds: float = Field(default=10.0, validation_alias="HTTP_TIMEOUT_SECONDS")

    # App
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


class ConfigStore:
    """Read-only key/value configuration populated once at startup.

    Lookups have no default: a missing key is always ConfigKeyNotFound.
    """

    def __init__(self, values: Mapping[str, str] | None = None):
        self._values = MappingProxyType(dict(values or {}))

    @classmethod
    def from_settings(cls, settings: Settings) -> "ConfigStore":
        values: dict[str, str] = {}
        # An unset key stays absent so lookups fail loudly
        if settings.google_maps_api_key:
            values[GOOGLE_API_KEY] = settings.google_maps_api_key
        return cls(values)

    def get(self, key: str) -> str:
        """Return the value for ``key``.

        Raises:
            ConfigKeyNotFound: if the key was never configured.
        """
        try:
            return self._values[key]
        except KeyError:
            raise ConfigKeyNotFound(key) from None

    def __getitem__(self, key: str) -> str:
        return self.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ConfigStore(keys={sorted(self._values)})"
