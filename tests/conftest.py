"""Pytest configuration and shared fixtures."""

import pytest

from geodist.config import Settings


@pytest.fixture
def new_york():
    return (40.712776, -74.005974)


@pytest.fixture
def los_angeles():
    return (34.052235, -118.243683)


@pytest.fixture
def settings_without_key(tmp_path, monkeypatch):
    """Settings isolated from the developer's environment and .env file."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("GOOGLE_MAPS_API_KEY", raising=False)
    return Settings()
