"""Tests for DistanceCalculator with in-memory fakes."""

from __future__ import annotations

import logging

import httpx
import pytest

from geodist.adapters.distance.factories import (
    GoogleMapsStrategyFactory,
    HaversineStrategyFactory,
)
from geodist.adapters.distance.logging_decorator import LoggingDistanceStrategy
from geodist.application.ports.distance_strategy import (
    DistanceStrategy,
    DistanceStrategyFactory,
)
from geodist.application.use_cases.calculate_distance import (
    DistanceCalculator,
    DistanceResult,
)
from geodist.domain.errors import (
    ConfigKeyNotFound,
    RemoteApiStatusError,
    RemoteApiTransportError,
)
from geodist.domain.value_objects import geo_point

CALCULATOR_LOGGER = "geodist.application.use_cases.calculate_distance"

# ─── In-memory fakes ────────────────────────────────────────────────


class StubStrategy(DistanceStrategy):
    def __init__(self, result: float | Exception):
        self._result = result
        self.calls = 0

    def calculate_distance(self, lat1, lon1, lat2, lon2):
        self.calls += 1
        if isinstance(self._result, Exception):
            raise self._result
        return self._result


class StubFactory(DistanceStrategyFactory):
    def __init__(self, result: float | Exception):
        self.strategy = StubStrategy(result)

    def create_strategy(self):
        return self.strategy


def _error_records(caplog):
    return [r for r in caplog.records if r.name == CALCULATOR_LOGGER and r.levelno == logging.ERROR]


# ─── Construction ────────────────────────────────────────────────────


def test_strategy_is_always_logging_wrapped():
    factory = StubFactory(1.0)
    calculator = DistanceCalculator(factory)
    assert isinstance(calculator.strategy, LoggingDistanceStrategy)
    assert calculator.strategy.wrapped is factory.strategy


def test_haversine_new_york_to_los_angeles(new_york, los_angeles):
    calculator = DistanceCalculator(HaversineStrategyFactory())
    distance = calculator.calculate_distance(*new_york, *los_angeles)
    assert distance is not None
    assert 3935 < distance < 3945


# ─── set_strategy ────────────────────────────────────────────────────


def test_set_strategy_takes_effect_on_next_call(new_york, los_angeles):
    calculator = DistanceCalculator(HaversineStrategyFactory())
    first = calculator.calculate_distance(*new_york, *los_angeles)

    stub = StubFactory(42.0)
    calculator.set_strategy(stub)
    assert calculator.calculate_distance(*new_york, *los_angeles) == 42.0
    assert calculator.calculate_distance(*new_york, *los_angeles) == 42.0
    assert stub.strategy.calls == 2
    assert first != 42.0


def test_set_strategy_discards_previous():
    old = StubFactory(1.0)
    new = StubFactory(2.0)
    calculator = DistanceCalculator(old)
    calculator.set_strategy(new)
    calculator.calculate_distance(0.0, 0.0, 1.0, 1.0)
    assert old.strategy.calls == 0
    assert calculator.strategy.wrapped is new.strategy


# ─── Error collapse ──────────────────────────────────────────────────


def test_transport_failure_returns_none_and_reports(caplog):
    def handler(request):
        raise httpx.ConnectError("no route to host", request=request)

    client = httpx.Client(transport=httpx.MockTransport(handler))
    calculator = DistanceCalculator(HaversineStrategyFactory())
    calculator.set_strategy(GoogleMapsStrategyFactory("key", client=client))

    with caplog.at_level(logging.ERROR, logger=CALCULATOR_LOGGER):
        assert calculator.calculate_distance(0.0, 0.0, 1.0, 1.0) is None

    records = _error_records(caplog)
    assert len(records) == 1
    assert records[0].getMessage().startswith("Error: Error fetching data from Google Maps API")


def test_non_ok_status_returns_none():
    payload = {"status": "OVER_QUERY_LIMIT", "rows": []}
    client = httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(200, json=payload)))
    calculator = DistanceCalculator(GoogleMapsStrategyFactory("key", client=client))
    assert calculator.calculate_distance(0.0, 0.0, 1.0, 1.0) is None


def test_calculate_returns_explicit_result():
    calculator = DistanceCalculator(StubFactory(RemoteApiStatusError("NOT_FOUND")))
    result = calculator.calculate(0.0, 0.0, 1.0, 1.0)
    assert result == DistanceResult(distance_km=None, error="Google Maps API error: NOT_FOUND")
    assert not result.ok

    calculator.set_strategy(StubFactory(0.0))
    result = calculator.calculate(0.0, 0.0, 0.0, 0.0)
    assert result.ok
    assert result.distance_km == 0.0


def test_invalid_coordinates_return_none(caplog):
    calculator = DistanceCalculator(HaversineStrategyFactory())
    with caplog.at_level(logging.ERROR, logger=CALCULATOR_LOGGER):
        assert calculator.calculate_distance(120.0, 0.0, 0.0, 0.0) is None
    assert len(_error_records(caplog)) == 1


def test_success_logs_once_and_reports_no_error(caplog):
    calculator = DistanceCalculator(StubFactory(7.0))
    with caplog.at_level(logging.INFO):
        calculator.calculate_distance(0.0, 0.0, 1.0, 1.0)
    messages = [r.getMessage() for r in caplog.records]
    assert messages.count("Calculated distance: 7.0 km") == 1
    assert not any(m.startswith("Error:") for m in messages)


def test_failure_not_logged_as_success(caplog):
    calculator = DistanceCalculator(StubFactory(RemoteApiTransportError("down")))
    with caplog.at_level(logging.INFO):
        calculator.calculate_distance(0.0, 0.0, 1.0, 1.0)
    messages = [r.getMessage() for r in caplog.records]
    assert not any(m.startswith("Calculated distance") for m in messages)
    assert "Error: down" in messages


def test_other_exceptions_propagate():
    calculator = DistanceCalculator(StubFactory(ConfigKeyNotFound("google_api_key")))
    with pytest.raises(ConfigKeyNotFound):
        calculator.calculate_distance(0.0, 0.0, 1.0, 1.0)


def test_math_guard_failure_returns_none(monkeypatch, caplog, new_york, los_angeles):
    monkeypatch.setattr(geo_point, "_haversine_term", lambda *args: 1.5)
    calculator = DistanceCalculator(HaversineStrategyFactory())
    with caplog.at_level(logging.ERROR, logger=CALCULATOR_LOGGER):
        result = calculator.calculate(*new_york, *los_angeles)
    assert result.distance_km is None
    assert result.error.startswith("Mathematical calculation failed")
    assert len(_error_records(caplog)) == 1


def test_non_finite_remote_distance_returns_none():
    body = b'{"status": "OK", "rows": [{"elements": [{"status": "OK", "distance": {"value": NaN}}]}]}'
    client = httpx.Client(
        transport=httpx.MockTransport(
            lambda r: httpx.Response(200, content=body, headers={"Content-Type": "application/json"})
        )
    )
    calculator = DistanceCalculator(GoogleMapsStrategyFactory("key", client=client))
    result = calculator.calculate(0.0, 0.0, 1.0, 1.0)
    assert result.distance_km is None
    assert not result.ok
