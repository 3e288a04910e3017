"""Compare haversine and Google Maps distances between two points.

Usage:
    python -m geodist.tools.compare_distances
    python -m geodist.tools.compare_distances --strategy haversine
    python -m geodist.tools.compare_distances --origin 43.2389 76.9455 --destination 51.1282 71.4304
"""

from __future__ import annotations

import argparse
import logging
import sys

import httpx

from geodist.adapters.distance.factories import (
    GoogleMapsStrategyFactory,
    HaversineStrategyFactory,
)
from geodist.application.ports.distance_strategy import DistanceStrategyFactory
from geodist.application.use_cases.calculate_distance import DistanceCalculator
from geodist.config import ConfigStore, Settings
from geodist.domain.errors import ConfigKeyNotFound
from geodist.logging_config import configure_logging

logger = logging.getLogger(__name__)

NEW_YORK = (40.712776, -74.005974)
LOS_ANGELES = (34.052235, -118.243683)

EXIT_CONFIG_ERROR = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--origin", nargs=2, type=float, metavar=("LAT", "LON"), default=list(NEW_YORK),
    )
    parser.add_argument(
        "--destination", nargs=2, type=float, metavar=("LAT", "LON"), default=list(LOS_ANGELES),
    )
    parser.add_argument(
        "--strategy",
        choices=("haversine", "google", "all"),
        default="all",
        help="Which strategy to run (default: all)",
    )
    return parser


def _format(label: str, distance: float | None) -> str:
    if distance is None:
        return f"{label} distance: n/a"
    return f"{label} distance: {distance:.2f} km"


def main(
    argv: list[str] | None = None,
    settings: Settings | None = None,
    client: httpx.Client | None = None,
) -> int:
    args = _build_parser().parse_args(argv)
    settings = settings or Settings()
    configure_logging(settings.log_level)
    config = ConfigStore.from_settings(settings)

    (lat1, lon1), (lat2, lon2) = args.origin, args.destination
    calculator: DistanceCalculator | None = None

    def run(label: str, factory: DistanceStrategyFactory) -> None:
        nonlocal calculator
        if calculator is None:
            calculator = DistanceCalculator(factory)
        else:
            calculator.set_strategy(factory)
        print(_format(label, calculator.calculate_distance(lat1, lon1, lat2, lon2)))

    if args.strategy in ("haversine", "all"):
        run("Mathematical", HaversineStrategyFactory())

    if args.strategy in ("google", "all"):
        try:
            google_factory = GoogleMapsStrategyFactory.from_config(
                config,
                base_url=settings.distance_matrix_url,
                timeout=settings.http_timeout_seconds,
                client=client,
            )
        except ConfigKeyNotFound as e:
            logger.error("%s Set GOOGLE_MAPS_API_KEY to use the Google strategy.", e)
            return EXIT_CONFIG_ERROR
        run("Google API", google_factory)

    return 0


if __name__ == "__main__":
    sys.exit(main())
