"""Process-wide logging setup for command-line entry points."""

import logging

LOG_FORMAT = "%(levelname)s | %(message)s"

# httpx logs full request URLs at INFO, and the Distance Matrix key is a query parameter
QUIET_LOGGERS = ("httpx", "httpcore")


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
