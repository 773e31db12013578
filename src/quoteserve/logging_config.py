"""Logging setup for the service process."""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Libraries that log every request at INFO
_NOISY_LOGGERS = ("httpx", "httpcore", "psycopg.pool")


def setup_logging(level: str = "INFO", debug: bool = False) -> None:
    """Configure the root logger with a stdout handler and quiet chatty libraries."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.DEBUG if debug else level.upper())

    if not debug:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
