"""Simple logger wrapper honoring configured log level."""

import logging
import sys

from config.settings import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _configure_logging() -> None:
    """Configure root logger once; uvicorn and the SDK share it."""
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    if not settings.debug:
        # Keep SDK transport chatter out of INFO logs
        logging.getLogger("google").setLevel(max(level, logging.WARNING))


_configure_logging()


def get_logger(name: str) -> logging.Logger:
    """Return a logger with preconfigured settings."""
    return logging.getLogger(name)
