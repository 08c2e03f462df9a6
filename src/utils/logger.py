"""Logging setup shared by the API and the seed script."""

import logging
import sys
from typing import Optional

from src.config import get_settings

_LOGGER_INITIALIZED = False

def configure_logging(level: Optional[str] = None) -> None:
    """Set up stdout logging at LOG_LEVEL unless a level is given."""
    global _LOGGER_INITIALIZED
    if _LOGGER_INITIALIZED:
        return

    logging.basicConfig(
        level=(level or get_settings().LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        stream=sys.stdout,
    )
    _LOGGER_INITIALIZED = True

def get_logger(name: str) -> logging.Logger:
    configure_logging()
    return logging.getLogger(name)
