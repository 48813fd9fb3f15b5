"""Logging setup shared by every module of the service."""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging once for the process.

    Args:
        level: Log level name; defaults to the configured LOG_LEVEL
    """
    if level is None:
        from ..config import config

        level = config.LOG_LEVEL

    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)


def get_logger(name: str) -> logging.Logger:
    """Get a module logger."""
    return logging.getLogger(name)
