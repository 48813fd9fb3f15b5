"""Utility functions and classes."""

from .logging import setup_logging, get_logger
from .tracing import RequestTrace

__all__ = ["setup_logging", "get_logger", "RequestTrace"]
