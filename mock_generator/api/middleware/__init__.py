"""API middleware modules."""

from .telemetry import create_telemetry_middleware, get_trace

__all__ = ["create_telemetry_middleware", "get_trace"]
