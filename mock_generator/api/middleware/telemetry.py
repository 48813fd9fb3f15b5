"""Per-request tracing middleware."""

import json
import logging

from fastapi import Request

from ...config import Config
from ...utils.logging import get_logger
from ...utils.tracing import RequestTrace

logger = get_logger(__name__)


def get_trace(request: Request):
    """Trace attached to the request, or None outside the middleware."""
    return getattr(request.state, "trace", None)


def create_telemetry_middleware(app_config: Config):
    """
    Create an HTTP middleware that opens a RequestTrace for every request.

    The trace is stored on ``request.state.trace`` for handlers to pass on.
    Unhandled exceptions are recorded on the trace and re-raised. The
    finished trace is written to the log.
    """
    trace_level = getattr(logging, app_config.TRACE_LOG_LEVEL, logging.DEBUG)

    async def telemetry_middleware(request: Request, call_next):
        trace = RequestTrace(
            name=f"{request.method} {request.url.path}",
            service_name=app_config.SERVICE_NAME,
        )
        request.state.trace = trace

        try:
            response = await call_next(request)
        except Exception as e:
            trace.record_exception(e)
            trace.set_error(str(e), type(e).__name__)
            raise
        else:
            trace.set_attribute("http.response.status_code", response.status_code)
            return response
        finally:
            trace.finish()
            try:
                logger.log(trace_level, "trace %s", json.dumps(trace.as_dict()))
            except Exception as e:
                logger.warning(f"Failed to write request trace: {e}")

    return telemetry_middleware
