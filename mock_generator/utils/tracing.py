"""
Per-request trace context.

A ``RequestTrace`` is created for every inbound request and handed to each
component that wants to record what happened. Recording never raises: a
broken attribute value is logged and dropped so the response path is never
affected by telemetry.
"""

import time
import uuid
from typing import Any, Dict, List, Optional

from .logging import get_logger

logger = get_logger(__name__)

STATUS_UNSET = "unset"
STATUS_OK = "ok"
STATUS_ERROR = "error"


class RequestTrace:
    """Attributes, status and exceptions recorded while serving one request."""

    def __init__(self, name: str, service_name: Optional[str] = None):
        self.trace_id = uuid.uuid4().hex
        self.name = name
        self.service_name = service_name
        self.status = STATUS_UNSET
        self.attributes: Dict[str, Any] = {}
        self.exceptions: List[Dict[str, str]] = []
        self.started_at = time.perf_counter()
        self.duration_ms: Optional[float] = None

    def set_attribute(self, key: str, value: Any) -> None:
        try:
            if value is not None and not isinstance(value, (str, int, float, bool)):
                value = str(value)
            self.attributes[key] = value
        except Exception as e:
            logger.warning(f"Dropping trace attribute {key}: {e}")

    def set_attributes(self, **values: Any) -> None:
        for key, value in values.items():
            self.set_attribute(key, value)

    def set_status(self, status: str) -> None:
        # Errors are sticky
        if self.status != STATUS_ERROR:
            self.status = status

    def set_error(self, message: str, error_type: Optional[str] = None) -> None:
        """Mark the trace failed and tag the error message and type."""
        self.status = STATUS_ERROR
        self.set_attribute("error.message", message)
        if error_type:
            self.set_attribute("error.type", error_type)

    def record_exception(self, exc: BaseException) -> None:
        """Mark the trace failed and keep the exception type and message."""
        self.status = STATUS_ERROR
        try:
            self.exceptions.append(
                {"type": type(exc).__name__, "message": str(exc)}
            )
        except Exception as e:
            logger.warning(f"Could not record exception on trace: {e}")

    def set_usage(self, usage) -> None:
        """Tag token usage reported by the completion API."""
        if usage is None:
            return
        self.set_attributes(
            **{
                "openai.cost.prompt_tokens": usage.prompt_tokens,
                "openai.cost.completion_tokens": usage.completion_tokens,
                "openai.cost.total_tokens": usage.total_tokens,
            }
        )

    def finish(self) -> None:
        if self.duration_ms is None:
            self.duration_ms = round((time.perf_counter() - self.started_at) * 1000, 2)
        self.set_status(STATUS_OK)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "trace_id": self.trace_id,
            "name": self.name,
            "service_name": self.service_name,
            "status": self.status,
            "duration_ms": self.duration_ms,
            "attributes": dict(self.attributes),
            "exceptions": list(self.exceptions),
        }
