"""Pydantic models for API requests and responses."""

from .requests import ChatMessage, CompletionRequest
from .responses import (
    Usage,
    ResponseMessage,
    Choice,
    CompletionResponse,
    SpecDocument,
    MockResponse,
    ErrorResponse,
)

__all__ = [
    "ChatMessage",
    "CompletionRequest",
    "Usage",
    "ResponseMessage",
    "Choice",
    "CompletionResponse",
    "SpecDocument",
    "MockResponse",
    "ErrorResponse",
]
