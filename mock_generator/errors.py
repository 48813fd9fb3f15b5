"""Errors surfaced to callers as an ``{"error": message}`` body."""

from typing import Optional

INVALID_URL_MESSAGE = "OpenAPI Url is required"
DOWNLOAD_FAILED_MESSAGE = "Unable to download URL"
GENERATION_FAILED_MESSAGE = "Failed to generate mock"


class MockGeneratorError(Exception):
    """Base class for failures that end a request with an error envelope."""

    default_message = "Internal error"
    error_type = "MockGeneratorError"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InputValidationError(MockGeneratorError):
    """Required query parameter missing or not an http(s) URL."""

    default_message = INVALID_URL_MESSAGE
    error_type = "InputValidation"


class SpecFetchError(MockGeneratorError):
    """The OpenAPI document could not be downloaded."""

    default_message = DOWNLOAD_FAILED_MESSAGE
    error_type = "FetchFailed"


class CompletionFailedError(MockGeneratorError):
    """The completion API call failed or returned a non-success status."""

    default_message = GENERATION_FAILED_MESSAGE
    error_type = "CompletionFailed"
