"""Response models for the completion API and for this service."""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class Usage(BaseModel):
    """Token usage information."""

    model_config = ConfigDict(extra="ignore")

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class ResponseMessage(BaseModel):
    """Assistant message in a completion choice. ``content`` is null on refusals and tool calls."""

    model_config = ConfigDict(extra="ignore")

    role: str = ""
    content: Optional[str] = None


class Choice(BaseModel):
    """A single completion choice."""

    model_config = ConfigDict(extra="ignore")

    index: int = 0
    message: ResponseMessage = Field(default_factory=ResponseMessage)
    finish_reason: Optional[str] = None


class CompletionResponse(BaseModel):
    """Chat completion response. ``choices`` may legitimately be empty."""

    model_config = ConfigDict(extra="ignore")

    id: str = ""
    object: str = "chat.completion"
    created: int = 0
    model: str = ""
    choices: List[Choice] = Field(default_factory=list)
    usage: Usage = Field(default_factory=Usage)


class SpecDocument(BaseModel):
    """The part of an OpenAPI document this service reads."""

    title: str = ""
    description: str = ""


class MockResponse(BaseModel):
    """Success body returned to callers."""

    response: str


class ErrorResponse(BaseModel):
    """Error body returned to callers."""

    error: str
