"""Request models sent to the completion API."""

from typing import List
from pydantic import BaseModel, Field


class ChatMessage(BaseModel):
    """A chat message with role and content."""

    role: str
    content: str


class CompletionRequest(BaseModel):
    """Chat completion request body (OpenAI compatible)."""

    model: str = "gpt-3.5-turbo"
    messages: List[ChatMessage] = Field(default_factory=list)
    max_tokens: int = Field(default=300, ge=1)
