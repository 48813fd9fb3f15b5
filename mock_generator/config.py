"""
Configuration management for the mock generator service.

Loads configuration from environment variables with sensible defaults.
"""

import os
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file for local development
load_dotenv()


DEFAULT_SYSTEM_PROMPT = (
    "You are a sarcastic senior engineer who has reviewed far too many APIs. "
    "Roast the API you are given in a few short, witty sentences. "
    "Be mean about the design, never about people."
)


class Config:
    """Application configuration loaded from environment variables."""

    def __init__(self):
        # Completion API Configuration
        self.OPENAI_API_KEY: Optional[str] = os.getenv("OPENAI_API_KEY", None)
        self.OPENAI_BASE_URL = os.getenv("OPENAI_BASE_URL", "https://api.openai.com")
        self.OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-3.5-turbo")
        self.OPENAI_MAX_TOKENS = int(os.getenv("OPENAI_MAX_TOKENS", "300"))
        self.OPENAI_SYSTEM_PROMPT = os.getenv("OPENAI_SYSTEM_PROMPT", DEFAULT_SYSTEM_PROMPT)
        self.OPENAI_TIMEOUT = float(os.getenv("OPENAI_TIMEOUT", "60"))

        # Spec download Configuration
        self.SPEC_FETCH_TIMEOUT = float(os.getenv("SPEC_FETCH_TIMEOUT", "30"))

        # Observability Configuration
        self.SERVICE_NAME = os.getenv("SERVICE_NAME", "servicemockgenerator-backend")
        self.TRACE_LOG_LEVEL = os.getenv("TRACE_LOG_LEVEL", "DEBUG").upper()
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

        # Server Configuration
        self.PORT = int(os.getenv("PORT", "8080"))

    @property
    def completions_url(self) -> str:
        """Full URL of the chat completions endpoint."""
        return f"{self.OPENAI_BASE_URL.rstrip('/')}/v1/chat/completions"

    def has_credentials(self) -> bool:
        """Whether a completion API key is configured."""
        return bool(self.OPENAI_API_KEY)


# Global config instance
config = Config()
