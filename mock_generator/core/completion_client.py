"""Client for the chat completion API."""

from typing import Optional

import httpx
from pydantic import ValidationError

from ..config import Config
from ..errors import GENERATION_FAILED_MESSAGE
from ..models.requests import ChatMessage, CompletionRequest
from ..models.responses import CompletionResponse
from ..utils.logging import get_logger
from ..utils.tracing import RequestTrace

logger = get_logger(__name__)


def first_choice_content(response: CompletionResponse) -> Optional[str]:
    """Return the first choice's message content, or None when there is no usable choice."""
    if not response.choices:
        return None
    return response.choices[0].message.content


class CompletionClient:
    """
    Sends a persona prompt and a user prompt to the completion API.

    Each call is a single attempt. Failures are never raised to the caller:
    transport errors and non-success statuses are recorded on the trace and
    reported as ``None``.
    """

    def __init__(self, http_client: httpx.AsyncClient, app_config: Config):
        """
        Initialize the completion client.

        Args:
            http_client: Shared pooled HTTP client
            app_config: Service configuration (credential, endpoint, model)
        """
        self.http_client = http_client
        self.url = app_config.completions_url
        self.model = app_config.OPENAI_MODEL
        self.max_tokens = app_config.OPENAI_MAX_TOKENS
        self.timeout = app_config.OPENAI_TIMEOUT
        self.headers = {"Authorization": f"Bearer {app_config.OPENAI_API_KEY or ''}"}

    def build_request(self, system_prompt: str, user_prompt: str) -> CompletionRequest:
        return CompletionRequest(
            model=self.model,
            messages=[
                ChatMessage(role="system", content=system_prompt),
                ChatMessage(role="user", content=user_prompt),
            ],
            max_tokens=self.max_tokens,
        )

    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        trace: Optional[RequestTrace] = None,
    ) -> Optional[CompletionResponse]:
        """
        Request a chat completion.

        Args:
            system_prompt: Persona prompt sent with the system role
            user_prompt: Prompt sent with the user role
            trace: Request trace to record into

        Returns:
            Decoded CompletionResponse, or None if the call failed
        """
        body = self.build_request(system_prompt, user_prompt).model_dump()

        try:
            response = await self.http_client.post(
                self.url, json=body, headers=self.headers, timeout=self.timeout
            )
        except httpx.HTTPError as e:
            logger.error(f"Completion request failed: {type(e).__name__}: {e}")
            if trace is not None:
                trace.record_exception(e)
            return None

        if not response.is_success:
            logger.error(f"Completion API returned {response.status_code}")
            if trace is not None:
                trace.set_error(GENERATION_FAILED_MESSAGE, "OpenAIError")
                trace.set_attributes(
                    **{
                        "http.status_code": response.status_code,
                        "error.openai_response": response.text,
                    }
                )
            return None

        try:
            completion = CompletionResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.error(f"Could not decode completion response: {e}")
            if trace is not None:
                trace.record_exception(e)
            return None

        if trace is not None:
            trace.set_usage(completion.usage)
        logger.debug(
            f"Completion {completion.id} returned {len(completion.choices)} choice(s), "
            f"{completion.usage.total_tokens} tokens"
        )
        return completion
