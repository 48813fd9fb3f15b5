"""Mock generation endpoint."""

from typing import Optional

from fastapi import APIRouter, Query, Request

from ..config import Config
from ..core.completion_client import CompletionClient, first_choice_content
from ..core.prompts import service_name_prompt, spec_prompt
from ..core.spec_fetcher import SpecFetcher
from ..errors import (
    GENERATION_FAILED_MESSAGE,
    CompletionFailedError,
    InputValidationError,
)
from ..models.responses import ErrorResponse, MockResponse
from ..utils.logging import get_logger
from .middleware.telemetry import get_trace

logger = get_logger(__name__)


def is_http_url(value: Optional[str]) -> bool:
    return bool(value) and (value.startswith("https://") or value.startswith("http://"))


def create_generate_router(
    spec_fetcher: SpecFetcher,
    completion_client: CompletionClient,
    app_config: Config,
) -> APIRouter:
    """
    Create the generate router with its collaborators.

    Args:
        spec_fetcher: Fetcher for OpenAPI documents
        completion_client: Completion API client
        app_config: Service configuration (persona prompt)

    Returns:
        APIRouter with the generate endpoint
    """
    router = APIRouter()

    @router.get(
        "/api/generate",
        response_model=MockResponse,
        responses={500: {"model": ErrorResponse}},
    )
    async def generate(
        request: Request,
        open_api_url: Optional[str] = Query(default=None, alias="open-api-url"),
        service_name: Optional[str] = Query(default=None, alias="service-name"),
    ):
        """
        Generate a mock of an API.

        With ``open-api-url`` the OpenAPI document is downloaded and its title
        and description are mocked. With only ``service-name`` the name itself
        is mocked. ``open-api-url`` wins when both are given.
        """
        trace = get_trace(request)

        if open_api_url or not (service_name and service_name.strip()):
            if trace is not None:
                trace.set_attributes(**{"smg.mode": "spec", "smg.openapi_url": open_api_url})
            if not is_http_url(open_api_url):
                raise InputValidationError()

            document = await spec_fetcher.fetch(open_api_url, trace=trace)
            prompt = spec_prompt(document)
        else:
            if trace is not None:
                trace.set_attributes(**{"smg.mode": "service", "smg.service_name": service_name})
            prompt = service_name_prompt(service_name)

        completion = await completion_client.complete(
            app_config.OPENAI_SYSTEM_PROMPT, prompt, trace=trace
        )
        if completion is None:
            raise CompletionFailedError()

        content = first_choice_content(completion)
        if content is None:
            logger.info("Completion returned no usable choice, using fallback text")
            if trace is not None:
                trace.set_attribute("smg.fallback", True)
            content = GENERATION_FAILED_MESSAGE

        return MockResponse(response=content)

    return router
