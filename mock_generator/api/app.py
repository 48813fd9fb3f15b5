"""FastAPI application factory and setup."""

from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import Config, config
from ..core.completion_client import CompletionClient
from ..core.spec_fetcher import SpecFetcher
from ..errors import MockGeneratorError
from ..utils.logging import setup_logging, get_logger
from .generate import create_generate_router
from .health import create_health_router
from .middleware.telemetry import create_telemetry_middleware, get_trace

# Setup logging
setup_logging()
logger = get_logger(__name__)


def create_app(
    app_config: Optional[Config] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_config: Service configuration, defaults to the environment config
        transport: Optional httpx transport for all outbound calls

    Returns:
        Configured FastAPI application
    """
    app_config = app_config or config

    # One pooled client shared by every request
    http_client = httpx.AsyncClient(transport=transport)
    spec_fetcher = SpecFetcher(http_client, app_config)
    completion_client = CompletionClient(http_client, app_config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup and shutdown events."""
        logger.info("Starting mock generator service...")
        logger.info(f"Service name: {app_config.SERVICE_NAME}")
        logger.info(f"Completion endpoint: {app_config.completions_url}")
        logger.info(f"Model: {app_config.OPENAI_MODEL} (max_tokens={app_config.OPENAI_MAX_TOKENS})")
        logger.info(f"Completion API key configured: {app_config.has_credentials()}")
        if not app_config.has_credentials():
            logger.warning("OPENAI_API_KEY is not set, completion calls will be rejected")
        yield
        logger.info("Shutting down mock generator service...")
        await http_client.aclose()

    # Create FastAPI app
    app = FastAPI(
        title="Service Mock Generator",
        description="Mocks an API based on its OpenAPI description",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.http_client = http_client

    app.middleware("http")(create_telemetry_middleware(app_config))

    @app.exception_handler(MockGeneratorError)
    async def mock_generator_error_handler(request: Request, exc: MockGeneratorError):
        trace = get_trace(request)
        if trace is not None:
            trace.set_error(exc.message, exc.error_type)
        return JSONResponse(status_code=500, content={"error": exc.message})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled error: {exc}", exc_info=exc)
        return JSONResponse(status_code=500, content={"error": str(exc)})

    # Register routers
    app.include_router(create_health_router(app_config), tags=["Health"])
    app.include_router(
        create_generate_router(spec_fetcher, completion_client, app_config),
        tags=["Generate"],
    )

    return app
