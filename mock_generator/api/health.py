"""Health check and info endpoints."""

from fastapi import APIRouter

from .. import __version__
from ..config import Config


def create_health_router(app_config: Config) -> APIRouter:
    """
    Create health check router.

    Args:
        app_config: Service configuration

    Returns:
        APIRouter with health endpoints
    """
    router = APIRouter()

    @router.get("/")
    async def root():
        """Root endpoint with service information."""
        return {
            "service": app_config.SERVICE_NAME,
            "version": __version__,
            "status": "running",
        }

    @router.get("/health")
    async def health():
        """Health check endpoint. Makes no outbound calls."""
        return {
            "status": "healthy",
            "completion_api_configured": app_config.has_credentials(),
        }

    return router
