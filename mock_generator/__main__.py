"""Entry point for running the mock generator service as a module."""

import uvicorn

from .config import config
from .api.app import create_app


def main():
    """Run the mock generator service."""
    app = create_app()

    uvicorn.run(
        app,
        host="0.0.0.0",
        port=config.PORT,
        log_level="info",
    )


if __name__ == "__main__":
    main()
