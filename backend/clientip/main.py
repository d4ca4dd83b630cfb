"""
clientip Backend - Client Address Resolution
Reports the client address a request would be attributed to behind proxies.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI

from clientip.config import settings, validate_settings
from clientip.routers import client, health
from clientip.logging_config import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    # Validate settings before anything reads them
    validate_settings(settings)

    setup_logging()

    yield


def create_app() -> FastAPI:
    """Application factory"""
    app = FastAPI(
        title="clientip",
        description="Client address resolution behind proxies",
        version="1.0.0",
        docs_url="/docs" if settings.ENABLE_DOCS else None,
        redoc_url=None,
        openapi_url="/openapi.json" if settings.ENABLE_DOCS else None,
        lifespan=lifespan
    )

    # Register routers
    app.include_router(health.router, tags=["health"])
    app.include_router(client.router, tags=["client"])

    return app


app = create_app()
