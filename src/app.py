"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from src.api.routers import api_router
from src.config.settings import Settings, get_settings
from src.infrastructure.http.client import close_shared_client
from src.infrastructure.logging.logger import setup_logging

settings = get_settings()

setup_logging(
    level=settings.log_level,
    json_output=not settings.debug,
    silence_noisy_loggers=True,
)

logger = logging.getLogger(__name__)


def _validate_startup_config(settings: Settings) -> None:
    """Validate required configuration at startup."""
    if not settings.contrast_api_url or not settings.contrast_organization_id:
        logger.warning(
            "contrast_api_url or contrast_organization_id is empty, route retrieval will fail"
        )
    if not settings.openshift_api_url:
        logger.warning("openshift_api_url is empty, base URL lookups will fail")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup and shutdown lifecycle."""
    logger.info("Starting Route Verifier")
    _validate_startup_config(settings)
    yield
    logger.info("Shutting down Route Verifier")
    try:
        await close_shared_client()
        logger.info("Shared HTTP client closed")
    except Exception as e:
        logger.error("Error closing shared HTTP client: %s", e, exc_info=True)


app = FastAPI(
    title="Route Verifier",
    description="Post-deployment verification of a service's GET routes",
    version=settings.app_version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials="*" not in settings.allowed_origins,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
    max_age=3600,
)

app.add_middleware(ProxyHeadersMiddleware, trusted_hosts=["*"])

app.include_router(api_router, prefix="/api")
