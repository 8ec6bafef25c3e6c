import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from authflow.core.logging import setup_logging
from authflow.core.settings import settings
from authflow.oauth.registry import oauth_provider_registry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging(settings.log_level)
    logger.info("Application startup initiated")
    configured = [
        name
        for name in oauth_provider_registry.list_providers()
        if settings.provider_config(name).get("client_id")
    ]
    logger.info("OAuth providers with runtime credentials: %s", configured or "none")
    yield
    logger.info("Application shutdown initiated")
