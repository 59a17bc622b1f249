"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - The avatar cache is owned by the service, not a module global
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from soda_avatar.config import Settings
from soda_avatar.handlers import AvatarHandler
from soda_avatar.repositories import InMemoryAvatarRepository
from soda_avatar.services import AvatarService

logger = logging.getLogger(__name__)


def get_handler(request: Request) -> AvatarHandler:
    """Dependency injection for AvatarHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The AvatarHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "avatar_handler", None)
    if handler is None:
        raise RuntimeError("AvatarHandler not initialized. Check lifespan setup.")
    return handler


def build_avatar_service(settings: Settings) -> AvatarService:
    """Create the avatar service and its cache from settings."""
    repository = None
    if settings.cache_enabled:
        repository = InMemoryAvatarRepository(
            max_entries=settings.cache_max_entries_or_none,
            ttl=settings.cache_ttl_or_none,
        )
    return AvatarService.create(repository=repository, cache_enabled=settings.cache_enabled)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores in app.state:
    1. Service (cache + synthesizer) - app.state.avatar_service, unless one
       was injected before startup
    2. Handler (HTTP endpoints) - app.state.avatar_handler

    Args:
        app: The FastAPI application instance

    Yields:
        None

    Cleanup:
        Removes the handler and service from app.state on shutdown
    """
    settings: Settings = app.state.settings

    avatar_service = getattr(app.state, "avatar_service", None)
    if avatar_service is None:
        avatar_service = build_avatar_service(settings)
    avatar_handler = AvatarHandler(avatar_service=avatar_service)

    app.state.avatar_service = avatar_service
    app.state.avatar_handler = avatar_handler

    logger.info(
        "Avatar service initialized (cache=%s, max_entries=%s, ttl=%s)",
        "on" if avatar_service.repository is not None else "off",
        settings.cache_max_entries_or_none,
        settings.cache_ttl_or_none,
    )
    logger.info(
        "Rate limit: %s (%s)",
        settings.rate_limit,
        "enabled" if settings.rate_limit_enabled else "disabled",
    )

    yield

    del app.state.avatar_handler
    del app.state.avatar_service
    logger.info("Avatar service shut down")


# Type alias for cleaner dependency injection
HandlerDep = Annotated[AvatarHandler, Depends(get_handler)]
