from typing import Any

from fastapi import FastAPI, Query, Response
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from soda_avatar import __version__
from soda_avatar.api.dependencies import HandlerDep, lifespan
from soda_avatar.api.limiter import build_limiter
from soda_avatar.config import Settings, configure_logging, settings
from soda_avatar.dto import (
    CacheStatsResponse,
    ClearCacheResponse,
    DataUrlResponse,
    HealthCheckResponse,
)
from soda_avatar.services import AvatarService


def _params(
    name: str | None,
    shape: str | None,
    avatar_type: str | None,
    size: str | None,
) -> dict[str, str | None]:
    return {"name": name, "shape": shape, "type": avatar_type, "size": size}


async def root() -> dict[str, Any]:
    """Root endpoint with API information."""
    return {
        "name": "Soda Avatar API",
        "version": __version__,
        "description": "Deterministic SVG avatars generated from display names",
        "endpoints": {
            "avatar": "/avatar",
            "data_url": "/avatar/data-url",
            "html": "/avatar/html",
            "stats": "/stats",
            "health": "/health",
            "docs": "/docs",
        },
    }


async def health(handler: HandlerDep) -> HealthCheckResponse:
    """Health check endpoint."""
    return await handler.health_check()


async def get_avatar(
    handler: HandlerDep,
    name: str | None = Query(None, description="Display name (default: User)"),
    shape: str | None = Query(None, description="circle, square or rounded"),
    avatar_type: str | None = Query(
        None, alias="type", description="initials, pattern, emoji, gradient or icon"
    ),
    size: str | None = Query(None, description="Positive integer size in pixels (default: 64)"),
) -> Response:
    """Render an avatar as SVG."""
    return await handler.get_avatar(_params(name, shape, avatar_type, size))


async def get_avatar_data_url(
    handler: HandlerDep,
    name: str | None = Query(None),
    shape: str | None = Query(None),
    avatar_type: str | None = Query(None, alias="type"),
    size: str | None = Query(None),
) -> DataUrlResponse:
    """Render an avatar as a data URL suitable for an image source."""
    return await handler.get_data_url(_params(name, shape, avatar_type, size))


async def get_avatar_html(
    handler: HandlerDep,
    name: str | None = Query(None),
    shape: str | None = Query(None),
    avatar_type: str | None = Query(None, alias="type"),
    size: str | None = Query(None),
    render: str | None = Query(None, description="img, svg or div"),
) -> Response:
    """Render an avatar wrapped in an HTML fragment."""
    params = _params(name, shape, avatar_type, size)
    params["render"] = render
    return await handler.get_html(params)


async def get_stats(handler: HandlerDep) -> CacheStatsResponse:
    """Get avatar cache statistics."""
    return await handler.get_stats()


async def clear_cache(handler: HandlerDep) -> ClearCacheResponse:
    """Clear all cached avatars."""
    return await handler.clear_cache()


def add_routes(app: FastAPI) -> None:
    """Register the endpoints directly on the app.

    SlowAPIMiddleware resolves the endpoint of each route in ``app.routes``,
    so routes must not be nested inside an included router.
    """
    app.add_api_route("/", root, methods=["GET"])
    app.add_api_route("/health", health, methods=["GET"], response_model=HealthCheckResponse)
    app.add_api_route(
        "/avatar",
        get_avatar,
        methods=["GET"],
        response_class=Response,
        responses={200: {"content": {"image/svg+xml": {}}}},
    )
    app.add_api_route(
        "/avatar/data-url", get_avatar_data_url, methods=["GET"], response_model=DataUrlResponse
    )
    app.add_api_route(
        "/avatar/html",
        get_avatar_html,
        methods=["GET"],
        response_class=Response,
        responses={200: {"content": {"text/html": {}}}},
    )
    app.add_api_route("/stats", get_stats, methods=["GET"], response_model=CacheStatsResponse)
    app.add_api_route("/cache", clear_cache, methods=["DELETE"], response_model=ClearCacheResponse)


def create_app(
    app_settings: Settings | None = None,
    avatar_service: AvatarService | None = None,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        app_settings: Settings to use. Defaults to the environment settings.
        avatar_service: Pre-built service (for tests). Built in lifespan if None.

    Returns:
        The configured application
    """
    app_settings = app_settings or settings

    app = FastAPI(
        title="Soda Avatar API",
        description="Deterministic SVG avatars generated from display names",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    if avatar_service is not None:
        app.state.avatar_service = avatar_service

    limiter = build_limiter(app_settings)
    limiter.exempt(health)
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)  # type: ignore[arg-type]
    app.add_middleware(SlowAPIMiddleware)

    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=list(app_settings.cors_allow_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    add_routes(app)
    return app


configure_logging()
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "soda_avatar.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
