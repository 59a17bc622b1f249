"""HTTP handlers for avatar operations.

Handlers convert between query parameters (API contracts) and service calls.
They handle HTTP concerns like status codes, validation, and error handling.
"""

import logging
from typing import TypeVar

import pydantic
from fastapi import HTTPException, Response, status

from soda_avatar.dto import (
    AvatarQuery,
    CacheStatsResponse,
    ClearCacheResponse,
    DataUrlResponse,
    HealthCheckResponse,
    HtmlAvatarQuery,
)
from soda_avatar.exceptions import (
    InvalidInputError,
    UnsupportedRenderModeError,
    ValidationError,
)
from soda_avatar.services import AvatarService

logger = logging.getLogger(__name__)

SVG_MEDIA_TYPE = "image/svg+xml"

QueryT = TypeVar("QueryT", bound=AvatarQuery)

_CLIENT_ERRORS = (InvalidInputError, ValidationError, UnsupportedRenderModeError)


def parse_query(model: type[QueryT], params: dict[str, str | None]) -> QueryT:
    """Validate raw query strings, dropping missing ones so defaults apply.

    Raises:
        ValidationError: If a value cannot be coerced (e.g. a non-numeric size)
    """
    try:
        return model.model_validate({k: v for k, v in params.items() if v is not None})
    except pydantic.ValidationError as e:
        fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"])
        raise ValidationError(f"Invalid query parameter(s): {fields}") from e


class AvatarHandler:
    """HTTP handlers for avatar operations.

    This handler delegates business logic to AvatarService
    and handles HTTP-specific concerns like:
    - Parsing and defaulting query parameters
    - Setting the response media type
    - Translating domain errors to status codes

    Example:
        ```python
        from soda_avatar.services import AvatarService
        from soda_avatar.handlers import AvatarHandler

        handler = AvatarHandler(avatar_service=AvatarService.create())

        @app.get("/avatar")
        async def avatar(name: str | None = None, ...):
            return await handler.get_avatar({"name": name, ...})
        ```
    """

    def __init__(self, avatar_service: AvatarService) -> None:
        """Initialize the avatar handler.

        Args:
            avatar_service: The avatar service for business logic (required).
        """
        self._avatars = avatar_service

    async def get_avatar(self, params: dict[str, str | None]) -> Response:
        """Handle GET /avatar requests.

        Args:
            params: Raw query values (None for missing ones)

        Returns:
            Response with the SVG body and image/svg+xml media type

        Raises:
            HTTPException: 400 for invalid input, 500 for anything else
        """
        try:
            query = parse_query(AvatarQuery, params)
            svg = self._avatars.get_svg(query.to_entity())
        except _CLIENT_ERRORS as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
        except Exception as e:
            logger.exception("Failed to render avatar")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to render avatar: {e}",
            ) from e

        return Response(content=svg, media_type=SVG_MEDIA_TYPE, status_code=status.HTTP_200_OK)

    async def get_data_url(self, params: dict[str, str | None]) -> DataUrlResponse:
        """Handle GET /avatar/data-url requests."""
        try:
            query = parse_query(AvatarQuery, params)
            return DataUrlResponse(data_url=self._avatars.get_data_url(query.to_entity()))
        except _CLIENT_ERRORS as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
        except Exception as e:
            logger.exception("Failed to render avatar data URL")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to render avatar: {e}",
            ) from e

    async def get_html(self, params: dict[str, str | None]) -> Response:
        """Handle GET /avatar/html requests."""
        try:
            query = parse_query(HtmlAvatarQuery, params)
            html = self._avatars.get_html(query.to_entity(), render_as=query.render)
        except _CLIENT_ERRORS as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
        except Exception as e:
            logger.exception("Failed to render avatar HTML")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to render avatar: {e}",
            ) from e

        return Response(content=html, media_type="text/html")

    async def get_stats(self) -> CacheStatsResponse:
        """Handle GET /stats requests."""
        stats = self._avatars.get_stats()

        return CacheStatsResponse(
            cache_enabled=stats["cache_enabled"],
            total_entries=stats.get("total_entries", 0),
            max_entries=stats.get("max_entries"),
            ttl_seconds=stats.get("ttl"),
            evictions=stats.get("evictions", 0),
            total_queries=stats["total_queries"],
            cache_hits=stats["cache_hits"],
            cache_misses=stats["cache_misses"],
            hit_rate=stats["hit_rate"],
            avg_render_time_ms=stats["avg_render_time_ms"],
        )

    async def clear_cache(self) -> ClearCacheResponse:
        """Handle DELETE /cache requests."""
        count = self._avatars.clear()
        logger.info("Avatar cache cleared (%d entries)", count)

        return ClearCacheResponse(
            success=True,
            deleted_count=count,
            message="Cache cleared successfully",
        )

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests."""
        is_healthy = self._avatars.is_healthy()

        return HealthCheckResponse(
            status="healthy" if is_healthy else "unhealthy",
            synthesizer_healthy=is_healthy,
            cache_enabled=self._avatars.repository is not None,
        )
