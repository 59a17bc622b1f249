"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request/response validation and serialization.

Internal domain logic should use entities from the entities package.
"""

from .requests import AvatarQuery, HtmlAvatarQuery
from .responses import (
    CacheStatsResponse,
    ClearCacheResponse,
    DataUrlResponse,
    HealthCheckResponse,
)

__all__ = [
    "AvatarQuery",
    "HtmlAvatarQuery",
    "CacheStatsResponse",
    "ClearCacheResponse",
    "DataUrlResponse",
    "HealthCheckResponse",
]
