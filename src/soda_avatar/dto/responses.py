"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field


class DataUrlResponse(BaseModel):
    """Response DTO for the data URL endpoint."""

    data_url: str = Field(..., description="The avatar as a data:image/svg+xml URL")


class CacheStatsResponse(BaseModel):
    """Response DTO for avatar cache statistics."""

    cache_enabled: bool = Field(..., description="Whether a store sits in front of the synthesizer")
    total_entries: int = Field(..., description="Number of cached avatars", ge=0)
    max_entries: int | None = Field(None, description="Entry bound (null = unbounded)")
    ttl_seconds: float | None = Field(None, description="Entry TTL (null = never expires)")
    evictions: int = Field(0, description="Entries evicted or expired so far", ge=0)
    total_queries: int = Field(..., ge=0)
    cache_hits: int = Field(..., ge=0)
    cache_misses: int = Field(..., ge=0)
    hit_rate: float = Field(..., ge=0.0, le=1.0)
    avg_render_time_ms: float = Field(..., ge=0.0)


class ClearCacheResponse(BaseModel):
    """Response DTO for clearing the avatar cache."""

    success: bool = Field(..., description="Whether the operation succeeded")
    deleted_count: int = Field(..., description="Number of entries removed", ge=0)
    message: str = Field(..., description="Human-readable status message")


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    synthesizer_healthy: bool = Field(..., description="Whether a reference avatar renders")
    cache_enabled: bool = Field(..., description="Whether the avatar cache is active")
