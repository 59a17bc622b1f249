"""Cache entry domain entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CacheEntryEntity:
    """Domain entity for a rendered avatar held by an avatar store.

    Attributes:
        key: The cache key built from the request parameters
        svg: The rendered SVG markup
        created_at: When this entry was stored (Unix timestamp)
    """

    key: str
    svg: str
    created_at: float

    def is_expired(self, now: float, ttl: float | None) -> bool:
        """Return True when the entry is older than ``ttl`` seconds."""
        return ttl is not None and now - self.created_at >= ttl
