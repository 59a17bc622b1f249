import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


def _split_csv(value: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in value.split(",") if part.strip())


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "3000"))
    api_reload: bool = os.getenv("API_RELOAD", "false").lower() == "true"
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Rate limiting
    rate_limit: str = os.getenv("RATE_LIMIT", "100/minute")
    rate_limit_enabled: bool = os.getenv("RATE_LIMIT_ENABLED", "true").lower() == "true"
    trust_proxy_headers: bool = os.getenv("TRUST_PROXY_HEADERS", "true").lower() == "true"

    # Avatar cache (0 means no bound)
    cache_enabled: bool = os.getenv("AVATAR_CACHE_ENABLED", "true").lower() == "true"
    cache_max_entries: int = int(os.getenv("AVATAR_CACHE_MAX_ENTRIES", "0"))
    cache_ttl: float = float(os.getenv("AVATAR_CACHE_TTL", "0"))

    # CORS
    cors_allow_origins: tuple[str, ...] = field(
        default_factory=lambda: _split_csv(os.getenv("CORS_ALLOW_ORIGINS", "*"))
    )

    @property
    def cache_max_entries_or_none(self) -> int | None:
        """Return the entry bound, or None when the cache is unbounded."""
        return self.cache_max_entries or None

    @property
    def cache_ttl_or_none(self) -> float | None:
        """Return the entry TTL in seconds, or None when entries never expire."""
        return self.cache_ttl or None

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if not 0 < self.api_port < 65536:
            raise ValueError(f"API_PORT must be between 1 and 65535, got {self.api_port}")

        if self.cache_max_entries < 0:
            raise ValueError(
                f"AVATAR_CACHE_MAX_ENTRIES must be >= 0 (0 = unbounded), got {self.cache_max_entries}"
            )

        if self.cache_ttl < 0:
            raise ValueError(f"AVATAR_CACHE_TTL must be >= 0 (0 = never), got {self.cache_ttl}")

        if self.log_level not in logging.getLevelNamesMapping():
            raise ValueError(f"LOG_LEVEL must be a standard logging level, got {self.log_level}")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once for the application process."""
    logging.basicConfig(
        level=level or settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
