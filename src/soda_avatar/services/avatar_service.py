"""Avatar service for core business logic.

This service orchestrates avatar rendering by coordinating the avatar store
(cache) and the synthesizer. It behaves identically with or without a store.
"""

import logging
import time
from collections.abc import Callable

from soda_avatar.config import settings
from soda_avatar.entities import AvatarRequest, RenderMode
from soda_avatar.models import PerformanceMetrics
from soda_avatar.protocols import AvatarStore, ElementFactory
from soda_avatar.renderers import MarkupElementFactory, svg_to_data_url, wrap_svg
from soda_avatar.repositories import InMemoryAvatarRepository
from soda_avatar.synthesizer import build_svg

logger = logging.getLogger(__name__)

Synthesizer = Callable[[str, str, str, int], str]


class AvatarService:
    """Core avatar orchestration service.

    This service depends on PROTOCOLS, not concrete implementations:
    - AvatarStore: in-memory map, bounded cache, shared cache, or None
    - ElementFactory: whatever the host offers for the element render mode

    Example:
        ```python
        from soda_avatar.entities import AvatarRequest
        from soda_avatar.services import AvatarService

        service = AvatarService.create()
        svg = service.get_svg(AvatarRequest(name="Ada Lovelace"))

        # Or with no cache in front of the synthesizer
        service = AvatarService(repository=None)
        ```
    """

    def __init__(
        self,
        repository: AvatarStore | None,
        synthesizer: Synthesizer = build_svg,
        element_factory: ElementFactory | None = None,
    ) -> None:
        """Initialize the avatar service.

        Args:
            repository: Avatar store used as a cache, or None to always render.
            synthesizer: Function producing SVG markup from the request fields.
            element_factory: Host capability for the element render mode.
        """
        self._repository = repository
        self._synthesize = synthesizer
        self._element_factory = element_factory
        self._metrics = PerformanceMetrics()

    @classmethod
    def create(
        cls,
        repository: AvatarStore | None = None,
        cache_enabled: bool | None = None,
    ) -> "AvatarService":
        """Factory method to create AvatarService with sensible defaults.

        Args:
            repository: Avatar store. If None and caching is enabled, an
                InMemoryAvatarRepository configured from settings is used.
            cache_enabled: Whether to cache at all. If None, uses settings.

        Returns:
            Configured AvatarService instance
        """
        enabled = settings.cache_enabled if cache_enabled is None else cache_enabled
        if enabled and repository is None:
            repository = InMemoryAvatarRepository.create()
        return cls(
            repository=repository if enabled else None,
            element_factory=MarkupElementFactory(),
        )

    def get_svg(self, request: AvatarRequest) -> str:
        """Return the SVG for a request, rendering it on a cache miss.

        Business logic:
        1. Look the request key up in the store
        2. On a miss, render with the synthesizer
        3. Store the result and return it

        Args:
            request: The avatar parameters

        Returns:
            The SVG markup

        Raises:
            InvalidInputError: If the name is blank
        """
        key = request.cache_key

        if self._repository is not None:
            cached = self._repository.get(key)
            if cached is not None:
                self._metrics.record_hit()
                logger.debug("Avatar cache hit: %s", key)
                return cached

        start_time = time.perf_counter()
        svg = self._synthesize(request.name, request.shape, request.type, request.size)
        self._metrics.record_miss((time.perf_counter() - start_time) * 1000)

        if self._repository is not None:
            self._repository.set(key, svg)
            logger.debug("Avatar cache miss, stored: %s", key)

        return svg

    def get_data_url(self, request: AvatarRequest) -> str:
        """Return the avatar as a data URL."""
        return svg_to_data_url(self.get_svg(request))

    def get_html(self, request: AvatarRequest, render_as: str = RenderMode.IMG.value) -> str:
        """Return the avatar wrapped as an HTML fragment.

        Raises:
            UnsupportedRenderModeError: For unknown modes, or the element mode
                when no element factory is configured
        """
        return wrap_svg(
            self.get_svg(request),
            request.name,
            request.shape,
            render_as,
            request.size,
            element_factory=self._element_factory,
        )

    def clear(self) -> int:
        """Clear all cached avatars and reset metrics.

        Returns:
            Number of entries deleted
        """
        count = self._repository.clear() if self._repository is not None else 0
        self._metrics.reset()
        return count

    def get_stats(self) -> dict:
        """Get cache statistics.

        Returns:
            Dictionary with store and hit/miss statistics
        """
        stats: dict = {"cache_enabled": self._repository is not None}
        if self._repository is not None:
            stats.update(self._repository.get_stats())
        else:
            stats["total_entries"] = 0
        stats.update(self._metrics.to_dict())
        return stats

    def is_healthy(self) -> bool:
        """Check that the synthesizer renders a known avatar.

        Returns:
            True if rendering succeeds, False otherwise
        """
        try:
            return self._synthesize("User", "circle", "initials", 64).startswith("<svg")
        except Exception:
            logger.exception("Avatar health check failed")
            return False

    @property
    def repository(self) -> AvatarStore | None:
        """Get the underlying repository (for testing)."""
        return self._repository

    @property
    def metrics(self) -> PerformanceMetrics:
        """Get the hit/miss metrics."""
        return self._metrics
