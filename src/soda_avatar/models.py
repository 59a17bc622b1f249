import threading
from dataclasses import dataclass, field


@dataclass
class PerformanceMetrics:
    """Track hit/miss and render timing for avatar lookups."""

    total_queries: int = 0
    cache_hits: int = 0
    cache_misses: int = 0
    total_render_time_ms: float = 0.0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    @property
    def hit_rate(self) -> float:
        """Calculate cache hit rate."""
        if self.total_queries == 0:
            return 0.0
        return self.cache_hits / self.total_queries

    @property
    def avg_render_time_ms(self) -> float:
        """Calculate average render time over misses."""
        if self.cache_misses == 0:
            return 0.0
        return self.total_render_time_ms / self.cache_misses

    def record_hit(self) -> None:
        """Record a cache hit."""
        with self._lock:
            self.total_queries += 1
            self.cache_hits += 1

    def record_miss(self, render_time_ms: float) -> None:
        """Record a cache miss and the time spent rendering."""
        with self._lock:
            self.total_queries += 1
            self.cache_misses += 1
            self.total_render_time_ms += render_time_ms

    def reset(self) -> None:
        """Reset all counters."""
        with self._lock:
            self.total_queries = 0
            self.cache_hits = 0
            self.cache_misses = 0
            self.total_render_time_ms = 0.0

    def to_dict(self) -> dict[str, float | int]:
        """Convert metrics to dictionary."""
        with self._lock:
            return {
                "total_queries": self.total_queries,
                "cache_hits": self.cache_hits,
                "cache_misses": self.cache_misses,
                "hit_rate": self.hit_rate,
                "avg_render_time_ms": self.avg_render_time_ms,
            }
