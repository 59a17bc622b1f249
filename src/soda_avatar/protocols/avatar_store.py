"""Avatar store protocol.

Defines the interface for any cache that holds rendered avatar markup
keyed by the request parameters.

Implementations can include:
- In-process map with optional size/TTL eviction (default)
- A shared cache such as Redis or memcached
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class AvatarStore(Protocol):
    """Protocol for rendered-avatar caches.

    Implementations must tolerate concurrent calls from a thread pool.
    Storing the same key twice is allowed; the later value wins.
    """

    def get(self, key: str) -> str | None:
        """Look up rendered markup.

        Args:
            key: The request cache key

        Returns:
            The stored SVG, or None on a miss
        """
        ...

    def set(self, key: str, svg: str) -> None:
        """Store rendered markup.

        Args:
            key: The request cache key
            svg: The rendered SVG
        """
        ...

    def clear(self) -> int:
        """Remove all entries.

        Returns:
            Number of entries removed
        """
        ...

    def count(self) -> int:
        """Count stored entries.

        Returns:
            Number of live entries
        """
        ...

    def get_stats(self) -> dict:
        """Get store statistics.

        Returns:
            Dictionary with stats (implementation-specific)
        """
        ...
