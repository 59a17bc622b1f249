"""Repository layer for data access.

This layer holds the avatar store implementations behind the
protocol-based ``AvatarStore`` interface. This enables:
- Swapping the cache (unbounded, bounded, TTL, shared) without touching the service
- Unit testing with fake implementations
- Clear separation of concerns

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from soda_avatar.protocols import AvatarStore

from .memory_repository import InMemoryAvatarRepository

__all__ = [
    "AvatarStore",
    "InMemoryAvatarRepository",
]
