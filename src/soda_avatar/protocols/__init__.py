"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Swapping the avatar store (in-memory, bounded, or none at all)
- Plugging in a host-specific element constructor for the element render mode
- Unit testing with fake implementations

Usage:
    ```python
    from soda_avatar.protocols import AvatarStore, ElementFactory

    store: AvatarStore = InMemoryAvatarRepository()
    factory: ElementFactory = MarkupElementFactory()
    ```
"""

from .avatar_store import AvatarStore
from .element_factory import ElementFactory

__all__ = [
    "AvatarStore",
    "ElementFactory",
]
