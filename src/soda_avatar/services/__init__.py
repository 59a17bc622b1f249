"""Service layer for business logic.

This layer puts the avatar store in front of the synthesizer.
Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Cache)
                  |
                  -> Synthesizer

Usage:
    ```python
    from soda_avatar.services import AvatarService

    # Using factory method (recommended)
    service = AvatarService.create()

    # Or manual creation, without any cache
    service = AvatarService(repository=None)
    ```
"""

from .avatar_service import AvatarService

__all__ = [
    "AvatarService",
]
