"""Handler layer for HTTP endpoints.

This layer contains the HTTP request/response handlers.
Handlers depend on services (business logic), not directly on repositories.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Cache)
"""

from .avatar_handler import AvatarHandler

__all__ = [
    "AvatarHandler",
]
