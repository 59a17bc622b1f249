"""Domain entities for internal representation.

These are pure dataclasses (frozen) used internally by the synthesizer,
services and repositories. They are NOT used for API contracts - use DTOs
from the dto package for that.

Entities should have:
- No JSON serialization logic
- No Pydantic validation
- No external dependencies
"""

from .avatar import AvatarAppearance, AvatarRequest, AvatarType, HslColor, RenderMode, Shape
from .cache_entry import CacheEntryEntity

__all__ = [
    "AvatarAppearance",
    "AvatarRequest",
    "AvatarType",
    "CacheEntryEntity",
    "HslColor",
    "RenderMode",
    "Shape",
]
