"""Soda Avatar - deterministic SVG avatars from display names.

This package provides a layered architecture:

Layers:
    - synthesizer: Pure SVG generation (hashing, colors, content, envelope)
    - renderers: Data URL and HTML fragment helpers over the synthesizer
    - protocols: Interface contracts (AvatarStore, ElementFactory)
    - repositories: Avatar store implementations
    - services: Cache-then-render business logic
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from soda_avatar import build_svg

    svg = build_svg("Ada Lovelace", "circle", "initials", 64)
    ```

For HTTP API:
    ```python
    from soda_avatar.api.app import app
    ```
"""

__version__ = "0.1.0"

from soda_avatar.config import settings
from soda_avatar.entities import AvatarAppearance, AvatarRequest, AvatarType, HslColor, RenderMode, Shape
from soda_avatar.exceptions import (
    InvalidInputError,
    SodaAvatarError,
    UnsupportedRenderModeError,
    ValidationError,
)
from soda_avatar.handlers import AvatarHandler
from soda_avatar.protocols import AvatarStore, ElementFactory
from soda_avatar.renderers import (
    MarkupElementFactory,
    get_html_string,
    get_svg_data_url,
    get_svg_string,
)
from soda_avatar.repositories import InMemoryAvatarRepository
from soda_avatar.services import AvatarService
from soda_avatar.synthesizer import build_svg, generate_avatar_data, hash_code

__all__ = [
    "__version__",
    # Configuration
    "settings",
    # Synthesizer
    "build_svg",
    "generate_avatar_data",
    "hash_code",
    # Renderers
    "get_svg_string",
    "get_svg_data_url",
    "get_html_string",
    "MarkupElementFactory",
    # Protocols (interfaces)
    "AvatarStore",
    "ElementFactory",
    # Services (business logic)
    "AvatarService",
    # Handlers (HTTP)
    "AvatarHandler",
    # Repositories (cache)
    "InMemoryAvatarRepository",
    # Entities (domain models)
    "AvatarAppearance",
    "AvatarRequest",
    "AvatarType",
    "HslColor",
    "RenderMode",
    "Shape",
    # Errors
    "SodaAvatarError",
    "InvalidInputError",
    "ValidationError",
    "UnsupportedRenderModeError",
]
