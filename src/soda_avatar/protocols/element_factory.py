"""Element factory protocol.

The element render mode needs a host that can construct UI elements.
Hosts without that capability simply do not provide a factory, and the
string-producing render modes stay available everywhere.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ElementFactory(Protocol):
    """Protocol for hosts able to wrap an avatar in a UI element."""

    def create_element(self, name: str, shape: str, size: int, svg: str) -> str:
        """Build an element holding the avatar.

        Args:
            name: Display name (used as the element title)
            shape: Requested shape, used for styling hooks
            size: Element width and height in pixels
            svg: Rendered SVG markup to embed

        Returns:
            The element's outer markup
        """
        ...
