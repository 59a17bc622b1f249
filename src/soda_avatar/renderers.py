"""Output helpers built on top of the synthesizer.

All helpers are pure: they call ``build_svg`` and wrap the result as a data
URL or an HTML fragment. The element mode is the one exception to universal
availability and requires an ``ElementFactory`` supplied by the host.
"""

from html import escape
from urllib.parse import quote

from soda_avatar.entities import RenderMode, Shape
from soda_avatar.exceptions import UnsupportedRenderModeError
from soda_avatar.protocols import ElementFactory
from soda_avatar.synthesizer import ROUNDED_RADIUS_RATIO, build_svg, format_number

DATA_URL_PREFIX = "data:image/svg+xml;charset=utf-8,"

# Characters encodeURIComponent leaves alone, minus the single quote.
_DATA_URL_SAFE = "!*()"


def get_svg_string(name: str, shape: str, type: str, size: int = 64) -> str:
    """Return the raw SVG markup."""
    return build_svg(name, shape, type, size)


def svg_to_data_url(svg: str) -> str:
    """Percent-encode SVG markup into a data URL usable as an image source."""
    return DATA_URL_PREFIX + quote(svg, safe=_DATA_URL_SAFE)


def get_svg_data_url(name: str, shape: str, type: str, size: int = 64) -> str:
    """Return the avatar as a ``data:image/svg+xml`` URL."""
    return svg_to_data_url(build_svg(name, shape, type, size))


def border_radius_for(shape: str, size: int) -> str:
    """CSS border radius matching the shape envelope."""
    if shape == Shape.CIRCLE.value:
        return "50%"
    if shape == Shape.ROUNDED.value:
        return f"{format_number(size * ROUNDED_RADIUS_RATIO)}px"
    return "0"


def img_tag(name: str, shape: str, size: int, svg: str) -> str:
    """Wrap rendered SVG in an ``<img>`` tag pointing at its data URL."""
    title = escape(name)
    return (
        f'<img src="{svg_to_data_url(svg)}" alt="Avatar of {title}" title="{title}" '
        f'style="width:{size}px;height:{size}px;border-radius:{border_radius_for(shape, size)};'
        f'box-shadow:0 2px 6px rgba(0,0,0,.15);">'
    )


class MarkupElementFactory:
    """Element factory for server-side hosts that emit HTML markup.

    Produces the same ``div`` wrapper a browser host would construct.
    """

    def create_element(self, name: str, shape: str, size: int, svg: str) -> str:
        return (
            f'<div class="sa-avatar sa-{escape(shape)}" '
            f'style="width:{size}px;height:{size}px" title="{escape(name)}">{svg}</div>'
        )


def wrap_svg(
    svg: str,
    name: str,
    shape: str,
    render_as: str,
    size: int,
    element_factory: ElementFactory | None = None,
) -> str:
    """Wrap already rendered SVG according to ``render_as``.

    Raises:
        UnsupportedRenderModeError: For unknown modes, or the element mode
            without a factory
    """
    if render_as == RenderMode.IMG.value:
        return img_tag(name, shape, size, svg)
    if render_as == RenderMode.SVG.value:
        return svg
    if render_as == RenderMode.ELEMENT.value:
        if element_factory is None:
            raise UnsupportedRenderModeError(
                "Element render mode requires a host element factory"
            )
        return element_factory.create_element(name, shape, size, svg)
    raise UnsupportedRenderModeError(f"Unknown render mode: {render_as!r}")


def get_html_string(
    name: str,
    shape: str,
    type: str,
    render_as: str = RenderMode.ELEMENT.value,
    size: int = 64,
    element_factory: ElementFactory | None = None,
) -> str:
    """Return the avatar as an HTML fragment.

    Args:
        name: Display name
        shape: Shape envelope
        type: Inner content type
        render_as: ``img``, ``svg`` or ``div`` (element mode)
        size: Size in pixels
        element_factory: Host capability required by the element mode

    Returns:
        The HTML fragment

    Raises:
        UnsupportedRenderModeError: For unknown modes, or the element mode
            without a factory
        InvalidInputError: If the name is blank
    """
    return wrap_svg(
        build_svg(name, shape, type, size),
        name,
        shape,
        render_as,
        size,
        element_factory=element_factory,
    )
