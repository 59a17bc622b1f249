"""Deterministic SVG avatar synthesis.

Everything here is a pure function of its arguments: the same name, shape,
type and size always produce byte-identical markup. Colors, pattern cells,
emoji choice and gradient ids are all derived from a 32-bit hash of the name.
"""

from html import escape

from soda_avatar.entities import AvatarAppearance, AvatarType, HslColor, Shape
from soda_avatar.exceptions import InvalidInputError

SVG_NS = "http://www.w3.org/2000/svg"

BACKGROUND_SATURATION = 45
BACKGROUND_LIGHTNESS = 65
ACCENT_SATURATION = 30
ACCENT_LIGHTNESS = 30

PATTERN_GRID = 4
PATTERN_MIN_LIGHTNESS = 30
PATTERN_MAX_LIGHTNESS = 90

ROUNDED_RADIUS_RATIO = 0.125
INITIALS_FONT_RATIO = 0.38
EMOJI_FONT_RATIO = 0.56
ICON_PADDING_RATIO = 0.15

EMOJIS: tuple[str, ...] = (
    "😀", "😎", "🤩", "🚀", "🌈", "💡", "🌟", "🎉",
    "🐱", "🦊", "🐻", "🐼", "🦁", "🐯", "🦄", "🌸",
    "🌼", "☀️", "🌙", "🌊", "⚡", "🔥", "💧", "🍎",
    "🍕", "☕", "🎮", "🎵", "🎨", "📚", "⚽", "🏀",
    "🏈", "🎾", "🎳", "🎯", "🏆", "🥇", "🥈", "🥉",
    "🎁", "🎈", "💖", "💯", "✅", "✨", "💎", "👑",
)  # fmt: skip

# Generic "person" glyph drawn in a 24x24 box.
PERSON_ICON_PATH = (
    "M7.5 6a4.5 4.5 0 1 1 9 0 4.5 4.5 0 0 1-9 0ZM3.751 20.105a8.25 8.25 0 0 1 "
    "16.498 0 .75.75 0 0 1-.437.695A18.623 18.623 0 0 1 12 22.5a18.623 18.623 "
    "0 0 1-7.812-1.7.75.75 0 0 1-.438-.695Z"
)


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def _rem(value: int, divisor: int) -> int:
    """Remainder with the sign of the dividend (truncated division)."""
    result = abs(value) % divisor
    return -result if value < 0 else result


def format_number(value: float) -> str:
    """Format a number for an SVG attribute, dropping a trailing ``.0``."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def hash_code(text: str) -> int:
    """Hash a string to a signed 32-bit integer.

    Iterates UTF-16 code units computing ``unit + (hash << 5) - hash`` with
    two's-complement wraparound at every step.
    """
    data = text.encode("utf-16-le", "surrogatepass")
    result = 0
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        result = _to_int32(unit + (result << 5) - result)
    return result


def generate_avatar_data(name: str) -> AvatarAppearance:
    """Derive initials and colors from a display name.

    Args:
        name: The display name

    Returns:
        AvatarAppearance for the name

    Raises:
        InvalidInputError: If the name is empty or whitespace only
    """
    parts = name.split()
    if not parts:
        raise InvalidInputError("Name must contain at least one non-whitespace character")

    initials = parts[0][0] if len(parts) == 1 else parts[0][0] + parts[1][0]
    code = hash_code(name)
    hue = abs(code) % 360

    return AvatarAppearance(
        initials=initials.upper(),
        background_color=HslColor(hue, BACKGROUND_SATURATION, BACKGROUND_LIGHTNESS),
        accent_color=HslColor(hue, ACCENT_SATURATION, ACCENT_LIGHTNESS),
        hash_code=code,
    )


def pattern_cell_color(code: int, base: HslColor, row: int, col: int) -> HslColor:
    """Color of one cell of the 4x4 pattern grid."""
    light_var = _rem(_rem(code, 10) + row * 5 + col * 5, 40)
    light = max(
        PATTERN_MIN_LIGHTNESS,
        min(PATTERN_MAX_LIGHTNESS, base.lightness + light_var - 20),
    )
    hue = (base.hue + _rem(_rem(code, 7) * (row + col), 20)) % 360
    return HslColor(hue, base.saturation, light)


def generate_pattern_svg_content(name: str, base_color: HslColor, size: int) -> str:
    """Render the grid of shaded cells for the ``pattern`` type."""
    code = hash_code(name)
    cell = size / PATTERN_GRID
    cells = []
    for row in range(PATTERN_GRID):
        for col in range(PATTERN_GRID):
            color = pattern_cell_color(code, base_color, row, col)
            cells.append(
                f'<rect x="{format_number(col * cell)}" y="{format_number(row * cell)}" '
                f'width="{format_number(cell)}" height="{format_number(cell)}" fill="{color}"/>'
            )
    return "".join(cells)


def generate_icon_svg_content(color: HslColor, size: int) -> str:
    """Render the person glyph inset by 15% on each side."""
    pad = size * ICON_PADDING_RATIO
    icon = size - pad * 2
    return (
        f'<svg xmlns="{SVG_NS}" viewBox="0 0 24 24" fill="{color}" '
        f'width="{format_number(icon)}" height="{format_number(icon)}" '
        f'x="{format_number(pad)}" y="{format_number(pad)}">'
        f'<path fill-rule="evenodd" d="{PERSON_ICON_PATH}" clip-rule="evenodd"/></svg>'
    )


def emoji_for(code: int) -> str:
    """Pick the emoji for a hash code."""
    return EMOJIS[abs(code) % len(EMOJIS)]


def _outer_shape(shape: str, size: int) -> str:
    """Opening of the shape envelope, without fill and closing."""
    if shape == Shape.CIRCLE.value:
        half = format_number(size / 2)
        return f'<circle cx="{half}" cy="{half}" r="{half}"'
    if shape == Shape.SQUARE.value:
        return f'<rect width="{size}" height="{size}"'
    radius = format_number(size * ROUNDED_RADIUS_RATIO)
    return f'<rect width="{size}" height="{size}" rx="{radius}" ry="{radius}"'


def build_svg(name: str, shape: str, type: str, size: int = 64) -> str:
    """Build the complete SVG document for an avatar.

    Args:
        name: Display name the avatar is derived from
        shape: ``circle``, ``square``; anything else draws a rounded rectangle
        type: ``initials``, ``pattern``, ``emoji``, ``gradient`` or ``icon``;
            anything else draws the shape only
        size: Width and height in pixels

    Returns:
        Self-contained SVG markup

    Raises:
        InvalidInputError: If the name is blank
    """
    appearance = generate_avatar_data(name)
    background = appearance.background_color
    accent = appearance.accent_color
    code = appearance.hash_code

    defs = ""
    inner = ""
    fill = str(background)

    if type == AvatarType.INITIALS.value:
        inner = (
            '<text x="50%" y="50%" dominant-baseline="middle" text-anchor="middle" '
            f'font-family="Inter, sans-serif" font-size="{format_number(size * INITIALS_FONT_RATIO)}" '
            f'font-weight="bold" fill="{accent}">{escape(appearance.initials)}</text>'
        )
    elif type == AvatarType.PATTERN.value:
        inner = generate_pattern_svg_content(name, background, size)
    elif type == AvatarType.EMOJI.value:
        inner = (
            '<text x="50%" y="50%" dominant-baseline="middle" text-anchor="middle" '
            f'font-size="{format_number(size * EMOJI_FONT_RATIO)}">{emoji_for(code)}</text>'
        )
    elif type == AvatarType.GRADIENT.value:
        grad_id = f"grad{code}"
        end = HslColor((abs(code) * 7) % 360, 40, 70)
        defs = (
            f'<defs><linearGradient id="{grad_id}" x1="0" y1="0" x2="1" y2="1">'
            f'<stop offset="0%" stop-color="{background}"/>'
            f'<stop offset="100%" stop-color="{end}"/></linearGradient></defs>'
        )
        fill = f"url(#{grad_id})"
    elif type == AvatarType.ICON.value:
        inner = generate_icon_svg_content(accent, size)

    outer = f'{_outer_shape(shape, size)} fill="{fill}"/>'
    return (
        f'<svg xmlns="{SVG_NS}" width="{size}" height="{size}" viewBox="0 0 {size} {size}">'
        f"{defs}{outer}{inner}</svg>"
    )
