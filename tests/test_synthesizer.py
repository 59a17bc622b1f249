"""
Tests for the deterministic SVG synthesizer.
"""

import re

import pytest

from soda_avatar.entities import HslColor
from soda_avatar.exceptions import InvalidInputError
from soda_avatar.synthesizer import (
    EMOJIS,
    build_svg,
    emoji_for,
    format_number,
    generate_avatar_data,
    generate_pattern_svg_content,
    hash_code,
    pattern_cell_color,
)

NAMES = ["User", "Ada Lovelace", "Zoe", "  spaced   out  ", "José Álvarez", "李小龙", "😀 Smile", "x" * 200]
SHAPES = ["circle", "square", "rounded", "hexagon"]
TYPES = ["initials", "pattern", "emoji", "gradient", "icon", "unknown"]

USER_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="64" height="64" viewBox="0 0 64 64">'
    '<circle cx="32" cy="32" r="32" fill="hsl(355, 45%, 65%)"/>'
    '<text x="50%" y="50%" dominant-baseline="middle" text-anchor="middle" '
    'font-family="Inter, sans-serif" font-size="24.32" font-weight="bold" '
    'fill="hsl(355, 30%, 30%)">U</text></svg>'
)


def test_hash_known_values():
    """Test the hash recurrence on hand-computed inputs."""
    assert hash_code("") == 0
    assert hash_code("U") == 85
    assert hash_code("User") == 2645995


def test_hash_uses_utf16_code_units():
    """Test astral characters hash as their surrogate pair."""
    assert hash_code("😀") == 56832 + 55357 * 31


def test_hash_accepts_lone_surrogates():
    """Test unpaired surrogates hash as their code unit."""
    assert hash_code("\ud800") == 0xD800
    assert "<svg" in build_svg("\ud800 x", "circle", "initials", 64)


def test_hash_wraps_to_int32():
    """Test long strings stay within the signed 32-bit range."""
    for text in NAMES + ["z" * 1000, "￿" * 50]:
        value = hash_code(text)
        assert -(2**31) <= value < 2**31


def test_hash_is_stable_and_order_independent():
    """Test the hash does not depend on prior calls."""
    first = hash_code("Grace Hopper")
    for name in NAMES:
        hash_code(name)
    assert hash_code("Grace Hopper") == first


def test_initials():
    """Test initials derivation."""
    assert generate_avatar_data("Ada Lovelace").initials == "AL"
    assert generate_avatar_data("Zoe").initials == "Z"
    assert generate_avatar_data("  grace   brewster hopper ").initials == "GB"
    assert generate_avatar_data("élodie").initials == "É"


@pytest.mark.parametrize("name", ["", "   ", "\t\n"])
def test_blank_name_rejected(name):
    """Test blank names raise InvalidInputError."""
    with pytest.raises(InvalidInputError):
        generate_avatar_data(name)
    with pytest.raises(InvalidInputError):
        build_svg(name, "circle", "initials", 64)


@pytest.mark.parametrize("name", NAMES)
def test_color_ranges(name):
    """Test hue range and fixed lightness."""
    appearance = generate_avatar_data(name)
    assert 0 <= appearance.background_color.hue < 360
    assert appearance.background_color.hue == appearance.accent_color.hue
    assert appearance.background_color.lightness == 65
    assert appearance.background_color.saturation == 45
    assert appearance.accent_color.lightness == 30
    assert appearance.accent_color.saturation == 30


@pytest.mark.parametrize("code", [0, 1, -1, -7, 2645995, -123456789, 2**31 - 1, -(2**31)])
def test_pattern_cell_bounds(code):
    """Test every pattern cell stays within lightness [30, 90] and hue [0, 360)."""
    for base in (HslColor(0, 45, 65), HslColor(5, 45, 65), HslColor(359, 45, 65)):
        for row in range(4):
            for col in range(4):
                color = pattern_cell_color(code, base, row, col)
                assert 30 <= color.lightness <= 90
                assert 0 <= color.hue < 360
                assert color.saturation == base.saturation


def test_pattern_cell_arithmetic():
    """Test cell colors for "User" (hash % 10 == 5, hash % 7 == 2)."""
    base = generate_avatar_data("User").background_color
    code = hash_code("User")
    assert pattern_cell_color(code, base, 0, 0) == HslColor(355, 45, 50)
    assert pattern_cell_color(code, base, 3, 3) == HslColor(7, 45, 80)


def test_pattern_cell_negative_hash_uses_truncated_remainder():
    """Test a negative hash lowers lightness the way signed remainders do."""
    base = HslColor(100, 45, 65)
    # -7 % 10 -> -7, so lightVar = -7 and light = 65 - 7 - 20
    assert pattern_cell_color(-7, base, 0, 0).lightness == 38


def test_pattern_grid_layout():
    """Test the pattern is 16 cells of size / 4."""
    base = generate_avatar_data("User").background_color
    content = generate_pattern_svg_content("User", base, 64)
    rects = re.findall(r"<rect [^>]*/>", content)
    assert len(rects) == 16
    assert all('width="16" height="16"' in rect for rect in rects)
    assert 'x="48" y="48"' in rects[-1]


def test_emoji_index_bounds():
    """Test the emoji index for extreme hash codes."""
    assert len(EMOJIS) == 48
    for code in (0, 47, 48, -1, 2**31 - 1, -(2**31)):
        assert emoji_for(code) in EMOJIS
    assert emoji_for(-(2**31)) == EMOJIS[32]


def test_format_number():
    """Test integral floats drop the trailing .0."""
    assert format_number(32.0) == "32"
    assert format_number(24.32) == "24.32"
    assert format_number(8) == "8"
    assert format_number(12.5) == "12.5"


def test_end_to_end_user_avatar():
    """Test the default avatar renders byte-for-byte."""
    assert build_svg("User", "circle", "initials", 64) == USER_SVG


@pytest.mark.parametrize("shape", SHAPES)
@pytest.mark.parametrize("avatar_type", TYPES)
def test_determinism(shape, avatar_type):
    """Test repeated calls produce identical output."""
    for name in NAMES:
        assert build_svg(name, shape, avatar_type, 96) == build_svg(name, shape, avatar_type, 96)


@pytest.mark.parametrize("size", [16, 64, 100, 257])
def test_envelope(size):
    """Test root element dimensions and the shape envelopes."""
    circle = build_svg("Ada", "circle", "initials", size)
    assert circle.startswith(
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{size}" height="{size}" '
        f'viewBox="0 0 {size} {size}">'
    )
    assert circle.endswith("</svg>")
    assert f'r="{format_number(size / 2)}"' in circle

    square = build_svg("Ada", "square", "initials", size)
    assert f'<rect width="{size}" height="{size}" fill=' in square
    assert "rx=" not in square

    radius = format_number(size * 0.125)
    for shape in ("rounded", "hexagon"):
        rounded = build_svg("Ada", shape, "initials", size)
        assert f'<rect width="{size}" height="{size}" rx="{radius}" ry="{radius}"' in rounded


def test_type_initials():
    """Test initials type has exactly one text element and nothing else."""
    svg = build_svg("Ada Lovelace", "circle", "initials", 64)
    assert svg.count("<text") == 1
    assert ">AL</text>" in svg
    assert "<rect" not in svg
    assert "<path" not in svg
    assert "<defs>" not in svg


def test_type_initials_escapes_markup():
    """Test initials are escaped as XML text."""
    svg = build_svg("<b", "circle", "initials", 64)
    assert ">&lt;</text>" in svg


def test_type_gradient():
    """Test gradient type defines one gradient referenced by the shape."""
    svg = build_svg("User", "square", "gradient", 64)
    assert svg.count("<linearGradient") == 1
    assert '<linearGradient id="grad2645995" x1="0" y1="0" x2="1" y2="1">' in svg
    assert '<stop offset="0%" stop-color="hsl(355, 45%, 65%)"/>' in svg
    assert '<stop offset="100%" stop-color="hsl(325, 40%, 70%)"/>' in svg
    assert 'fill="url(#grad2645995)"/>' in svg
    assert "<text" not in svg


def test_type_emoji():
    """Test emoji type renders the selected glyph."""
    svg = build_svg("User", "circle", "emoji", 64)
    assert 'font-size="35.84"' in svg
    assert f">{EMOJIS[2645995 % 48]}</text>" in svg


def test_type_icon():
    """Test icon type nests the person glyph inset by 15%."""
    svg = build_svg("User", "circle", "icon", 100)
    assert 'viewBox="0 0 24 24" fill="hsl(355, 30%, 30%)" width="70" height="70" x="15" y="15"' in svg
    assert svg.count("<path") == 1


def test_type_pattern():
    """Test pattern type draws the 4x4 grid over the shape."""
    svg = build_svg("User", "circle", "pattern", 64)
    assert svg.count("<rect") == 16


def test_unknown_type_renders_shape_only():
    """Test an unrecognized type yields only the outer shape."""
    svg = build_svg("User", "circle", "sparkles", 64)
    assert svg == (
        '<svg xmlns="http://www.w3.org/2000/svg" width="64" height="64" viewBox="0 0 64 64">'
        '<circle cx="32" cy="32" r="32" fill="hsl(355, 45%, 65%)"/></svg>'
    )
