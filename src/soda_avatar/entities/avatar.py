"""Avatar domain entities."""

from dataclasses import dataclass
from enum import Enum
from urllib.parse import quote

CACHE_KEY_SEPARATOR = "|"


class Shape(str, Enum):
    """Recognized shape envelopes. Any other value renders as ROUNDED."""

    CIRCLE = "circle"
    SQUARE = "square"
    ROUNDED = "rounded"


class AvatarType(str, Enum):
    """Recognized inner content types. Any other value renders the shape only."""

    INITIALS = "initials"
    PATTERN = "pattern"
    EMOJI = "emoji"
    GRADIENT = "gradient"
    ICON = "icon"


class RenderMode(str, Enum):
    """Output modes for HTML fragments."""

    SVG = "svg"
    IMG = "img"
    ELEMENT = "div"


@dataclass(frozen=True)
class HslColor:
    """Hue/saturation/lightness color with integer components.

    Attributes:
        hue: Hue in degrees
        saturation: Saturation percentage
        lightness: Lightness percentage
    """

    hue: int
    saturation: int
    lightness: int

    def __str__(self) -> str:
        return f"hsl({self.hue}, {self.saturation}%, {self.lightness}%)"


@dataclass(frozen=True)
class AvatarAppearance:
    """Colors and initials derived from a display name.

    Attributes:
        initials: One or two uppercase characters
        background_color: Fill of the outer shape
        accent_color: Fill of text and icon content
        hash_code: Signed 32-bit hash of the name
    """

    initials: str
    background_color: HslColor
    accent_color: HslColor
    hash_code: int


@dataclass(frozen=True)
class AvatarRequest:
    """Parameters of a single avatar rendering.

    ``shape`` and ``type`` are kept as raw strings: unknown values are valid
    and degrade to a rounded rectangle and a shape-only avatar respectively.
    """

    name: str
    shape: str = Shape.CIRCLE.value
    type: str = AvatarType.INITIALS.value
    size: int = 64

    @property
    def cache_key(self) -> str:
        """Key identifying this parameter combination.

        Each field is percent-quoted so that a separator inside a name cannot
        make two different requests share a key.
        """
        fields = (self.name, self.shape, self.type, str(self.size))
        return CACHE_KEY_SEPARATOR.join(quote(value, safe="") for value in fields)
