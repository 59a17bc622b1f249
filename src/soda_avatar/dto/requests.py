"""Request DTOs for API endpoints."""

import re

from pydantic import BaseModel, Field, field_validator

from soda_avatar.entities import AvatarRequest, RenderMode

MAX_SIZE = 4096

_DIGITS = re.compile(r"[0-9]+")


class AvatarQuery(BaseModel):
    """Query parameters accepted by the avatar endpoints.

    The handler builds this from the raw query strings so that a bad
    ``size`` is reported as a 400 rather than FastAPI's 422.
    """

    name: str = Field("User", description="Display name the avatar is derived from")
    shape: str = Field("circle", description="circle, square or rounded")
    type: str = Field("initials", description="initials, pattern, emoji, gradient or icon")
    size: int = Field(64, description="Width and height in pixels", gt=0, le=MAX_SIZE)

    @field_validator("size", mode="before")
    @classmethod
    def size_must_be_digits(cls, value):
        # Lax int parsing would accept "+64", " 64" and "6_4".
        if isinstance(value, str) and not _DIGITS.fullmatch(value):
            raise ValueError("size must be a positive integer")
        return value

    def to_entity(self) -> AvatarRequest:
        """Convert to the internal request entity."""
        return AvatarRequest(name=self.name, shape=self.shape, type=self.type, size=self.size)


class HtmlAvatarQuery(AvatarQuery):
    """Query parameters for the HTML fragment endpoint."""

    render: str = Field(RenderMode.IMG.value, description="img, svg or div")
