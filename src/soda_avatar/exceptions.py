"""Exceptions raised by the avatar synthesizer and renderers."""


class SodaAvatarError(Exception):
    """Base class for all soda_avatar errors."""


class InvalidInputError(SodaAvatarError, ValueError):
    """Raised when a name contains no characters to build initials from."""


class ValidationError(SodaAvatarError, ValueError):
    """Raised when a request parameter (such as size) is malformed."""


class UnsupportedRenderModeError(SodaAvatarError):
    """Raised for an unknown render mode, or element mode without a host factory."""
