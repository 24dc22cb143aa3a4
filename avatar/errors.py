"""Error types raised by the avatar renderer and its adapters."""


class AvatarError(Exception):
    """Base class for avatar errors."""


class InvalidInputError(AvatarError, ValueError):
    """Raised when the input string is missing or blank."""


class UnsupportedSizeError(AvatarError, ValueError):
    """Raised when the requested canvas size is not 64 or 128."""


class InvalidTimestampError(AvatarError, ValueError):
    """Raised when a timestamp cannot be resolved to a UTC day."""


class EncodingError(AvatarError):
    """Raised when a finished canvas cannot be encoded."""
