"""
Render entry point.

render() validates its preconditions, derives the digest and hands it to the
compositor. Everything after validation is a pure function of
(input, time_key, size).
"""

from dataclasses import dataclass

from PIL import Image

from .canvas import Canvas
from .compositor import generate_avatar
from .core import DEFAULT_SIZE, SUPPORTED_SIZES, get_logger
from .errors import InvalidInputError, UnsupportedSizeError
from .seed import hash_input

log = get_logger("render")


@dataclass(frozen=True)
class RenderResult:
    canvas: Canvas
    digest: bytes
    time_key: str
    size: int

    @property
    def hex_digest(self) -> str:
        return self.digest.hex()

    def to_image(self) -> Image.Image:
        return self.canvas.to_image()


def validate_input(input: str) -> str:
    """Return the stripped input; raise InvalidInputError when blank."""
    if input is None or not input.strip():
        raise InvalidInputError("missing input")
    return input.strip()


def validate_size(size: int) -> int:
    if isinstance(size, bool) or not isinstance(size, int):
        raise UnsupportedSizeError(f"size must be an integer, got {size!r}")
    if size not in SUPPORTED_SIZES:
        raise UnsupportedSizeError(f"size must be 64 or 128, got {size}")
    return size


def render(input: str, time_key: str, size: int = DEFAULT_SIZE) -> RenderResult:
    """
    Render the avatar for input on the day time_key.

    Args:
        input: Any non-blank string; surrounding whitespace is ignored.
        time_key: UTC day key (YYYY-MM-DD), see seed.resolve_time_key.
        size: 64 or 128.

    Returns:
        RenderResult: canvas plus the digest that produced it.

    Raises:
        InvalidInputError: input is blank.
        UnsupportedSizeError: size is not 64 or 128.
    """
    input = validate_input(input)
    size = validate_size(size)

    digest = hash_input(input, time_key)
    canvas = generate_avatar(digest, size)
    log.debug(f"rendered size={size} time_key={time_key} hash={digest.hex()[:12]}")
    return RenderResult(canvas=canvas, digest=digest, time_key=time_key, size=size)
