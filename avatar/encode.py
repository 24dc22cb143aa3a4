"""PNG encoding for finished canvases."""

import io
from pathlib import Path
from typing import Union

from .canvas import Canvas
from .core import get_logger
from .errors import EncodingError

log = get_logger("encode")


def encode_png(canvas: Canvas) -> bytes:
    """Encode canvas as PNG bytes; Pillow failures become EncodingError."""
    buf = io.BytesIO()
    try:
        canvas.to_image().save(buf, format="PNG")
    except (OSError, ValueError) as e:
        log.error(f"PNG encoding failed: {e}")
        raise EncodingError(f"failed to encode image: {e}") from e
    return buf.getvalue()


def save_png(canvas: Canvas, path: Union[str, Path]) -> Path:
    """Write canvas as a PNG file, creating parent directories."""
    out = Path(path)
    data = encode_png(canvas)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_bytes(data)
    log.info(f"wrote {out} ({len(data)} bytes)")
    return out
