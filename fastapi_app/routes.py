import logging
import re
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status
from fastapi.responses import Response

from avatar.encode import encode_png
from avatar.errors import EncodingError, InvalidTimestampError, UnsupportedSizeError
from avatar.render import render, validate_size
from avatar.seed import resolve_time_key

from .config import service_config
from .models import ErrorResponse, HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter()

_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_size(raw: Optional[str]) -> int:
    """Parse the size query parameter, falling back to the configured default"""
    if raw is None or raw == "":
        return service_config.get("avatar.default_size", 64)
    if not _INT_RE.fullmatch(raw):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="invalid size")
    try:
        return validate_size(int(raw))
    except UnsupportedSizeError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="size must be 64 or 128"
        )


@router.get(
    "/avatar",
    response_class=Response,
    responses={
        200: {"content": {"image/png": {}}, "description": "PNG avatar"},
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def get_avatar(
    input: Optional[str] = Query(default=None, description="String to derive the avatar from"),
    size: Optional[str] = Query(default=None, description="64 or 128"),
    timestamp: Optional[str] = Query(default=None, description="Unix seconds; defaults to today (UTC)"),
):
    """Render the avatar for input on the UTC day of timestamp"""
    input = (input or "").strip()
    if not input:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="missing input query parameter"
        )

    canvas_size = parse_size(size)

    try:
        time_key = resolve_time_key(timestamp)
    except InvalidTimestampError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="invalid timestamp")

    result = render(input, time_key, canvas_size)

    try:
        body = encode_png(result.canvas)
    except EncodingError as e:
        logger.error(f"[avatar] Encoding failed for hash {result.hex_digest[:12]}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="failed to encode image"
        )

    logger.debug(f"[avatar] Served size={canvas_size} time_key={time_key} hash={result.hex_digest[:12]}")
    return Response(
        content=body,
        media_type="image/png",
        headers={
            "X-Avatar-Hash": result.hex_digest,
            "X-Avatar-Time-Key": result.time_key,
        },
    )


@router.get("/healthz", response_model=HealthResponse)
def health_check():
    """Health check endpoint"""
    return HealthResponse()
