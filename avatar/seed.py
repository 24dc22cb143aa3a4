"""
Seed derivation: UTC day keys and the sha256 digest that drives a render.

The digest is the only entropy a render ever sees. The wall clock is read in
exactly one place (resolve_time_key with no timestamp) and never by the core.
"""

import hashlib
import re
from datetime import datetime, timezone
from typing import Optional

from .errors import InvalidTimestampError

TIME_KEY_FORMAT = "%Y-%m-%d"
DIGEST_SIZE = 32

_TIMESTAMP_RE = re.compile(r"[+-]?[0-9]+")


def time_key_for(moment: datetime) -> str:
    """Return the UTC calendar day of moment as YYYY-MM-DD."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).strftime(TIME_KEY_FORMAT)


def resolve_time_key(raw: Optional[str], now: Optional[datetime] = None) -> str:
    """
    Turn an optional Unix-seconds timestamp into a day key.

    Args:
        raw: Base-10 Unix seconds, or empty/None for "today".
        now: Moment to use instead of the wall clock when raw is empty.

    Returns:
        str: UTC day key, e.g. "2024-01-01".

    Raises:
        InvalidTimestampError: raw is not an integer or is out of range.
    """
    if raw is None or raw == "":
        return time_key_for(now or datetime.now(timezone.utc))

    if not _TIMESTAMP_RE.fullmatch(raw):
        raise InvalidTimestampError(f"invalid timestamp: {raw!r}")

    # datetime stops at year 9999, so later timestamps (253402300800 and up)
    # are rejected rather than given a five-digit year key
    try:
        moment = datetime.fromtimestamp(int(raw), tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        raise InvalidTimestampError(f"timestamp out of range: {raw!r}") from e
    return time_key_for(moment)


def hash_input(input: str, time_key: str) -> bytes:
    """Return the 32-byte sha256 digest of "input:time_key"."""
    return hashlib.sha256(f"{input}:{time_key}".encode("utf-8")).digest()
