"""Opaque page cursors for comment pagination.

A cursor is the comment's ``created_at`` rendered as fixed-width RFC 3339
text in UTC with microsecond precision, e.g. ``2024-05-01T12:30:00.000000Z``.
Because every cursor has the same width and the same offset, comparing two
cursors as strings gives the same answer as comparing the instants.
"""
import re
from datetime import datetime, timezone

from threadboard.errors import InvalidCursorError

CURSOR_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"

_CURSOR_RE = re.compile(
    r"^[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}\.[0-9]{6}Z$"
)


def _as_naive_utc(timestamp: datetime) -> datetime:
    if timestamp.tzinfo is None:
        return timestamp
    return timestamp.astimezone(timezone.utc).replace(tzinfo=None)


def encode_cursor(timestamp: datetime) -> str:
    """Render ``timestamp`` as a cursor. Naive values are taken to be UTC."""
    ts = _as_naive_utc(timestamp)
    # %Y is not zero-padded below year 1000 on every platform
    return f"{ts.year:04d}-{ts:%m-%dT%H:%M:%S.%f}Z"


def decode_cursor(cursor: str) -> datetime:
    """Parse a cursor back into a naive UTC ``datetime``.

    Raises ``InvalidCursorError`` for anything that is not exactly in the
    canonical format, including well-formed text naming an impossible date.
    """
    if not isinstance(cursor, str) or not _CURSOR_RE.match(cursor):
        raise InvalidCursorError(cursor)

    try:
        return datetime.strptime(cursor, CURSOR_FORMAT)
    except ValueError as e:
        raise InvalidCursorError(cursor) from e
