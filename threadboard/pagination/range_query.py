from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional

from threadboard.errors import PaginationValidationError
from threadboard.pagination.cursor import decode_cursor

ASCENDING = "asc"
DESCENDING = "desc"

MAX_PAGE_SIZE = 1000


@dataclass(frozen=True)
class CommentRangeQuery:
    """Which comment rows to fetch for one page, and in what order.

    ``after``/``before`` are exclusive bounds on ``created_at``. ``limit`` of
    ``None`` means the whole range.
    """

    post_id: int
    after: Optional[datetime] = None
    before: Optional[datetime] = None
    direction: str = ASCENDING
    limit: Optional[int] = None

    @property
    def is_forward(self) -> bool:
        return self.limit is not None and self.direction == ASCENDING

    @property
    def is_backward(self) -> bool:
        return self.limit is not None and self.direction == DESCENDING

    def with_overfetch(self) -> "CommentRangeQuery":
        # one extra row tells us whether another page exists
        if self.limit is None:
            return self
        return replace(self, limit=self.limit + 1)


def _validate_bound(name, value):
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise PaginationValidationError(f"'{name}' must be an integer")
    if value < 0:
        raise PaginationValidationError(f"'{name}' must be non-negative")
    if value > MAX_PAGE_SIZE:
        raise PaginationValidationError(
            f"'{name}' must be at most {MAX_PAGE_SIZE}"
        )
    return value


def build_comment_range(post_id, first=None, last=None, after=None, before=None):
    """Build the fetch descriptor for a page of comments on ``post_id``.

    ``first`` pages forward in ascending order, ``last`` pages backward in
    descending order. When both are given ``first`` wins and ``last`` is
    ignored. With neither, the whole range is returned in ascending order.
    """
    first = _validate_bound("first", first)
    last = _validate_bound("last", last)

    after_ts = decode_cursor(after) if after is not None else None
    before_ts = decode_cursor(before) if before is not None else None

    if first is not None:
        direction, limit = ASCENDING, first
    elif last is not None:
        direction, limit = DESCENDING, last
    else:
        direction, limit = ASCENDING, None

    return CommentRangeQuery(
        post_id=post_id,
        after=after_ts,
        before=before_ts,
        direction=direction,
        limit=limit,
    )
