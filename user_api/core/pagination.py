"""Pagination — query-string parsing and page arithmetic for list endpoints.

Invariants:
    - Absent, unparsable or zero values fall back to the default
    - Negative values and values above MAX_VALUE (2**31 - 1) are rejected
      (InputValidationError), so limit is never <= 0 and offsets fit in BIGINT
    - Oversized digit strings are rejected before int() runs
    - total_pages == ceil(total / limit)

Design Decisions:
    - Leading-integer parsing: "3abc" reads as 3
"""

import math
import re

from user_api.core.errors import InputValidationError

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_VALUE = 2**31 - 1

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_positive_int(raw: str | None, default: int, label: str) -> int:
    """Parse a positive integer query parameter, falling back to default."""
    if raw is None:
        return default
    match = _LEADING_INT.match(raw)
    if not match:
        return default
    digits = match.group(1).lstrip("+-").lstrip("0")
    if not digits:
        return default
    if len(digits) > len(str(MAX_VALUE)):
        raise InputValidationError(f"{label} must be a positive integer")
    value = int(match.group(1))
    if value < 0 or value > MAX_VALUE:
        raise InputValidationError(f"{label} must be a positive integer")
    return value


def page_offset(page: int, limit: int) -> int:
    """Number of rows to skip before the requested page."""
    return (page - 1) * limit


def total_pages(total: int, limit: int) -> int:
    """Pages needed to show `total` rows at `limit` per page."""
    return math.ceil(total / limit)
