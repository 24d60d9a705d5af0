"""User Identifiers — parsing and format checks for user ids.

Invariants:
    - A valid user id is any string the uuid module accepts
    - Non-string values are never valid ids
    - find_invalid_ids preserves input order (error messages list ids as sent)
"""

from typing import Any, NewType
from uuid import UUID

from user_api.core.errors import InputValidationError


UserId = NewType("UserId", UUID)


def is_valid_user_id(value: Any) -> bool:
    """True when value is a string in UUID format."""
    if not isinstance(value, str):
        return False
    try:
        UUID(value)
    except ValueError:
        return False
    return True


def parse_user_id(raw: str) -> UserId:
    """Parse a path id or raise InputValidationError (400)."""
    if not is_valid_user_id(raw):
        raise InputValidationError(f"Invalid user ID: {raw}")
    return UserId(UUID(raw))


def find_invalid_ids(values: list[Any]) -> list[str]:
    """Return the string form of every value that is not a valid user id."""
    return [str(v) for v in values if not is_valid_user_id(v)]
