"""User schemas — create/update rule sets and violation messages.

Invariants:
    - Violations are reported in field order, one message per field
    - Update accepts only name, bio, profilePicture
"""

import pytest

from user_api.core.errors import InputValidationError
from user_api.schemas.user import (
    BODY_NOT_OBJECT, UserCreate, UserListResponse, UserResponse, UserUpdate,
    validate_body,
)


def _violations(schema, payload) -> list[str]:
    with pytest.raises(InputValidationError) as exc_info:
        validate_body(schema, payload)
    return exc_info.value.violations


# --- UserCreate ---------------------------------------------------------------

def test_create_accepts_name_and_email():
    body = validate_body(UserCreate, {"name": "Bob", "email": "bob@x.com"})
    assert body.name == "Bob"
    assert body.email == "bob@x.com"
    assert body.profile_picture is None


def test_create_empty_name_is_required():
    assert _violations(UserCreate, {"name": "", "email": "bob@x.com"}) == [
        "Name is required",
    ]


def test_create_collects_every_violation_in_order():
    assert _violations(
        UserCreate, {"email": "nope", "bio": 1, "profilePicture": ["x"]},
    ) == [
        "Name is required",
        "Email is required",
        "Bio must be a string",
        "Profile picture must be a string",
    ]


def test_create_joined_message():
    with pytest.raises(InputValidationError) as exc_info:
        validate_body(UserCreate, {})
    assert exc_info.value.message == "Name is required, Email is required"


def test_non_object_body():
    assert _violations(UserCreate, ["name"]) == [BODY_NOT_OBJECT]


# --- UserUpdate ---------------------------------------------------------------

def test_update_changes_only_submitted_fields():
    body = validate_body(UserUpdate, {"bio": "hi", "profilePicture": None})
    assert body.changes() == {"bio": "hi", "profile_picture": None}


def test_update_empty_body_changes_nothing():
    assert validate_body(UserUpdate, {}).changes() == {}


def test_update_rejects_email():
    assert _violations(UserUpdate, {"email": "x@y.com"}) == [
        "email Can not be updated",
    ]


def test_update_snake_case_key_is_not_allowed():
    assert _violations(UserUpdate, {"profile_picture": "p.png"}) == [
        "profile_picture Can not be updated",
    ]


def test_update_type_errors_on_allowed_fields():
    assert _violations(UserUpdate, {"name": 3, "bio": 4}) == [
        "Name must be a string",
        "Bio must be a string",
    ]


# --- Responses ----------------------------------------------------------------

def test_list_response_serializes_camel_case():
    payload = UserListResponse(users=[], total_pages=0, current_page=1)
    assert payload.model_dump(by_alias=True) == {
        "users": [], "totalPages": 0, "currentPage": 1,
    }


def test_user_response_reads_orm_attributes():
    class _Row:
        id = "4b2f3c8e-7a54-4f5e-9b61-2d3e4f5a6b7c"
        name = "Ann"
        email = "ann@x.com"
        bio = None
        profile_picture = "p.png"
        created_at = "2024-01-01T00:00:00+00:00"

    dumped = UserResponse.model_validate(_Row()).model_dump(by_alias=True)
    assert dumped["profilePicture"] == "p.png"
    assert "createdAt" in dumped


def test_create_null_bio_and_profile_picture_rejected():
    assert _violations(
        UserCreate,
        {"name": "A", "email": "a@b.com", "bio": None, "profilePicture": None},
    ) == ["Bio must be a string", "Profile picture must be a string"]


def test_create_email_kept_verbatim():
    body = validate_body(UserCreate, {"name": "Bob", "email": "Bob@X.COM"})
    assert body.email == "Bob@X.COM"
