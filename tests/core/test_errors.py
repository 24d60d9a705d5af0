"""Tests for the error hierarchy — status codes and response envelope."""

from user_api.core.errors import (
    DatabaseError, EmailConflictError, ErrorCategory, InputValidationError,
    ResourceNotFoundError,
)


def test_from_violations_joins_messages():
    err = InputValidationError.from_violations(["Name is required", "Email is required"])
    assert err.message == "Name is required, Email is required"
    assert err.violations == ["Name is required", "Email is required"]
    assert err.http_status == 400


def test_not_found_defaults_to_user_message():
    err = ResourceNotFoundError()
    assert err.http_status == 404
    assert err.to_response()["message"] == "User not found"


def test_email_conflict_is_400():
    err = EmailConflictError()
    assert err.http_status == 400
    assert err.category is ErrorCategory.CONFLICT
    assert err.to_response() == {
        "message": "Email already exists",
        "error": {"code": "EMAIL_CONFLICT", "category": "conflict", "severity": "warning"},
    }


def test_database_error_is_500():
    err = DatabaseError("Database operation failed", "delete")
    assert err.http_status == 500
    assert err.message == "Database delete failed: Database operation failed"
