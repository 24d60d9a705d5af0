"""User Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - UserCreate: name non-empty, email syntactically valid (kept verbatim),
      bio/profilePicture text if present (null rejected)
    - UserUpdate: only name, bio, profilePicture accepted (extra="forbid")
    - validate_body collects every violation in field order, one message per field,
      and raises a single InputValidationError joined with ", "
    - Response models serialize with camelCase aliases (profilePicture, createdAt)

Design Decisions:
    - Messages live on each schema (violation_messages); pydantic messages
      ("Field required", "Value error, ...") never reach clients
    - Unknown keys on update are rejected structurally via extra="forbid"
"""

from datetime import datetime
from typing import Any, ClassVar, TypeVar
from uuid import UUID

from pydantic import (
    BaseModel, ConfigDict, EmailStr, Field, TypeAdapter, ValidationError,
    field_validator,
)
from pydantic.alias_generators import to_camel

from user_api.core.errors import InputValidationError

BODY_NOT_OBJECT = "Request body must be a JSON object"

_email_syntax = TypeAdapter(EmailStr)


class UserCreate(BaseModel):
    """Create-user request body."""
    violation_messages: ClassVar[dict[str, str]] = {
        "name": "Name is required",
        "email": "Email is required",
        "bio": "Bio must be a string",
        "profilePicture": "Profile picture must be a string",
    }

    name: str = Field(min_length=1)
    email: str
    bio: str | None = None
    profile_picture: str | None = Field(None, alias="profilePicture")

    @field_validator("email")
    @classmethod
    def email_syntax(cls, v: str) -> str:
        # stored exactly as submitted; EmailStr only checks the syntax
        try:
            _email_syntax.validate_python(v)
        except ValidationError:
            raise ValueError("invalid email address") from None
        return v

    @field_validator("bio", "profile_picture")
    @classmethod
    def text_if_present(cls, v: str | None) -> str:
        # absent is fine, explicit null is not
        if v is None:
            raise ValueError("must be a string")
        return v


class UserUpdate(BaseModel):
    """Profile update body: every field optional, nothing outside the allow-list."""
    model_config = ConfigDict(extra="forbid")

    violation_messages: ClassVar[dict[str, str]] = {
        "name": "Name must be a string",
        "bio": "Bio must be a string",
        "profilePicture": "Profile picture must be a string",
    }

    name: str | None = None
    bio: str | None = None
    profile_picture: str | None = Field(None, alias="profilePicture")

    @field_validator("name")
    @classmethod
    def name_not_null(cls, v: str | None) -> str:
        # name is non-nullable in storage; absent is fine, explicit null is not
        if v is None:
            raise ValueError("name cannot be null")
        return v

    def changes(self) -> dict[str, Any]:
        """Column values for exactly the fields present in the request."""
        return self.model_dump(exclude_unset=True)


class UserResponse(BaseModel):
    """Public user representation."""
    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True,
    )

    id: UUID
    name: str
    email: str
    bio: str | None = None
    profile_picture: str | None = None
    created_at: datetime


class UserEnvelope(BaseModel):
    """Single user wrapped under "user"."""
    user: UserResponse


class UserListResponse(BaseModel):
    """One page of users plus page metadata."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    users: list[UserResponse]
    total_pages: int
    current_page: int


class MessageResponse(BaseModel):
    """Plain confirmation message."""
    message: str


# --- Validation helpers -------------------------------------------------------

SchemaT = TypeVar("SchemaT", UserCreate, UserUpdate)


def validate_body(schema: type[SchemaT], payload: Any) -> SchemaT:
    """Validate a raw JSON body against a request schema.

    Raises InputValidationError carrying every violation, in field order.
    """
    try:
        return schema.model_validate(payload)
    except ValidationError as exc:
        raise InputValidationError.from_violations(
            collect_violations(schema, exc),
        ) from None


def collect_violations(
    schema: type[UserCreate] | type[UserUpdate], exc: ValidationError,
) -> list[str]:
    """Map pydantic errors to human-readable messages, one per field."""
    violations: list[str] = []
    for error in exc.errors():
        loc = error["loc"]
        if not loc:
            message = BODY_NOT_OBJECT
        elif error["type"] == "extra_forbidden":
            message = f"{loc[0]} Can not be updated"
        else:
            field = str(loc[0])
            message = schema.violation_messages.get(field, f"{field} is invalid")
        if message not in violations:
            violations.append(message)
    return violations
