"""User Service — one method per endpoint: validate, call the repository, shape the response.

Invariants:
    - Validation runs before any repository call; failures raise InputValidationError
    - Missing users raise ResourceNotFoundError("User not found") for get, update, delete
    - Duplicate email raises EmailConflictError whether caught by the pre-check
      or by the storage unique constraint (concurrent creates)
    - Only name and email are written on create
    - Bulk delete is best-effort: one id failing (missing or DatabaseError) is
      logged and skipped, never aborts the rest
    - No retries anywhere

Design Decisions:
    - Service receives a UserRepository (Protocol), not an AsyncSession
    - Bulk delete validates every id before deleting any
"""

import logging
from typing import Any

from user_api.core.errors import (
    DatabaseError, EmailConflictError, InputValidationError, ResourceNotFoundError,
)
from user_api.core.identifiers import find_invalid_ids, parse_user_id
from user_api.core.pagination import (
    DEFAULT_LIMIT, DEFAULT_PAGE, page_offset, parse_positive_int, total_pages,
)
from user_api.core.repository_protocols import UserRepository
from user_api.schemas.user import (
    MessageResponse, UserCreate, UserEnvelope, UserListResponse, UserResponse,
    UserUpdate, validate_body,
)

logger = logging.getLogger(__name__)


class UserService:
    """Request handling for the user endpoints."""

    def __init__(self, users: UserRepository):
        self.users = users

    async def list_users(
        self, page: str | None, limit: str | None, search: str | None,
    ) -> UserListResponse:
        """One page of users, newest first, optionally filtered by name/email."""
        page_number = parse_positive_int(page, DEFAULT_PAGE, "Page")
        page_size = parse_positive_int(limit, DEFAULT_LIMIT, "Limit")
        search = search or ""

        users = await self.users.find_many(
            search, page_offset(page_number, page_size), page_size,
        )
        total = await self.users.count(search)

        return UserListResponse(
            users=[UserResponse.model_validate(u) for u in users],
            total_pages=total_pages(total, page_size),
            current_page=page_number,
        )

    async def get_user(self, raw_id: str) -> UserEnvelope:
        user = await self.users.get_by_id(parse_user_id(raw_id))
        if user is None:
            raise ResourceNotFoundError()
        return UserEnvelope(user=UserResponse.model_validate(user))

    async def create_user(self, payload: Any) -> UserResponse:
        body = validate_body(UserCreate, payload)

        if await self.users.get_by_email(body.email) is not None:
            raise EmailConflictError()

        user = await self.users.create(body.name, body.email)
        logger.info("User created", extra={"user_id": user.id})
        return UserResponse.model_validate(user)

    async def update_profile(self, raw_id: str, payload: Any) -> UserEnvelope:
        """Apply the allow-listed fields present in payload to one user."""
        body = validate_body(UserUpdate, payload)
        user_id = parse_user_id(raw_id)

        user = await self.users.update_by_id(user_id, body.changes())
        if user is None:
            raise ResourceNotFoundError()
        logger.info("User updated", extra={"user_id": user_id})
        return UserEnvelope(user=UserResponse.model_validate(user))

    async def delete_user(self, raw_id: str) -> MessageResponse:
        user_id = parse_user_id(raw_id)
        if not await self.users.delete_by_id(user_id):
            raise ResourceNotFoundError()
        logger.info("User deleted", extra={"user_id": user_id})
        return MessageResponse(message="User deleted successfully")

    async def delete_users(self, payload: Any) -> MessageResponse:
        """Delete every listed user independently; report how many went."""
        user_ids = payload.get("userIds") if isinstance(payload, dict) else None
        if not isinstance(user_ids, list) or not user_ids:
            raise InputValidationError("Invalid user IDs")

        invalid = find_invalid_ids(user_ids)
        if invalid:
            raise InputValidationError(f"Invalid user ID(s): {', '.join(invalid)}")

        deleted = 0
        for raw_id in user_ids:
            try:
                removed = await self.users.delete_by_id(parse_user_id(raw_id))
            except DatabaseError:
                logger.error(
                    f"Failed to delete user with ID {raw_id}",
                    exc_info=True, extra={"user_id": raw_id},
                )
                continue
            if removed:
                deleted += 1
            else:
                logger.warning(
                    f"User {raw_id} not found during bulk delete",
                    extra={"user_id": raw_id},
                )

        if deleted == 0:
            raise ResourceNotFoundError("No users found to delete")

        logger.info("Bulk delete finished", extra={"deleted_count": deleted})
        return MessageResponse(message=f"{deleted} users deleted successfully")
