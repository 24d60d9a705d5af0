"""Boundary Protocols — contracts between the service layer and storage.

Invariants:
    - Services depend on UserRepository, never on AsyncSession directly
    - Implementations translate storage failures into core/errors.py types:
      duplicate email -> EmailConflictError, anything else -> DatabaseError
    - Every mutating method commits its own unit of work

Design Decisions:
    - Protocol over ABC
"""

from datetime import datetime
from typing import Protocol

from user_api.core.identifiers import UserId


class UserLike(Protocol):
    """Structural contract for User records returned by a repository."""
    id: UserId
    name: str
    email: str
    bio: str | None
    profile_picture: str | None
    created_at: datetime


class UserRepository(Protocol):
    """Contract for user persistence — implemented by infrastructure."""
    async def find_many(
        self, search: str, offset: int, limit: int,
    ) -> list[UserLike]: ...
    async def count(self, search: str) -> int: ...
    async def get_by_id(self, user_id: UserId) -> UserLike | None: ...
    async def get_by_email(self, email: str) -> UserLike | None: ...
    async def create(self, name: str, email: str) -> UserLike: ...
    async def update_by_id(
        self, user_id: UserId, fields: dict[str, object],
    ) -> UserLike | None: ...
    async def delete_by_id(self, user_id: UserId) -> bool: ...
