"""User Repository — SQLAlchemy implementation of core.repository_protocols.UserRepository.

Invariants:
    - Search is a case-insensitive substring match on name OR email; LIKE
      wildcards in the search text match literally
    - Listing order is created_at DESC, id DESC (stable across pages)
    - Mutations commit immediately; on failure the session is rolled back before
      the typed error is raised, so the session stays usable (bulk delete relies on this)
    - IntegrityError on the email constraint -> EmailConflictError,
      every other SQLAlchemyError -> DatabaseError
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import ColumnElement, func, or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from user_api.core.errors import DatabaseError, EmailConflictError
from user_api.core.identifiers import UserId
from user_api.models.user import User

logger = logging.getLogger(__name__)

_LIKE_ESCAPE = "\\"


def _escape_like(text: str) -> str:
    return (
        text.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", _LIKE_ESCAPE + "%")
        .replace("_", _LIKE_ESCAPE + "_")
    )


def _search_filter(search: str) -> ColumnElement[bool] | None:
    if not search:
        return None
    pattern = f"%{_escape_like(search)}%"
    return or_(
        User.name.ilike(pattern, escape=_LIKE_ESCAPE),
        User.email.ilike(pattern, escape=_LIKE_ESCAPE),
    )


def _is_email_conflict(exc: IntegrityError) -> bool:
    # postgres: uq_users_email; sqlite: "UNIQUE constraint failed: users.email"
    return "email" in str(exc.orig).lower()


class SqlAlchemyUserRepository:
    """User persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    @asynccontextmanager
    async def _write(self, operation: str) -> AsyncGenerator[None, None]:
        try:
            yield
        except IntegrityError as e:
            await self.db.rollback()
            if _is_email_conflict(e):
                raise EmailConflictError() from e
            logger.error(f"DB integrity error during {operation}: {e}")
            raise DatabaseError("Integrity constraint violated", operation) from e
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"DB error during {operation}: {e}")
            raise DatabaseError("Database operation failed", operation) from e

    async def find_many(self, search: str, offset: int, limit: int) -> list[User]:
        query = select(User).order_by(User.created_at.desc(), User.id.desc())
        condition = _search_filter(search)
        if condition is not None:
            query = query.where(condition)
        query = query.offset(offset).limit(limit)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def count(self, search: str) -> int:
        query = select(func.count()).select_from(User)
        condition = _search_filter(search)
        if condition is not None:
            query = query.where(condition)
        result = await self.db.execute(query)
        return result.scalar_one()

    async def get_by_id(self, user_id: UserId) -> User | None:
        return await self.db.get(User, user_id)

    async def get_by_email(self, email: str) -> User | None:
        result = await self.db.execute(
            select(User).where(User.email == email),
        )
        return result.scalar_one_or_none()

    async def create(self, name: str, email: str) -> User:
        user = User(name=name, email=email)
        async with self._write("create"):
            self.db.add(user)
            await self.db.commit()
            await self.db.refresh(user)
        return user

    async def update_by_id(
        self, user_id: UserId, fields: dict[str, object],
    ) -> User | None:
        user = await self.db.get(User, user_id)
        if user is None:
            return None
        async with self._write("update"):
            for column, value in fields.items():
                setattr(user, column, value)
            await self.db.commit()
            await self.db.refresh(user)
        return user

    async def delete_by_id(self, user_id: UserId) -> bool:
        async with self._write("delete"):
            user = await self.db.get(User, user_id)
            if user is None:
                return False
            await self.db.delete(user)
            await self.db.commit()
        return True
