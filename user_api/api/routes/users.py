"""User Routes — list, read, create, update, delete, bulk delete.

Invariants:
    - Bodies arrive as raw JSON and are validated by the service layer, so every
      violation is reported in one joined message instead of FastAPI's 422 shape
    - Path ids arrive as strings; malformed ids are rejected by the service (400)
    - Create lives at /api/user/create and bulk delete at POST /api/users/delete;
      both paths are part of the public contract
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from user_api.infrastructure.database import get_db
from user_api.infrastructure.user_repository import SqlAlchemyUserRepository
from user_api.schemas.user import (
    MessageResponse, UserEnvelope, UserListResponse, UserResponse,
)
from user_api.services.user_service import UserService

router = APIRouter(prefix="/api", tags=["users"])


def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    return UserService(SqlAlchemyUserRepository(db))


@router.get("/users", response_model=UserListResponse)
async def get_users(
    page: str | None = Query(None),
    limit: str | None = Query(None),
    search: str | None = Query(None),
    service: UserService = Depends(get_user_service),
):
    """List users with pagination and case-insensitive search."""
    return await service.list_users(page, limit, search)


@router.post("/users/delete", response_model=MessageResponse)
async def delete_users(
    payload: Any = Body(None),
    service: UserService = Depends(get_user_service),
):
    """Bulk delete by {"userIds": [...]}."""
    return await service.delete_users(payload)


@router.get("/users/{user_id}", response_model=UserEnvelope)
async def get_user(
    user_id: str, service: UserService = Depends(get_user_service),
):
    return await service.get_user(user_id)


@router.put("/users/{user_id}", response_model=UserEnvelope)
async def update_profile(
    user_id: str,
    payload: Any = Body(None),
    service: UserService = Depends(get_user_service),
):
    """Update name, bio and/or profilePicture."""
    return await service.update_profile(user_id, {} if payload is None else payload)


@router.delete("/users/{user_id}", response_model=MessageResponse)
async def delete_user(
    user_id: str, service: UserService = Depends(get_user_service),
):
    return await service.delete_user(user_id)


@router.post("/user/create", response_model=UserResponse)
async def create_user(
    payload: Any = Body(None),
    service: UserService = Depends(get_user_service),
):
    """Create a user from {"name", "email"}."""
    return await service.create_user({} if payload is None else payload)
