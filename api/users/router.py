"""
User API endpoints (public projection only).
"""

from __future__ import annotations

from fastapi import APIRouter

from . import repository, schemas

router = APIRouter()


@router.get("/api/users")
async def get_users() -> list[schemas.PartialUser]:
    return await repository.list_users()


@router.get("/api/user/{user_id}")
async def get_user(user_id: int) -> schemas.PartialUser | None:
    return await repository.get_user(user_id)
