"""
Roast API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter

from . import repository, schemas

router = APIRouter()


@router.get("/api/roasts")
async def get_roasts() -> list[schemas.Roast]:
    return await repository.list_roasts()


@router.get("/api/roast/{roast_id}")
async def get_roast(roast_id: int) -> schemas.Roast | None:
    return await repository.get_roast(roast_id)
