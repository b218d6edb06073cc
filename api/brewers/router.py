"""
Brewer API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter

from . import repository, schemas

router = APIRouter()


@router.get("/api/brewers")
async def get_brewers() -> list[schemas.Brewer]:
    return await repository.list_brewers()


@router.get("/api/brewer/{brewer_id}")
async def get_brewer(brewer_id: int) -> schemas.Brewer | None:
    return await repository.get_brewer(brewer_id)
