"""
Roast persistence (raw SQL via the shared query template).
"""

from __future__ import annotations

from core.queries import Entity

ROAST = Entity(table="roast", columns=("id", "level"))


async def list_roasts() -> list[dict]:
    return await ROAST.list_all()


async def get_roast(roast_id: int) -> dict | None:
    return await ROAST.get_by_id(roast_id)
