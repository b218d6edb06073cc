"""
Brewer persistence.
"""

from __future__ import annotations

from core.queries import Entity

BREWER = Entity(table="brewer", columns=("id", "type"))


async def list_brewers() -> list[dict]:
    return await BREWER.list_all()


async def get_brewer(brewer_id: int) -> dict | None:
    return await BREWER.get_by_id(brewer_id)
