"""
User persistence.

The entity only knows the public columns, so email is never selected and
never materialized in a row dict.
"""

from __future__ import annotations

from core.queries import Entity

PARTIAL_USER = Entity(table="user", columns=("id", "username"))


async def list_users() -> list[dict]:
    return await PARTIAL_USER.list_all()


async def get_user(user_id: int) -> dict | None:
    return await PARTIAL_USER.get_by_id(user_id)
