"""
Tag persistence, including the explicit joins through `tag_recipe`.
"""

from __future__ import annotations

from core import db
from core.queries import Entity
from recipes.repository import RECIPE

TAG = Entity(table="tag", columns=("id", "name"))


async def list_tags() -> list[dict]:
    return await TAG.list_all()


async def get_tag(tag_id: int) -> dict | None:
    return await TAG.get_by_id(tag_id)


async def list_recipes_for_tag(tag_id: int) -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {RECIPE.select_list(prefix="r.")}
        FROM "recipe" r
        JOIN "tag_recipe" tr ON tr."recipe_id" = r."id"
        WHERE tr."tag_id" = $1
        """,
        tag_id,
    )


async def list_tags_for_recipe(recipe_id: int) -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {TAG.select_list(prefix="t.")}
        FROM "tag" t
        JOIN "tag_recipe" tr ON tr."tag_id" = t."id"
        WHERE tr."recipe_id" = $1
        """,
        recipe_id,
    )
