"""
Recipe persistence (raw SQL).

The provenance label is stored in the `type` column and exposed as `creator`.
"""

from __future__ import annotations

from datetime import datetime

from core import db
from core.queries import Entity

RECIPE = Entity(
    table="recipe",
    columns=(
        "id",
        "title",
        "slug",
        "roaster",
        "temp",
        "link",
        "shop_link",
        "machine",
        "type",
        "oauth_user",
        "user_id",
        "brewer_id",
        "roast_id",
        "created_at",
    ),
    aliases={"type": "creator"},
)


async def list_recipes() -> list[dict]:
    return await RECIPE.list_all()


async def get_recipe(recipe_id: int) -> dict | None:
    return await RECIPE.get_by_id(recipe_id)


async def get_recipe_by_slug(slug: str) -> dict | None:
    # Slugs are not unique; whichever matching row the store yields first wins.
    return await RECIPE.first_where("slug", slug)


async def search_recipes_by_title(title: str) -> list[dict]:
    return await RECIPE.all_containing("title", title)


async def list_recipes_by_roaster(roaster: str) -> list[dict]:
    return await RECIPE.all_where("roaster", roaster)


async def list_recipes_by_machine(machine: str) -> list[dict]:
    return await RECIPE.all_where("machine", machine)


async def insert_recipe(
    *,
    title: str,
    slug: str,
    roaster: str,
    temp: str,
    link: str,
    shop_link: str,
    machine: str,
    creator: str,
    oauth_user: str | None,
    user_id: int,
    brewer_id: int,
    roast_id: int,
    created_at: datetime,
) -> dict:
    """
    Insert one recipe and return the stored row.

    Foreign keys are not checked here; a missing user/brewer/roast makes the
    store reject the insert and surfaces as StoreError.
    """
    row = await db.fetch_one(
        f"""
        INSERT INTO "recipe" (
            "title", "slug", "roaster", "temp", "link", "shop_link", "machine",
            "type", "oauth_user", "user_id", "brewer_id", "roast_id", "created_at"
        )
        VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9, $10, $11, $12, $13)
        RETURNING {RECIPE.select_list()}
        """,
        title,
        slug,
        roaster,
        temp,
        link,
        shop_link,
        machine,
        creator,
        oauth_user,
        user_id,
        brewer_id,
        roast_id,
        created_at,
    )
    if row is None:
        raise RuntimeError("Failed to create recipe.")
    return row
