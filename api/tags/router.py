"""
Tag API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter

from recipes import schemas as recipe_schemas

from . import repository, schemas

router = APIRouter()


@router.get("/api/tags")
async def get_tags() -> list[schemas.Tag]:
    return await repository.list_tags()


@router.get("/api/tag/{tag_id}")
async def get_tag(tag_id: int) -> schemas.Tag | None:
    return await repository.get_tag(tag_id)


@router.get("/api/tag/{tag_id}/recipes")
async def get_tag_recipes(tag_id: int) -> list[recipe_schemas.Recipe]:
    return await repository.list_recipes_for_tag(tag_id)


@router.get("/api/recipe/id/{recipe_id}/tags")
async def get_recipe_tags(recipe_id: int) -> list[schemas.Tag]:
    return await repository.list_tags_for_recipe(recipe_id)
