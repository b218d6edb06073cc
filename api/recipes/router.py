"""
Recipe API endpoints.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Form, HTTPException, status

from . import repository, schemas, service

router = APIRouter()


@router.get("/api/recipes")
async def get_recipes() -> list[schemas.Recipe]:
    return await repository.list_recipes()


@router.get("/api/recipe/id/{recipe_id}")
async def get_recipe_id(recipe_id: int) -> schemas.Recipe | None:
    return await repository.get_recipe(recipe_id)


@router.post("/api/recipe/create")
async def create_recipe(form: Annotated[schemas.RecipeForm, Form()]) -> schemas.Recipe:
    return await service.create_recipe(form)


# Registered ahead of the slug route, which would otherwise answer GET /api/recipe/create.
@router.get("/api/recipe/create", include_in_schema=False)
async def create_recipe_wrong_method() -> None:
    raise HTTPException(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        detail="Method Not Allowed",
        headers={"Allow": "POST"},
    )


@router.get("/api/recipe/title/{title}")
async def get_recipe_title(title: str) -> list[schemas.Recipe]:
    return await repository.search_recipes_by_title(title)


@router.get("/api/recipe/{slug}")
async def get_recipe_slug(slug: str) -> schemas.Recipe | None:
    return await repository.get_recipe_by_slug(slug)


@router.get("/api/recipes/roaster/{roaster}")
async def get_recipes_roaster(roaster: str) -> list[schemas.Recipe]:
    return await repository.list_recipes_by_roaster(roaster)


@router.get("/api/recipes/machine/{machine}")
async def get_recipes_machine(machine: str) -> list[schemas.Recipe]:
    return await repository.list_recipes_by_machine(machine)
