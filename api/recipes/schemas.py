"""
Recipe request/response schemas.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator


class Recipe(BaseModel):
    id: int
    title: str
    slug: str
    roaster: str
    temp: str
    link: str
    shop_link: str
    machine: str
    creator: str
    oauth_user: str | None = None
    user_id: int
    brewer_id: int
    roast_id: int
    created_at: datetime


class RecipeForm(BaseModel):
    """
    Form body for recipe creation. id and slug are not accepted: the id is
    generated by the store and the slug is always derived from the title.
    """

    title: str = Field(..., min_length=1, max_length=500)
    roaster: str
    temp: str
    link: str
    shop_link: str
    machine: str
    creator: str
    oauth_user: str | None = None
    user_id: int
    brewer_id: int
    roast_id: int
    created_at: datetime | None = None

    @field_validator("created_at", mode="before")
    @classmethod
    def blank_created_at_is_unset(cls, value: object) -> object:
        # HTML forms send an empty string for a field left blank.
        if isinstance(value, str) and not value.strip():
            return None
        return value
