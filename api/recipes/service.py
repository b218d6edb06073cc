"""
Recipe creation logic.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from . import repository, schemas
from .slugs import slugify

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


async def create_recipe(form: schemas.RecipeForm) -> dict:
    created_at = form.created_at or _utc_now()
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)

    row = await repository.insert_recipe(
        title=form.title,
        slug=slugify(form.title),
        roaster=form.roaster,
        temp=form.temp,
        link=form.link,
        shop_link=form.shop_link,
        machine=form.machine,
        creator=form.creator,
        oauth_user=form.oauth_user,
        user_id=form.user_id,
        brewer_id=form.brewer_id,
        roast_id=form.roast_id,
        created_at=created_at,
    )
    logger.info("recipe_created id=%s slug=%s user_id=%s", row.get("id"), row.get("slug"), form.user_id)
    return row
