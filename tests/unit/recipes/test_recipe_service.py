"""Unit tests for recipe creation logic."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, patch

import pytest

from core.errors import StoreError
from recipes import service
from recipes.schemas import RecipeForm


if TYPE_CHECKING:
    from collections.abc import Generator

pytestmark = pytest.mark.unit


def _form(**overrides: object) -> RecipeForm:
    values: dict[str, object] = {
        "title": "The Future",
        "roaster": "Black and White",
        "temp": "hot",
        "link": "https://share-h5.xbloom.com/?id=8yAUAWJktyHNIpo3vjZ6pA==",
        "shop_link": "https://xbloom.com/products/the-future-xbloom-exclusive",
        "machine": "Studio",
        "creator": "xbloom",
        "user_id": 1,
        "brewer_id": 1,
        "roast_id": 1,
    }
    values.update(overrides)
    return RecipeForm(**values)


@pytest.fixture
def insert_recipe() -> Generator[AsyncMock]:
    async def _echo(**kwargs: object) -> dict:
        return {"id": 42, **kwargs}

    with patch("recipes.repository.insert_recipe", new_callable=AsyncMock, side_effect=_echo) as mock:
        yield mock


class TestCreateRecipe:
    """Tests for service.create_recipe."""

    @pytest.mark.asyncio
    async def test_derives_slug_from_title(self, insert_recipe: AsyncMock) -> None:
        row = await service.create_recipe(_form())

        assert row["slug"] == "the-future"
        assert insert_recipe.await_args.kwargs["slug"] == "the-future"

    @pytest.mark.asyncio
    async def test_stamps_created_at_when_missing(self, insert_recipe: AsyncMock) -> None:
        before = datetime.now(timezone.utc)

        await service.create_recipe(_form())

        created_at = insert_recipe.await_args.kwargs["created_at"]
        assert created_at.tzinfo is not None
        assert created_at >= before

    @pytest.mark.asyncio
    async def test_keeps_supplied_created_at(self, insert_recipe: AsyncMock) -> None:
        supplied = datetime(2024, 9, 18, 17, 7, tzinfo=timezone.utc)

        await service.create_recipe(_form(created_at=supplied))

        assert insert_recipe.await_args.kwargs["created_at"] == supplied

    @pytest.mark.asyncio
    async def test_naive_created_at_is_treated_as_utc(self, insert_recipe: AsyncMock) -> None:
        await service.create_recipe(_form(created_at=datetime(2024, 9, 18, 17, 7)))

        assert insert_recipe.await_args.kwargs["created_at"] == datetime(2024, 9, 18, 17, 7, tzinfo=timezone.utc)

    @pytest.mark.asyncio
    async def test_passes_fields_through(self, insert_recipe: AsyncMock) -> None:
        await service.create_recipe(_form(oauth_user="github|123"))

        kwargs = insert_recipe.await_args.kwargs
        assert kwargs["creator"] == "xbloom"
        assert kwargs["oauth_user"] == "github|123"
        assert (kwargs["user_id"], kwargs["brewer_id"], kwargs["roast_id"]) == (1, 1, 1)

    @pytest.mark.asyncio
    async def test_store_error_propagates(self) -> None:
        """No pre-validation: a bad foreign key surfaces as the store's error."""
        failure = StoreError('insert or update on table "recipe" violates foreign key constraint "FK_recipe_brewer_id"')
        with (
            patch("recipes.repository.insert_recipe", new_callable=AsyncMock, side_effect=failure),
            pytest.raises(StoreError, match="FK_recipe_brewer_id"),
        ):
            await service.create_recipe(_form(brewer_id=999))


class TestRecipeForm:
    """The form never accepts a caller-chosen slug or id."""

    def test_ignores_slug_and_id(self) -> None:
        form = RecipeForm(**{**_form().model_dump(), "slug": "custom", "id": 5})

        assert not hasattr(form, "slug")
        assert not hasattr(form, "id")

    def test_rejects_empty_title(self) -> None:
        with pytest.raises(ValueError):
            _form(title="")

    def test_blank_created_at_is_none(self) -> None:
        """HTML forms submit an untouched datetime input as an empty string."""
        assert _form(created_at="").created_at is None
        assert _form(created_at="   ").created_at is None

    def test_created_at_still_parsed(self) -> None:
        form = _form(created_at="2024-09-18T16:27:51+00:00")

        assert form.created_at == datetime(2024, 9, 18, 16, 27, 51, tzinfo=timezone.utc)

    def test_invalid_created_at_rejected(self) -> None:
        with pytest.raises(ValueError):
            _form(created_at="yesterday")
