"""Recipe creation and retrieval service."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID, uuid4

from recipe_builder.domain.nutrients import (
    IngredientSummary,
    NutrientRecord,
    UnitConversion,
)
from recipe_builder.domain.recipes import (
    RecipeCreated,
    RecipeDetail,
    RecipeDraft,
    ScaledIngredientRow,
)
from recipe_builder.services.formatting import format_result
from recipe_builder.services.nutrition import aggregate_ingredients, index_records

_logger = logging.getLogger(__name__)


class NutrientRepository(Protocol):
    """Read access to the per-100g nutrient reference table."""

    async def fetch_all(self) -> list[NutrientRecord]:
        """Return every nutrient record."""

    async def list_unit_conversions(self) -> dict[tuple[str, str], UnitConversion]:
        """Return unit conversions keyed by (food code, unit)."""


class RecipeRepository(Protocol):
    """Persistence interface for recipes and their ingredient rows."""

    async def save_recipe(self, draft: RecipeDraft, created: RecipeCreated) -> None:
        """Store a recipe with its formatted nutrition."""

    async def save_items(self, rows: list[ScaledIngredientRow]) -> None:
        """Store scaled ingredient rows."""

    async def list_recipes(self) -> list[dict[str, str]]:
        """Return all stored recipes."""

    async def find_recipe(self, recipe_id: str) -> dict[str, str] | None:
        """Return a stored recipe by id, if present."""

    async def list_items(self, recipe_id: str) -> list[dict[str, str]]:
        """Return stored ingredient rows for a recipe."""


def _iso_timestamp() -> str:
    now = datetime.now(tz=UTC)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class RecipeService:
    """Service that computes recipe nutrition and persists recipes."""

    nutrient_repository: NutrientRepository
    recipe_repository: RecipeRepository
    id_factory: Callable[[], UUID] = uuid4
    clock: Callable[[], str] = _iso_timestamp
    debug: bool = False

    async def list_ingredients(self) -> list[IngredientSummary]:
        """Return the searchable ingredient listing."""
        records = await self.nutrient_repository.fetch_all()
        return [IngredientSummary.from_record(record) for record in records]

    async def create_recipe(self, draft: RecipeDraft) -> RecipeCreated:
        """Compute nutrition for a draft and persist the recipe."""
        records = await self.nutrient_repository.fetch_all()
        recipe_id = self.id_factory()
        timestamp = self.clock()
        totals, items = aggregate_ingredients(
            draft.ingredients,
            index_records(records),
            recipe_id=recipe_id,
            timestamp=timestamp,
        )
        created = RecipeCreated(
            recipe_id=recipe_id,
            timestamp=timestamp,
            result=format_result(totals, draft.servings),
            items=items,
        )
        await self.recipe_repository.save_recipe(draft, created)
        if items:
            await self.recipe_repository.save_items(items)
        if self.debug:
            _logger.info(
                "Recipe created: id=%s lines=%s matched=%s",
                recipe_id,
                len(draft.ingredients),
                len(items),
            )
        return created

    async def list_recipes(self) -> list[dict[str, str]]:
        """Return all stored recipes."""
        return await self.recipe_repository.list_recipes()

    async def get_recipe(self, recipe_id: str) -> RecipeDetail | None:
        """Return a recipe with its ingredient rows."""
        recipe = await self.recipe_repository.find_recipe(recipe_id)
        if recipe is None:
            return None
        items = await self.recipe_repository.list_items(recipe_id)
        return RecipeDetail(recipe=recipe, items=items)
