"""Google Sheets repository for recipes."""

from dataclasses import dataclass

from recipe_builder.adapters.sheets_client import (
    SheetsClient,
    row_to_dict,
    rows_to_dicts,
)
from recipe_builder.domain.nutrients import NUTRIENT_FIELDS
from recipe_builder.domain.recipes import (
    RecipeCreated,
    RecipeDraft,
    ScaledIngredientRow,
)
from recipe_builder.services.formatting import PER_SERVING_ATTRS
from recipe_builder.services.recipes import RecipeRepository

_RECIPE_ID_COLUMN = 1


@dataclass
class SheetsRecipeRepository(RecipeRepository):
    """Stores recipes and recipe items as spreadsheet rows."""

    client: SheetsClient
    recipe_sheet: str = "Recipes"
    recipe_items_sheet: str = "RecipeItems"

    async def save_recipe(self, draft: RecipeDraft, created: RecipeCreated) -> None:
        """Append the recipe row."""
        await self.client.append_values(
            f"{self.recipe_sheet}!A:A", [_recipe_row(draft, created)]
        )

    async def save_items(self, rows: list[ScaledIngredientRow]) -> None:
        """Append one row per scaled ingredient."""
        if not rows:
            return
        await self.client.append_values(
            f"{self.recipe_items_sheet}!A:A", [_item_row(row) for row in rows]
        )

    async def list_recipes(self) -> list[dict[str, str]]:
        """Return all recipes keyed by header."""
        rows = await self.client.get_values(self.recipe_sheet)
        return rows_to_dicts(rows)

    async def find_recipe(self, recipe_id: str) -> dict[str, str] | None:
        """Return the first recipe row with a matching id."""
        rows = await self.client.get_values(self.recipe_sheet)
        if not rows:
            return None
        for row in rows[1:]:
            if _recipe_id(row) == recipe_id:
                return row_to_dict(rows[0], row)
        return None

    async def list_items(self, recipe_id: str) -> list[dict[str, str]]:
        """Return recipe item rows for a recipe."""
        rows = await self.client.get_values(self.recipe_items_sheet)
        if not rows:
            return []
        return [
            row_to_dict(rows[0], row)
            for row in rows[1:]
            if _recipe_id(row) == recipe_id
        ]


def _recipe_id(row: list[str]) -> str | None:
    if len(row) <= _RECIPE_ID_COLUMN:
        return None
    return row[_RECIPE_ID_COLUMN]


def _recipe_row(draft: RecipeDraft, created: RecipeCreated) -> list[object]:
    result = created.result
    totals: list[object] = []
    for nutrient in NUTRIENT_FIELDS:
        totals.append(result.totals[nutrient.key])
        if nutrient.attr == "omega6":
            totals.append(result.omega3_to_6_ratio)
    keys = {nutrient.attr: nutrient.key for nutrient in NUTRIENT_FIELDS}
    per_serving = [result.per_serving[keys[attr]] for attr in PER_SERVING_ATTRS]
    return [
        created.timestamp,
        str(created.recipe_id),
        draft.name,
        draft.servings,
        draft.method,
        draft.health_benefits,
        draft.precautions,
        draft.source,
        draft.meal_tags,
        *totals,
        draft.servings,
        *per_serving,
    ]


def _item_row(row: ScaledIngredientRow) -> list[object]:
    return [
        row.timestamp,
        str(row.recipe_id),
        row.line_no,
        row.code,
        row.name,
        row.quantity_g,
        *(row.nutrients.get(nutrient.column, 0.0) for nutrient in NUTRIENT_FIELDS),
    ]
