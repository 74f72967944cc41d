"""Shared test fixtures."""

from dataclasses import dataclass, field
from uuid import UUID

import pytest

from recipe_builder.adapters.google_auth import TokenProvider
from recipe_builder.adapters.sheets_client import SheetsClient
from recipe_builder.config import Settings
from recipe_builder.containers import AppContainer
from recipe_builder.domain.nutrients import NutrientRecord, UnitConversion
from recipe_builder.domain.recipes import (
    RecipeCreated,
    RecipeDraft,
    ScaledIngredientRow,
)
from recipe_builder.services.recipes import (
    NutrientRepository,
    RecipeRepository,
    RecipeService,
)

FIXED_RECIPE_ID = UUID("5f0c6a38-3d1b-4c5e-9d7a-1f2e3d4c5b6a")
FIXED_TIMESTAMP = "2024-05-01T12:00:00.000Z"


def make_record(code: str, name: str = "", **columns: float) -> NutrientRecord:
    """Build a nutrient record from column values given as keyword arguments.

    Keyword names map to source columns through ``COLUMN_ALIASES``.
    """
    return NutrientRecord(
        code=code,
        name=name or code,
        nutrients={COLUMN_ALIASES[key]: value for key, value in columns.items()},
    )


COLUMN_ALIASES = {
    "energy": "Energy (Kcal)",
    "energy_kj": "Energy (KJ)",
    "protein": "Protein (g)",
    "fat": "Fat (g)",
    "carbs": "Carbohydrate (g)",
    "fiber": "Total fibre (g)",
    "thiamine": "Thiamine, B1 (mg)",
    "cobalt": "Cobalt (Co) mg",
    "omega3": "Omega 3 (mg)",
    "omega6": "Omega 6 (mg)",
    "vitamin_d": "Vitamin D (µg)",
    "total_sugar": "TOTAL SUGAR (g)",
}


@dataclass
class InMemoryNutrientRepository(NutrientRepository):
    """In-memory nutrient repository for tests."""

    records: list[NutrientRecord] = field(default_factory=list)
    conversions: dict[tuple[str, str], UnitConversion] = field(default_factory=dict)
    fetch_calls: int = 0

    async def fetch_all(self) -> list[NutrientRecord]:
        self.fetch_calls += 1
        return list(self.records)

    async def list_unit_conversions(self) -> dict[tuple[str, str], UnitConversion]:
        return dict(self.conversions)


@dataclass
class FailingNutrientRepository(NutrientRepository):
    """Nutrient repository whose upstream is unavailable."""

    error: Exception = field(default_factory=lambda: RuntimeError("sheets down"))

    async def fetch_all(self) -> list[NutrientRecord]:
        raise self.error

    async def list_unit_conversions(self) -> dict[tuple[str, str], UnitConversion]:
        raise self.error


@dataclass
class InMemoryRecipeRepository(RecipeRepository):
    """In-memory recipe repository for tests."""

    recipes: list[tuple[RecipeDraft, RecipeCreated]] = field(default_factory=list)
    items: list[ScaledIngredientRow] = field(default_factory=list)
    item_batches: int = 0

    async def save_recipe(self, draft: RecipeDraft, created: RecipeCreated) -> None:
        self.recipes.append((draft, created))

    async def save_items(self, rows: list[ScaledIngredientRow]) -> None:
        self.item_batches += 1
        self.items.extend(rows)

    async def list_recipes(self) -> list[dict[str, str]]:
        return [
            {"RecipeID": str(created.recipe_id), "Recipe Name": draft.name}
            for draft, created in self.recipes
        ]

    async def find_recipe(self, recipe_id: str) -> dict[str, str] | None:
        for recipe in await self.list_recipes():
            if recipe["RecipeID"] == recipe_id:
                return recipe
        return None

    async def list_items(self, recipe_id: str) -> list[dict[str, str]]:
        return [
            {"RecipeID": str(item.recipe_id), "Code": item.code}
            for item in self.items
            if str(item.recipe_id) == recipe_id
        ]


@dataclass
class FakeSheetsClient(SheetsClient):
    """Fake Sheets client serving canned ranges and recording appends."""

    values: dict[str, list[list[str]]] = field(default_factory=dict)
    appended: list[tuple[str, list[list[object]]]] = field(default_factory=list)
    requested: list[str] = field(default_factory=list)

    async def get_values(self, range_: str) -> list[list[str]]:
        self.requested.append(range_)
        return self.values.get(range_, [])

    async def append_values(self, range_: str, rows: list[list[object]]) -> None:
        self.appended.append((range_, rows))


@dataclass
class StaticTokenProvider(TokenProvider):
    """Token provider returning a fixed token."""

    token: str = "test-access-token"
    calls: int = 0

    def get_token(self) -> str:
        self.calls += 1
        return self.token


@pytest.fixture
def settings() -> Settings:
    return Settings(google_spreadsheet_id="spreadsheet-id")


@pytest.fixture
def nutrient_repository() -> InMemoryNutrientRepository:
    return InMemoryNutrientRepository(
        records=[
            make_record("A001", "Rice", energy=200, protein=8, fat=1, carbs=40),
            make_record("B002", "Lentils", energy=300, protein=24, fiber=10),
        ]
    )


@pytest.fixture
def recipe_repository() -> InMemoryRecipeRepository:
    return InMemoryRecipeRepository()


@pytest.fixture
def recipe_service(
    nutrient_repository: InMemoryNutrientRepository,
    recipe_repository: InMemoryRecipeRepository,
) -> RecipeService:
    return RecipeService(
        nutrient_repository=nutrient_repository,
        recipe_repository=recipe_repository,
        id_factory=lambda: FIXED_RECIPE_ID,
        clock=lambda: FIXED_TIMESTAMP,
    )


@pytest.fixture
def container(settings: Settings, recipe_service: RecipeService) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        recipe_service=recipe_service,
        close_resources=close_resources,
    )
