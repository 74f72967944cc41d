"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from recipe_builder.adapters.google_auth import GoogleTokenProvider
from recipe_builder.adapters.sheets_client import HttpxSheetsClient
from recipe_builder.adapters.sheets_nutrient_repository import (
    SheetsNutrientRepository,
)
from recipe_builder.adapters.sheets_recipe_repository import SheetsRecipeRepository
from recipe_builder.config import Settings
from recipe_builder.services.recipes import RecipeService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    recipe_service: RecipeService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    token_provider = GoogleTokenProvider(
        credentials_json=resolved_settings.google_credentials,
        credentials_file=resolved_settings.google_credentials_file,
    )
    sheets_client = HttpxSheetsClient.create(
        spreadsheet_id=resolved_settings.google_spreadsheet_id,
        token_provider=token_provider,
        base_url=resolved_settings.sheets_base_url,
    )
    nutrient_repository = SheetsNutrientRepository(
        sheets_client,
        nutrient_sheet=resolved_settings.nutrient_sheet,
        unit_map_sheet=resolved_settings.unit_map_sheet,
    )
    recipe_repository = SheetsRecipeRepository(
        sheets_client,
        recipe_sheet=resolved_settings.recipe_sheet,
        recipe_items_sheet=resolved_settings.recipe_items_sheet,
    )
    recipe_service = RecipeService(
        nutrient_repository=nutrient_repository,
        recipe_repository=recipe_repository,
        debug=resolved_settings.debug,
    )

    async def close_resources() -> None:
        await sheets_client.close()

    return AppContainer(
        settings=resolved_settings,
        recipe_service=recipe_service,
        close_resources=close_resources,
    )
