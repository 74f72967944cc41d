"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    google_spreadsheet_id: str
    google_credentials: str | None = None
    google_credentials_file: str = "credentials.json"
    sheets_base_url: str = "https://sheets.googleapis.com/v4"
    nutrient_sheet: str = "NutrientData"
    recipe_sheet: str = "Recipes"
    recipe_items_sheet: str = "RecipeItems"
    unit_map_sheet: str = "UnitMap"
    cors_allow_origins: str = "*"
    host: str = "0.0.0.0"
    port: int = 3000
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_cors_origins(raw: str | None) -> list[str]:
    """Parse allowed CORS origins from env."""
    if raw is None:
        return ["*"]
    cleaned = raw.strip()
    if cleaned in {"", "*"}:
        return ["*"]
    origins = [chunk.strip() for chunk in cleaned.split(",")]
    return [origin for origin in origins if origin] or ["*"]
