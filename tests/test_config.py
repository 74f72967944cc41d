"""Tests for configuration helpers."""

from recipe_builder.config import Settings, parse_cors_origins


def test_parse_cors_origins() -> None:
    assert parse_cors_origins(None) == ["*"]
    assert parse_cors_origins(" * ") == ["*"]
    assert parse_cors_origins("") == ["*"]
    assert parse_cors_origins("https://a.example, https://b.example,") == [
        "https://a.example",
        "https://b.example",
    ]


def test_settings_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("GOOGLE_SPREADSHEET_ID", "from-env")
    monkeypatch.setenv("GOOGLE_CREDENTIALS", '{"type": "service_account"}')
    monkeypatch.setenv("PORT", "8080")

    settings = Settings()

    assert settings.google_spreadsheet_id == "from-env"
    assert settings.google_credentials == '{"type": "service_account"}'
    assert settings.port == 8080
    assert settings.nutrient_sheet == "NutrientData"
