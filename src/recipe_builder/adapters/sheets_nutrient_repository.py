"""Google Sheets repository for the nutrient reference table."""

from dataclasses import dataclass

from recipe_builder.adapters.sheets_client import SheetsClient, rows_to_dicts
from recipe_builder.domain.nutrients import (
    NutrientRecord,
    UnitConversion,
    parse_or_zero,
)
from recipe_builder.services.recipes import NutrientRepository


@dataclass
class SheetsNutrientRepository(NutrientRepository):
    """Reads nutrient and unit conversion sheets."""

    client: SheetsClient
    nutrient_sheet: str = "NutrientData"
    unit_map_sheet: str = "UnitMap"

    async def fetch_all(self) -> list[NutrientRecord]:
        """Return all nutrient records, one per data row."""
        rows = await self.client.get_values(f"{self.nutrient_sheet}!A:AH")
        return [NutrientRecord.from_row(row) for row in rows_to_dicts(rows)]

    async def list_unit_conversions(self) -> dict[tuple[str, str], UnitConversion]:
        """Return unit conversions keyed by (food code, unit)."""
        rows = await self.client.get_values(f"{self.unit_map_sheet}!A:D")
        conversions: dict[tuple[str, str], UnitConversion] = {}
        for row in rows[1:]:
            cells = [*row, "", "", "", ""][:4]
            code, unit, grams_per_unit, density = cells
            if not code or not unit:
                continue
            conversions[(code, unit)] = UnitConversion(
                code=code,
                unit=unit,
                grams_per_unit=parse_or_zero(grams_per_unit) or 1.0,
                density=parse_or_zero(density) or 1.0,
            )
        return conversions
