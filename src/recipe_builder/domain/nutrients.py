"""Nutrient reference data models."""

import math
import re
from dataclasses import dataclass

_NUMERIC_PREFIX = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass(frozen=True)
class NutrientField:
    """One output nutrient: accumulator attribute, API key, source column."""

    attr: str
    key: str
    column: str
    decimals: int = 2


# Persisted column order for recipe totals and recipe item rows.
NUTRIENT_FIELDS: tuple[NutrientField, ...] = (
    NutrientField("energy", "energy", "Energy (Kcal)"),
    NutrientField("protein", "protein", "Protein (g)"),
    NutrientField("fat", "fat", "Fat (g)"),
    NutrientField("carbs", "carbs", "Carbohydrate (g)"),
    NutrientField("fiber", "fiber", "Total fibre (g)"),
    NutrientField("vitamin_d", "vitaminD", "Vitamin D (µg)"),
    NutrientField("vitamin_a", "vitaminA", "Vitamin A (µg)"),
    NutrientField("omega3", "omega3", "Omega 3 (mg)"),
    NutrientField("omega6", "omega6", "Omega 6 (mg)"),
    NutrientField("energy_kj", "energyKJ", "Energy (KJ)"),
    NutrientField("thiamine", "thiamine", "Thiamine, B1 (mg)", decimals=3),
    NutrientField("riboflavin", "riboflavin", "Riboflavin, B2 (mg)", decimals=3),
    NutrientField("niacin", "niacin", "Niacin, B3 (mg)"),
    NutrientField("pantothenic_acid", "pantothenicAcid", "Pantothenic Acid B5 (mg)"),
    NutrientField("pyridoxine", "pyridoxine", "Pyridoxine B6 (mg)", decimals=3),
    NutrientField("biotin", "biotin", "Biotin, B7 (µg)"),
    NutrientField("folate", "folate", "Folate, B9 (µg)"),
    NutrientField("vitamin_c", "vitaminC", "Vitamin C (mg)"),
    NutrientField("vitamin_e", "vitaminE", "VITE (mg)"),
    NutrientField("vitamin_k1", "vitaminK1", "VITK1 (µg)"),
    NutrientField("iron", "iron", "Iron (Fe) mg"),
    NutrientField("calcium", "calcium", "Calcium (Ca) mg"),
    NutrientField("magnesium", "magnesium", "Magnesium (Mg) mg"),
    NutrientField("zinc", "zinc", "Zinc (Zn) mg"),
    NutrientField("selenium", "selenium", "Selenium (Se) µg"),
    NutrientField("sodium", "sodium", "Sodium (Na) mg"),
    NutrientField("potassium", "potassium", "Potassium (K) mg"),
    NutrientField("phosphorus", "phosphorus", "Phosphorus (P) mg"),
    NutrientField("cobalt", "cobalt", "Cobalt (Co) mg", decimals=3),
    NutrientField("mufa", "mufa", "MUFA"),
    NutrientField("pufa", "pufa", "PUFA"),
    NutrientField("saturated_fat", "saturatedFat", "SATURATED FAT"),
    NutrientField("total_sugar", "totalSugar", "TOTAL SUGAR (g)"),
)

NUTRIENT_COLUMNS: tuple[str, ...] = tuple(field.column for field in NUTRIENT_FIELDS)

FOOD_CODE_COLUMN = "Food code"
FOOD_NAME_COLUMN = "Food Name"


def parse_or_zero(value: object) -> float:
    """Parse a nutrient cell, substituting zero for anything unusable.

    Numbers pass through. Strings are read up to the end of their leading
    numeric prefix, so ``"12.5 g"`` parses as ``12.5``. Missing, blank,
    unparseable, non-finite and negative values all become ``0.0``.
    """
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, int | float):
        number = float(value)
    elif isinstance(value, str):
        match = _NUMERIC_PREFIX.match(value)
        if match is None:
            return 0.0
        number = float(match.group(0))
    else:
        return 0.0
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


@dataclass(frozen=True)
class NutrientRecord:
    """Per-100g nutrient composition of a single food code."""

    code: str
    name: str
    nutrients: dict[str, float]

    def value(self, column: str) -> float:
        """Return the per-100g value for a column, zero when absent."""
        return self.nutrients.get(column, 0.0)

    @classmethod
    def from_row(cls, row: dict[str, object]) -> "NutrientRecord":
        """Build a record from a header-keyed source row."""
        nutrients = {
            column: parse_or_zero(value)
            for column, value in row.items()
            if column not in {FOOD_CODE_COLUMN, FOOD_NAME_COLUMN}
        }
        return cls(
            code=str(row.get(FOOD_CODE_COLUMN) or ""),
            name=str(row.get(FOOD_NAME_COLUMN) or ""),
            nutrients=nutrients,
        )


@dataclass(frozen=True)
class IngredientSummary:
    """Search listing entry for a food code."""

    code: str
    name: str
    protein: float
    fat: float
    carbs: float
    fiber: float
    energy: float

    @classmethod
    def from_record(cls, record: NutrientRecord) -> "IngredientSummary":
        """Project the listing fields out of a nutrient record."""
        return cls(
            code=record.code,
            name=record.name,
            protein=record.value("Protein (g)"),
            fat=record.value("Fat (g)"),
            carbs=record.value("Carbohydrate (g)"),
            fiber=record.value("Total fibre (g)"),
            energy=record.value("Energy (Kcal)"),
        )


@dataclass(frozen=True)
class UnitConversion:
    """Grams-per-unit and density for a (food code, unit) pair."""

    code: str
    unit: str
    grams_per_unit: float = 1.0
    density: float = 1.0
