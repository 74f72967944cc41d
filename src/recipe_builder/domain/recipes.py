"""Domain models for recipes and their nutrition."""

from dataclasses import dataclass, field, replace
from uuid import UUID

from recipe_builder.domain.nutrients import NUTRIENT_FIELDS


@dataclass(frozen=True)
class IngredientLine:
    """A caller-supplied ingredient with its quantity in grams."""

    line_no: int
    code: str
    name: str
    quantity_g: float


@dataclass(frozen=True)
class RecipeDraft:
    """Recipe as submitted by a caller, before nutrition is computed."""

    name: str
    servings: int
    ingredients: list[IngredientLine]
    method: str = ""
    health_benefits: str = ""
    precautions: str = ""
    source: str = ""
    meal_tags: str = ""


@dataclass(frozen=True)
class RecipeTotals:
    """Running nutrient sums for a recipe."""

    energy: float = 0.0
    protein: float = 0.0
    fat: float = 0.0
    carbs: float = 0.0
    fiber: float = 0.0
    vitamin_d: float = 0.0
    vitamin_a: float = 0.0
    omega3: float = 0.0
    omega6: float = 0.0
    energy_kj: float = 0.0
    thiamine: float = 0.0
    riboflavin: float = 0.0
    niacin: float = 0.0
    pantothenic_acid: float = 0.0
    pyridoxine: float = 0.0
    biotin: float = 0.0
    folate: float = 0.0
    vitamin_c: float = 0.0
    vitamin_e: float = 0.0
    vitamin_k1: float = 0.0
    iron: float = 0.0
    calcium: float = 0.0
    magnesium: float = 0.0
    zinc: float = 0.0
    selenium: float = 0.0
    sodium: float = 0.0
    potassium: float = 0.0
    phosphorus: float = 0.0
    cobalt: float = 0.0
    mufa: float = 0.0
    pufa: float = 0.0
    saturated_fat: float = 0.0
    total_sugar: float = 0.0

    def plus(self, scaled: dict[str, float]) -> "RecipeTotals":
        """Return new totals with a scaled ingredient added in."""
        return replace(
            self,
            **{
                nutrient.attr: getattr(self, nutrient.attr)
                + scaled.get(nutrient.column, 0.0)
                for nutrient in NUTRIENT_FIELDS
            },
        )


@dataclass(frozen=True)
class ScaledIngredientRow:
    """Ingredient nutrients scaled to its quantity, ready for persistence."""

    timestamp: str
    recipe_id: UUID
    line_no: int
    code: str
    name: str
    quantity_g: float
    nutrients: dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class RecipeResult:
    """Formatted recipe nutrition."""

    totals: dict[str, str]
    per_serving: dict[str, str]
    omega3_to_6_ratio: str | int


@dataclass(frozen=True)
class RecipeCreated:
    """Outcome of creating a recipe."""

    recipe_id: UUID
    timestamp: str
    result: RecipeResult
    items: list[ScaledIngredientRow]


@dataclass(frozen=True)
class RecipeDetail:
    """A stored recipe with its ingredient rows."""

    recipe: dict[str, str]
    items: list[dict[str, str]]
