"""Pydantic models for recipe API payloads."""

from pydantic import BaseModel, Field

from recipe_builder.domain.recipes import IngredientLine, RecipeDraft


class IngredientPayload(BaseModel):
    """Ingredient line in a recipe request."""

    line_no: int = Field(alias="lineNo")
    code: str
    name: str = ""
    quantity_in_grams: float = Field(alias="quantityInGrams", gt=0)

    def to_domain(self) -> IngredientLine:
        return IngredientLine(
            line_no=self.line_no,
            code=self.code,
            name=self.name,
            quantity_g=self.quantity_in_grams,
        )


class RecipeCreateRequest(BaseModel):
    """Recipe creation request."""

    recipe_name: str = Field(alias="recipeName")
    servings: int = Field(alias="yield")
    method: str | None = None
    health_benefits: str | None = Field(default=None, alias="healthBenefits")
    precautions: str | None = None
    source: str | None = None
    meal_tags: str | list[str] | None = Field(default=None, alias="mealTags")
    ingredients: list[IngredientPayload] = Field(default_factory=list)

    def to_domain(self) -> RecipeDraft:
        meal_tags = self.meal_tags or ""
        if isinstance(meal_tags, list):
            meal_tags = ", ".join(meal_tags)
        return RecipeDraft(
            name=self.recipe_name,
            servings=self.servings,
            ingredients=[item.to_domain() for item in self.ingredients],
            method=self.method or "",
            health_benefits=self.health_benefits or "",
            precautions=self.precautions or "",
            source=self.source or "",
            meal_tags=meal_tags,
        )
