"""Recipe and ingredient API endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from recipe_builder.api.recipe_models import RecipeCreateRequest  # noqa: TC001

if TYPE_CHECKING:
    from recipe_builder.containers import AppContainer
    from recipe_builder.domain.recipes import RecipeCreated

router = APIRouter(prefix="/api", tags=["recipes"])

_logger = logging.getLogger(__name__)


def _error(message: str, status_code: int = 500) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.get("/ingredients", response_model=None)
async def list_ingredients(
    request: Request,
) -> list[dict[str, object]] | JSONResponse:
    """Return all ingredients with their headline macros."""
    container: AppContainer = request.app.state.container
    try:
        ingredients = await container.recipe_service.list_ingredients()
    except Exception:
        _logger.exception("Error fetching ingredients")
        return _error("Failed to fetch ingredients")
    return [
        {
            "code": item.code,
            "name": item.name,
            "protein": item.protein,
            "fat": item.fat,
            "carbs": item.carbs,
            "fiber": item.fiber,
            "energy": item.energy,
        }
        for item in ingredients
    ]


@router.post("/recipes", response_model=None)
async def create_recipe(
    payload: RecipeCreateRequest, request: Request
) -> dict[str, object] | JSONResponse:
    """Compute nutrition for a recipe and store it."""
    container: AppContainer = request.app.state.container
    try:
        created = await container.recipe_service.create_recipe(payload.to_domain())
    except Exception:
        _logger.exception("Error creating recipe")
        return _error("Failed to create recipe")
    return {
        "success": True,
        "recipeId": str(created.recipe_id),
        "message": "Recipe saved successfully",
        "nutrition": _nutrition_payload(created),
    }


@router.get("/recipes", response_model=None)
async def list_recipes(request: Request) -> list[dict[str, str]] | JSONResponse:
    """Return all stored recipes."""
    container: AppContainer = request.app.state.container
    try:
        return await container.recipe_service.list_recipes()
    except Exception:
        _logger.exception("Error fetching recipes")
        return _error("Failed to fetch recipes")


@router.get("/recipes/ping")
async def ping() -> dict[str, bool]:
    """Liveness check for the recipes API."""
    return {"ok": True}


@router.get("/recipes/{recipe_id}", response_model=None)
async def recipe_detail(
    recipe_id: str, request: Request
) -> dict[str, object] | JSONResponse:
    """Return a recipe with its ingredient rows."""
    container: AppContainer = request.app.state.container
    try:
        detail = await container.recipe_service.get_recipe(recipe_id)
    except Exception:
        _logger.exception("Error fetching recipe details")
        return _error("Failed to fetch recipe details")
    if detail is None:
        return _error("Recipe not found", status_code=404)
    return {"recipe": detail.recipe, "items": detail.items}


def _nutrition_payload(created: RecipeCreated) -> dict[str, object]:
    result = created.result
    return {
        "total": result.totals,
        "perServing": result.per_serving,
        "omega3To6Ratio": result.omega3_to_6_ratio,
    }
