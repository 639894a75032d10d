"""Recipe endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request, status

from nutri_coach.api.auth import require_user
from nutri_coach.api.models import RecipeRequest
from nutri_coach.domain.models import AuthUser  # noqa: TC001
from nutri_coach.domain.recipes import Recipe, RecipeDraft

if TYPE_CHECKING:
    from nutri_coach.containers import AppContainer

router = APIRouter(prefix="/api/recipes", tags=["recipes"])


@router.get("")
async def list_recipes(
    request: Request, user: AuthUser = Depends(require_user)
) -> list[dict[str, object]]:
    """Return the caller's recipes."""
    container: AppContainer = request.app.state.container
    return [
        serialize_recipe(recipe)
        for recipe in container.recipe_service.list_recipes(user.id)
    ]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_recipe(
    payload: RecipeRequest,
    request: Request,
    user: AuthUser = Depends(require_user),
) -> dict[str, object]:
    """Add a recipe to the caller's library."""
    container: AppContainer = request.app.state.container
    draft = RecipeDraft(
        name=payload.name,
        calories=payload.calories,
        protein_g=payload.protein_g,
        carbs_g=payload.carbs_g,
        fat_g=payload.fat_g,
        servings=payload.servings,
        cook_time_minutes=payload.cook_time_minutes,
        difficulty=payload.difficulty,
        ingredients=payload.ingredients,
        instructions=payload.instructions,
        tags=payload.tags,
    )
    return serialize_recipe(container.recipe_service.create_recipe(user.id, draft))


@router.get("/suggestions")
async def suggest_recipes(
    request: Request,
    pantry: str | None = None,
    diet_type: str | None = None,
    user: AuthUser = Depends(require_user),
) -> list[dict[str, object]]:
    """Rank the caller's recipes against a pantry list."""
    container: AppContainer = request.app.state.container
    suggestions = container.recipe_service.suggest(
        user.id, pantry=pantry, diet_type=diet_type
    )
    return [
        {
            **serialize_recipe(suggestion.recipe),
            "pantry_match_pct": suggestion.pantry_match_pct,
        }
        for suggestion in suggestions
    ]


def serialize_recipe(recipe: Recipe) -> dict[str, object]:
    """Convert a recipe to a JSON-friendly dict."""
    return {
        "id": str(recipe.id),
        "user_id": str(recipe.user_id),
        "name": recipe.name,
        "calories": recipe.calories,
        "protein_g": recipe.protein_g,
        "carbs_g": recipe.carbs_g,
        "fat_g": recipe.fat_g,
        "servings": recipe.servings,
        "cook_time_minutes": recipe.cook_time_minutes,
        "difficulty": recipe.difficulty,
        "ingredients": recipe.ingredients,
        "instructions": recipe.instructions,
        "tags": recipe.tags,
    }
