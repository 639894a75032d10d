"""Meal logging endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request, status

from nutri_coach.api.auth import require_user
from nutri_coach.api.models import MealRequest
from nutri_coach.domain.meals import MealDraft, MealEntry
from nutri_coach.domain.models import AuthUser  # noqa: TC001

if TYPE_CHECKING:
    from nutri_coach.containers import AppContainer

router = APIRouter(prefix="/api/meals", tags=["meals"])


@router.get("")
async def list_meals(
    request: Request, user: AuthUser = Depends(require_user)
) -> list[dict[str, object]]:
    """Return the caller's meals, newest first."""
    container: AppContainer = request.app.state.container
    return [serialize_meal(meal) for meal in container.meal_service.list_meals(user.id)]


@router.post("", status_code=status.HTTP_201_CREATED)
async def add_meal(
    payload: MealRequest,
    request: Request,
    user: AuthUser = Depends(require_user),
) -> dict[str, object]:
    """Log a meal for the caller."""
    container: AppContainer = request.app.state.container
    draft = MealDraft(
        meal_time=payload.meal_time or "",
        name=payload.meal_name or "",
        calories=payload.calories or 0.0,
        protein_g=payload.protein or 0.0,
        carbs_g=payload.carbs or 0.0,
        fiber_g=payload.fiber or 0.0,
    )
    return serialize_meal(container.meal_service.add_meal(user.id, draft))


@router.delete("/{meal_id}")
async def delete_meal(
    meal_id: UUID, request: Request, user: AuthUser = Depends(require_user)
) -> dict[str, bool]:
    """Delete one of the caller's meals."""
    container: AppContainer = request.app.state.container
    container.meal_service.delete_meal(user.id, meal_id)
    return {"success": True}


def serialize_meal(meal: MealEntry) -> dict[str, object]:
    """Convert a meal to a JSON-friendly dict."""
    return {
        "id": str(meal.id),
        "user_id": str(meal.user_id),
        "meal_time": meal.meal_time,
        "meal_name": meal.name,
        "calories": meal.calories,
        "protein": meal.protein_g,
        "carbs": meal.carbs_g,
        "fiber": meal.fiber_g,
        "created_at": meal.created_at.isoformat() if meal.created_at else None,
    }
