"""Meal logging service."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from nutri_coach.domain.meals import MealDraft, MealEntry, MealTime
from nutri_coach.services.dashboard import DashboardService
from nutri_coach.services.errors import InvalidRequestError, RepositoryError


class MealRepository(Protocol):
    """Persistence interface for meals."""

    def list_meals(self, user_id: UUID) -> list[MealEntry]:
        """Return a user's meals, newest first."""

    def create_meal(self, user_id: UUID, draft: MealDraft) -> MealEntry:
        """Insert a meal and return the stored row."""

    def delete_meal(self, user_id: UUID, meal_id: UUID) -> None:
        """Delete a meal owned by the user."""


@dataclass
class MealService:
    """Service for logging meals."""

    repository: MealRepository
    dashboard_service: DashboardService

    def list_meals(self, user_id: UUID) -> list[MealEntry]:
        """Return the user's meals, newest first."""
        return self.repository.list_meals(user_id)

    def add_meal(self, user_id: UUID, draft: MealDraft) -> MealEntry:
        """Persist a meal and count its calories towards today's log.

        The log is updated first. If the meal insert then fails, the calories
        are taken back off so a retry does not count them twice.
        """
        validate_meal(draft)
        if not draft.calories:
            return self.repository.create_meal(user_id, draft)
        log = self.dashboard_service.add_calories(user_id, draft.calories)
        try:
            return self.repository.create_meal(user_id, draft)
        except RepositoryError:
            self.dashboard_service.add_calories(
                user_id, -draft.calories, log.log_date
            )
            raise

    def delete_meal(self, user_id: UUID, meal_id: UUID) -> None:
        """Delete one of the user's meals."""
        self.repository.delete_meal(user_id, meal_id)


def validate_meal(draft: MealDraft) -> None:
    """Reject meals without a time and name, or with negative macros."""
    if not draft.meal_time or not draft.name.strip():
        raise InvalidRequestError("meal_time and meal_name are required")
    if draft.meal_time not in set(MealTime):
        raise InvalidRequestError(f"meal_time must be one of: {', '.join(MealTime)}")
    macros = {
        "calories": draft.calories,
        "protein": draft.protein_g,
        "carbs": draft.carbs_g,
        "fiber": draft.fiber_g,
    }
    negative = [name for name, value in macros.items() if value < 0]
    if negative:
        raise InvalidRequestError(f"{', '.join(negative)} must not be negative")
