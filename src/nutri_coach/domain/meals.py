"""Domain models for meal logging."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from uuid import UUID


class MealTime(StrEnum):
    """Meal slot within a day."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"


@dataclass(frozen=True)
class MealDraft:
    """Meal details supplied by the client before persistence."""

    meal_time: str
    name: str
    calories: float = 0.0
    protein_g: float = 0.0
    carbs_g: float = 0.0
    fiber_g: float = 0.0


@dataclass(frozen=True)
class MealEntry:
    """Logged meal row."""

    id: UUID
    user_id: UUID
    meal_time: str
    name: str
    calories: float
    protein_g: float
    carbs_g: float
    fiber_g: float
    created_at: datetime | None
