"""Domain models for user profiles."""

from dataclasses import dataclass, field
from enum import StrEnum
from uuid import UUID


class Sex(StrEnum):
    """Biological sex used by the BMR formula."""

    MALE = "male"
    FEMALE = "female"


class ActivityLevel(StrEnum):
    """Self-reported activity level."""

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"


class Goal(StrEnum):
    """Body weight goal."""

    LOSS = "loss"
    MAINTAIN = "maintain"
    GAIN = "gain"


@dataclass(frozen=True)
class Biometrics:
    """Inputs for the calorie target estimate.

    ``activity_level`` and ``goal`` are free strings: values outside the
    enums are accepted and fall back to the sedentary multiplier and no goal
    adjustment respectively.
    """

    age: int
    sex: str
    height_cm: float
    weight_kg: float
    activity_level: str | None = None
    goal: str | None = None


@dataclass(frozen=True)
class Profile:
    """Stored user profile with onboarding preferences."""

    user_id: UUID
    biometrics: Biometrics
    calorie_target: int | None
    timeframe: str | None = None
    cuisine: str | None = None
    diet_type: str | None = None
    allergies: list[str] = field(default_factory=list)
    pantry_items: str | None = None
    time_per_meal: str | None = None
    budget: str | None = None


@dataclass(frozen=True)
class CalorieEstimate:
    """Intermediate and final values of a calorie target estimate."""

    bmr: float
    tdee: float
    calorie_target: int
