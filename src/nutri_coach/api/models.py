"""Pydantic models for API request bodies.

Bodies accept snake_case keys as well as the camelCase keys the web client
sends.
"""

from pydantic import AliasChoices, BaseModel, Field


class BiometricsRequest(BaseModel):
    """Biometric inputs collected by the onboarding wizard."""

    age: int
    sex: str
    height_cm: float = Field(
        validation_alias=AliasChoices("height_cm", "heightCm", "height")
    )
    weight_kg: float = Field(
        validation_alias=AliasChoices("weight_kg", "weightKg", "weight")
    )
    activity_level: str | None = Field(
        default=None,
        validation_alias=AliasChoices("activity_level", "activityLevel"),
    )
    goal: str | None = None


class ProfileRequest(BiometricsRequest):
    """Full onboarding profile. Any client-supplied calorie target is ignored."""

    timeframe: str | None = None
    cuisine: str | None = None
    diet_type: str | None = Field(
        default=None, validation_alias=AliasChoices("diet_type", "dietType")
    )
    allergies: list[str] = Field(default_factory=list)
    pantry_items: str | None = Field(
        default=None, validation_alias=AliasChoices("pantry_items", "pantryItems")
    )
    time_per_meal: str | None = Field(
        default=None, validation_alias=AliasChoices("time_per_meal", "timePerMeal")
    )
    budget: str | None = None


class RecipeRequest(BaseModel):
    """Recipe creation payload."""

    name: str = ""
    calories: float = 0.0
    protein_g: float = Field(
        default=0.0, validation_alias=AliasChoices("protein_g", "protein")
    )
    carbs_g: float = Field(
        default=0.0, validation_alias=AliasChoices("carbs_g", "carbs")
    )
    fat_g: float = Field(
        default=0.0, validation_alias=AliasChoices("fat_g", "fats", "fat")
    )
    servings: int = 1
    cook_time_minutes: int | None = Field(
        default=None,
        validation_alias=AliasChoices("cook_time_minutes", "cookTime"),
    )
    difficulty: str | None = None
    ingredients: list[str] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)


class MealRequest(BaseModel):
    """Meal logging payload. Missing macros count as zero."""

    meal_time: str | None = Field(
        default=None, validation_alias=AliasChoices("meal_time", "mealTime")
    )
    meal_name: str | None = Field(
        default=None,
        validation_alias=AliasChoices("meal_name", "mealName", "name"),
    )
    calories: float | None = Field(default=None, ge=0)
    protein: float | None = Field(
        default=None, ge=0, validation_alias=AliasChoices("protein", "protein_g")
    )
    carbs: float | None = Field(
        default=None, ge=0, validation_alias=AliasChoices("carbs", "carbs_g")
    )
    fiber: float | None = Field(
        default=None, ge=0, validation_alias=AliasChoices("fiber", "fiber_g")
    )


class DailyLogUpdate(BaseModel):
    """Partial update of the day's tracked metrics."""

    calories_consumed: float | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "calories_consumed", "caloriesConsumed", "caloriesconsumed"
        ),
    )
    steps: int | None = None
    water_intake_liters: float | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "water_intake_liters", "waterIntake", "waterintake"
        ),
    )
    sleep_hours: float | None = Field(
        default=None, validation_alias=AliasChoices("sleep_hours", "sleep")
    )
    mood: int | None = Field(default=None, ge=1, le=5)
