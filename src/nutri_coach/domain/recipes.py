"""Domain models for recipes."""

from dataclasses import dataclass, field
from uuid import UUID


@dataclass(frozen=True)
class RecipeDraft:
    """Recipe details supplied by the client before persistence."""

    name: str
    calories: float = 0.0
    protein_g: float = 0.0
    carbs_g: float = 0.0
    fat_g: float = 0.0
    servings: int = 1
    cook_time_minutes: int | None = None
    difficulty: str | None = None
    ingredients: list[str] = field(default_factory=list)
    instructions: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Recipe:
    """Stored recipe owned by a user."""

    id: UUID
    user_id: UUID
    name: str
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    servings: int
    cook_time_minutes: int | None
    difficulty: str | None
    ingredients: list[str]
    instructions: list[str]
    tags: list[str]


@dataclass(frozen=True)
class RecipeSuggestion:
    """Recipe ranked against a pantry."""

    recipe: Recipe
    pantry_match_pct: int
