"""Recipe library and pantry suggestions."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from nutri_coach.domain.recipes import Recipe, RecipeDraft, RecipeSuggestion
from nutri_coach.services.errors import InvalidRequestError
from nutri_coach.services.estimator import round_half_up
from nutri_coach.services.profiles import ProfileService

PLANT_BASED_DIETS = frozenset({"vegetarian", "vegan"})
PLANT_BASED_TAGS = frozenset({"vegetarian", "vegan"})


class RecipeRepository(Protocol):
    """Persistence interface for recipes."""

    def list_recipes(self, user_id: UUID) -> list[Recipe]:
        """Return all recipes owned by a user."""

    def create_recipe(self, user_id: UUID, draft: RecipeDraft) -> Recipe:
        """Insert a recipe and return the stored row."""


@dataclass
class RecipeService:
    """Service for the recipe browser."""

    repository: RecipeRepository
    profile_service: ProfileService

    def list_recipes(self, user_id: UUID) -> list[Recipe]:
        """Return the user's recipes."""
        return self.repository.list_recipes(user_id)

    def create_recipe(self, user_id: UUID, draft: RecipeDraft) -> Recipe:
        """Persist a new recipe."""
        if not draft.name.strip():
            raise InvalidRequestError("missing recipe.name")
        return self.repository.create_recipe(user_id, draft)

    def suggest(
        self,
        user_id: UUID,
        pantry: str | None = None,
        diet_type: str | None = None,
    ) -> list[RecipeSuggestion]:
        """Rank the user's recipes by how much of each the pantry covers.

        Pantry and diet type fall back to the values stored in the profile.
        """
        if pantry is None or diet_type is None:
            profile = self.profile_service.get_profile(user_id)
            if profile is not None:
                pantry = pantry if pantry is not None else profile.pantry_items
                diet_type = diet_type if diet_type is not None else profile.diet_type
        terms = parse_pantry(pantry)
        recipes = filter_by_diet(self.repository.list_recipes(user_id), diet_type)
        suggestions = [
            RecipeSuggestion(
                recipe=recipe, pantry_match_pct=pantry_match(recipe, terms)
            )
            for recipe in recipes
        ]
        suggestions.sort(key=lambda item: (-item.pantry_match_pct, item.recipe.name))
        return suggestions


def parse_pantry(raw: str | None) -> list[str]:
    """Split a comma separated pantry list into lower-cased terms."""
    if not raw:
        return []
    terms = [chunk.strip().lower() for chunk in raw.split(",")]
    return [term for term in terms if term]


def filter_by_diet(recipes: list[Recipe], diet_type: str | None) -> list[Recipe]:
    """Keep only plant-based recipes for vegetarian and vegan diets."""
    if not diet_type or diet_type.lower() not in PLANT_BASED_DIETS:
        return recipes
    return [
        recipe
        for recipe in recipes
        if any(tag.lower() in PLANT_BASED_TAGS for tag in recipe.tags)
    ]


def pantry_match(recipe: Recipe, terms: list[str]) -> int:
    """Return the percentage of ingredients that mention a pantry term."""
    if not recipe.ingredients or not terms:
        return 0
    matched = sum(
        1
        for ingredient in recipe.ingredients
        if any(term in ingredient.lower() for term in terms)
    )
    return round_half_up(100 * matched / len(recipe.ingredients))
