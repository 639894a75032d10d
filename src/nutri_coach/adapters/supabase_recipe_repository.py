"""Supabase repository for recipes."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from nutri_coach.adapters._supabase import run_query, to_float, to_str_list
from nutri_coach.domain.recipes import Recipe, RecipeDraft
from nutri_coach.services.errors import RepositoryError
from nutri_coach.services.recipes import RecipeRepository


@dataclass
class SupabaseRecipeRepository(RecipeRepository):
    """Supabase implementation for recipes."""

    client: Client

    def list_recipes(self, user_id: UUID) -> list[Recipe]:
        """Return all recipes owned by a user."""
        response = run_query(
            lambda: self.client.table("recipes")
            .select("*")
            .eq("user_id", str(user_id))
            .execute()
        )
        return [_parse_recipe(row) for row in response.data or []]

    def create_recipe(self, user_id: UUID, draft: RecipeDraft) -> Recipe:
        """Insert a recipe row and return it."""
        response = run_query(
            lambda: self.client.table("recipes")
            .insert(
                {
                    "user_id": str(user_id),
                    "name": draft.name,
                    "calories": draft.calories,
                    "protein_g": draft.protein_g,
                    "carbs_g": draft.carbs_g,
                    "fat_g": draft.fat_g,
                    "servings": draft.servings,
                    "cook_time_minutes": draft.cook_time_minutes,
                    "difficulty": draft.difficulty,
                    "ingredients": draft.ingredients,
                    "instructions": draft.instructions,
                    "tags": draft.tags,
                }
            )
            .execute()
        )
        if not response.data:
            raise RepositoryError("Failed to create recipe")
        return _parse_recipe(response.data[0])


def _parse_recipe(row: dict[str, object]) -> Recipe:
    cook_time = row.get("cook_time_minutes")
    return Recipe(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        name=str(row.get("name", "")),
        calories=to_float(row.get("calories")),
        protein_g=to_float(row.get("protein_g")),
        carbs_g=to_float(row.get("carbs_g")),
        fat_g=to_float(row.get("fat_g")),
        servings=int(row.get("servings") or 1),
        cook_time_minutes=int(cook_time) if cook_time is not None else None,
        difficulty=row.get("difficulty"),
        ingredients=to_str_list(row.get("ingredients")),
        instructions=to_str_list(row.get("instructions")),
        tags=to_str_list(row.get("tags")),
    )
