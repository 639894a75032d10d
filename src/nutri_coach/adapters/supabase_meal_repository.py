"""Supabase repository for meals."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from nutri_coach.adapters._supabase import parse_timestamp, run_query, to_float
from nutri_coach.domain.meals import MealDraft, MealEntry
from nutri_coach.services.errors import RepositoryError
from nutri_coach.services.meals import MealRepository


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation for meal logging."""

    client: Client

    def list_meals(self, user_id: UUID) -> list[MealEntry]:
        """Return meals for a user, newest first."""
        response = run_query(
            lambda: self.client.table("meals")
            .select("*")
            .eq("user_id", str(user_id))
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_meal(row) for row in response.data or []]

    def create_meal(self, user_id: UUID, draft: MealDraft) -> MealEntry:
        """Insert a meal row and return it."""
        response = run_query(
            lambda: self.client.table("meals")
            .insert(
                {
                    "user_id": str(user_id),
                    "meal_time": draft.meal_time,
                    "meal_name": draft.name,
                    "calories": draft.calories,
                    "protein": draft.protein_g,
                    "carbs": draft.carbs_g,
                    "fiber": draft.fiber_g,
                }
            )
            .execute()
        )
        if not response.data:
            raise RepositoryError("Failed to create meal")
        return _parse_meal(response.data[0])

    def delete_meal(self, user_id: UUID, meal_id: UUID) -> None:
        """Delete a meal scoped to its owner."""
        run_query(
            lambda: self.client.table("meals")
            .delete()
            .eq("id", str(meal_id))
            .eq("user_id", str(user_id))
            .execute()
        )


def _parse_meal(row: dict[str, object]) -> MealEntry:
    return MealEntry(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        meal_time=str(row.get("meal_time", "")),
        name=str(row.get("meal_name", "")),
        calories=to_float(row.get("calories")),
        protein_g=to_float(row.get("protein")),
        carbs_g=to_float(row.get("carbs")),
        fiber_g=to_float(row.get("fiber")),
        created_at=parse_timestamp(row.get("created_at")),
    )
