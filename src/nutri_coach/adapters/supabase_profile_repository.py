"""Supabase repository for profiles."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from nutri_coach.adapters._supabase import run_query, to_float, to_str_list
from nutri_coach.domain.profiles import Biometrics, Profile
from nutri_coach.services.errors import RepositoryError
from nutri_coach.services.profiles import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for profile persistence."""

    client: Client

    def get_profile(self, user_id: UUID) -> Profile | None:
        """Return the profile row for a user."""
        response = run_query(
            lambda: self.client.table("profiles")
            .select("*")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0])

    def upsert_profile(self, profile: Profile) -> Profile:
        """Create or replace the profile row."""
        response = run_query(
            lambda: self.client.table("profiles")
            .upsert(_serialize_profile(profile), on_conflict="user_id")
            .execute()
        )
        if not response.data:
            raise RepositoryError("Failed to save profile")
        return _parse_profile(response.data[0])


def _serialize_profile(profile: Profile) -> dict[str, object]:
    biometrics = profile.biometrics
    return {
        "user_id": str(profile.user_id),
        "age": biometrics.age,
        "sex": biometrics.sex,
        "height_cm": biometrics.height_cm,
        "weight_kg": biometrics.weight_kg,
        "activity_level": biometrics.activity_level,
        "goal": biometrics.goal,
        "calorie_target": profile.calorie_target,
        "timeframe": profile.timeframe,
        "cuisine": profile.cuisine,
        "diet_type": profile.diet_type,
        "allergies": profile.allergies,
        "pantry_items": profile.pantry_items,
        "time_per_meal": profile.time_per_meal,
        "budget": profile.budget,
    }


def _parse_profile(row: dict[str, object]) -> Profile:
    calorie_target = row.get("calorie_target")
    return Profile(
        user_id=UUID(str(row["user_id"])),
        biometrics=Biometrics(
            age=int(row.get("age") or 0),
            sex=str(row.get("sex") or ""),
            height_cm=to_float(row.get("height_cm")),
            weight_kg=to_float(row.get("weight_kg")),
            activity_level=row.get("activity_level"),
            goal=row.get("goal"),
        ),
        calorie_target=int(calorie_target) if calorie_target is not None else None,
        timeframe=row.get("timeframe"),
        cuisine=row.get("cuisine"),
        diet_type=row.get("diet_type"),
        allergies=to_str_list(row.get("allergies")),
        pantry_items=row.get("pantry_items"),
        time_per_meal=row.get("time_per_meal"),
        budget=row.get("budget"),
    )
