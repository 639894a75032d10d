"""Supabase repository for daily logs."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from nutri_coach.adapters._supabase import run_query, to_float
from nutri_coach.domain.dashboard import DEFAULT_MOOD, DailyLog
from nutri_coach.services.dashboard import DailyLogRepository
from nutri_coach.services.errors import RepositoryError

_COLUMNS = (
    "user_id, log_date, calories_consumed, steps, water_intake_liters, "
    "sleep_hours, mood"
)


@dataclass
class SupabaseDailyLogRepository(DailyLogRepository):
    """Supabase implementation for daily logs."""

    client: Client

    def get_log(self, user_id: UUID, log_date: date) -> DailyLog | None:
        """Return the log for a user and day."""
        response = run_query(
            lambda: self.client.table("daily_logs")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .eq("log_date", log_date.isoformat())
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_log(response.data[0])

    def create_log(self, log: DailyLog) -> DailyLog:
        """Insert a log row and return it."""
        response = run_query(
            lambda: self.client.table("daily_logs")
            .insert(_serialize_log(log))
            .execute()
        )
        if not response.data:
            raise RepositoryError("Failed to create daily log")
        return _parse_log(response.data[0])

    def upsert_log(self, log: DailyLog) -> None:
        """Create or replace the row for the log's user and day."""
        run_query(
            lambda: self.client.table("daily_logs")
            .upsert(_serialize_log(log), on_conflict="user_id,log_date")
            .execute()
        )


def _serialize_log(log: DailyLog) -> dict[str, object]:
    return {
        "user_id": str(log.user_id),
        "log_date": log.log_date.isoformat(),
        "calories_consumed": log.calories_consumed,
        "steps": log.steps,
        "water_intake_liters": log.water_intake_liters,
        "sleep_hours": log.sleep_hours,
        "mood": log.mood,
    }


def _parse_log(row: dict[str, object]) -> DailyLog:
    mood = row.get("mood")
    return DailyLog(
        user_id=UUID(str(row["user_id"])),
        log_date=date.fromisoformat(str(row["log_date"])),
        calories_consumed=to_float(row.get("calories_consumed")),
        steps=int(row.get("steps") or 0),
        water_intake_liters=to_float(row.get("water_intake_liters")),
        sleep_hours=to_float(row.get("sleep_hours")),
        mood=int(mood) if mood is not None else DEFAULT_MOOD,
    )
