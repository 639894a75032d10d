"""Daily log (dashboard) service."""

import logging
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Protocol
from uuid import UUID

from nutri_coach.domain.dashboard import DailyLog, DailyProgress
from nutri_coach.services.errors import InvalidRequestError
from nutri_coach.services.profiles import ProfileService
from nutri_coach.services.progress import compute_daily_progress

_logger = logging.getLogger(__name__)

MIN_MOOD = 1
MAX_MOOD = 5
UPDATABLE_FIELDS = frozenset(
    {"calories_consumed", "steps", "water_intake_liters", "sleep_hours", "mood"}
)


class DailyLogRepository(Protocol):
    """Persistence interface for daily logs."""

    def get_log(self, user_id: UUID, log_date: date) -> DailyLog | None:
        """Return the log for a user and day, if present."""

    def create_log(self, log: DailyLog) -> DailyLog:
        """Insert a new log row and return it."""

    def upsert_log(self, log: DailyLog) -> None:
        """Create or replace the log row for its user and day."""


@dataclass
class DashboardService:
    """Service for daily tracking and progress."""

    repository: DailyLogRepository
    profile_service: ProfileService

    def get_or_create_log(
        self, user_id: UUID, log_date: date | None = None
    ) -> DailyLog:
        """Return the day's log, creating a zeroed one on first access."""
        day = log_date or today()
        existing = self.repository.get_log(user_id, day)
        if existing is not None:
            return existing
        _logger.info("Creating daily log", extra={"user_id": str(user_id)})
        return self.repository.create_log(DailyLog(user_id=user_id, log_date=day))

    def update_log(
        self, user_id: UUID, changes: dict[str, object], log_date: date | None = None
    ) -> DailyLog:
        """Apply a partial update to the day's log."""
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            fields = ", ".join(sorted(unknown))
            raise InvalidRequestError(f"Unknown daily log fields: {fields}")
        mood = changes.get("mood")
        if mood is not None and not MIN_MOOD <= int(mood) <= MAX_MOOD:
            raise InvalidRequestError(
                f"mood must be between {MIN_MOOD} and {MAX_MOOD}"
            )
        current = self.get_or_create_log(user_id, log_date)
        updated = DailyLog(
            user_id=current.user_id,
            log_date=current.log_date,
            calories_consumed=float(
                changes.get("calories_consumed", current.calories_consumed)
            ),
            steps=int(changes.get("steps", current.steps)),
            water_intake_liters=float(
                changes.get("water_intake_liters", current.water_intake_liters)
            ),
            sleep_hours=float(changes.get("sleep_hours", current.sleep_hours)),
            mood=int(changes.get("mood", current.mood)),
        )
        self.repository.upsert_log(updated)
        return updated

    def add_calories(
        self, user_id: UUID, calories: float, log_date: date | None = None
    ) -> DailyLog:
        """Add consumed calories to the day's log."""
        current = self.get_or_create_log(user_id, log_date)
        return self.update_log(
            user_id,
            {"calories_consumed": current.calories_consumed + calories},
            current.log_date,
        )

    def get_progress(
        self, user_id: UUID, log_date: date | None = None
    ) -> tuple[DailyLog, DailyProgress]:
        """Return the day's log with progress against the profile target."""
        log = self.get_or_create_log(user_id, log_date)
        target = self.profile_service.get_calorie_target(user_id)
        return log, compute_daily_progress(target, log)


def today() -> date:
    """Return the current UTC date."""
    return datetime.now(tz=UTC).date()
