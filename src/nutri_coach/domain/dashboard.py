"""Domain models for daily tracking."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

DEFAULT_MOOD = 3


@dataclass(frozen=True)
class DailyLog:
    """Tracked metrics for one user on one day."""

    user_id: UUID
    log_date: date
    calories_consumed: float = 0.0
    steps: int = 0
    water_intake_liters: float = 0.0
    sleep_hours: float = 0.0
    mood: int = DEFAULT_MOOD


@dataclass(frozen=True)
class DailyProgress:
    """Display-ready progress values for a day. Percentages are not clamped."""

    calorie_target: int
    calories_remaining: float
    calories_progress_pct: float
    steps_progress_pct: float
    water_progress_pct: float
