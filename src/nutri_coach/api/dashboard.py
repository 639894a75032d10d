"""Dashboard (daily log) endpoints."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from nutri_coach.api.auth import require_user
from nutri_coach.api.models import DailyLogUpdate
from nutri_coach.domain.dashboard import DailyLog, DailyProgress
from nutri_coach.domain.models import AuthUser  # noqa: TC001

if TYPE_CHECKING:
    from nutri_coach.containers import AppContainer

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("")
async def get_dashboard(
    request: Request,
    day: date | None = None,
    user: AuthUser = Depends(require_user),
) -> dict[str, object]:
    """Return the day's log, creating a default one on first access."""
    container: AppContainer = request.app.state.container
    return serialize_log(container.dashboard_service.get_or_create_log(user.id, day))


@router.post("")
async def update_dashboard(
    payload: DailyLogUpdate,
    request: Request,
    day: date | None = None,
    user: AuthUser = Depends(require_user),
) -> dict[str, bool]:
    """Update tracked metrics for the day."""
    container: AppContainer = request.app.state.container
    container.dashboard_service.update_log(
        user.id, payload.model_dump(exclude_none=True), day
    )
    return {"success": True}


@router.get("/progress")
async def get_progress(
    request: Request,
    day: date | None = None,
    user: AuthUser = Depends(require_user),
) -> dict[str, object]:
    """Return the day's log with progress against the calorie target."""
    container: AppContainer = request.app.state.container
    log, progress = container.dashboard_service.get_progress(user.id, day)
    return {"log": serialize_log(log), "progress": serialize_progress(progress)}


def serialize_log(log: DailyLog) -> dict[str, object]:
    """Convert a daily log to a JSON-friendly dict."""
    return {
        "user_id": str(log.user_id),
        "log_date": log.log_date.isoformat(),
        "calories_consumed": log.calories_consumed,
        "steps": log.steps,
        "water_intake_liters": log.water_intake_liters,
        "sleep_hours": log.sleep_hours,
        "mood": log.mood,
    }


def serialize_progress(progress: DailyProgress) -> dict[str, object]:
    """Convert progress values to a JSON-friendly dict."""
    return {
        "calorie_target": progress.calorie_target,
        "calories_remaining": progress.calories_remaining,
        "calories_progress_pct": progress.calories_progress_pct,
        "steps_progress_pct": progress.steps_progress_pct,
        "water_progress_pct": progress.water_progress_pct,
    }
