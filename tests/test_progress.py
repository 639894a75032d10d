"""Tests for daily progress aggregation."""

from datetime import date
from uuid import uuid4

import pytest

from nutri_coach.domain.dashboard import DailyLog
from nutri_coach.services.progress import compute_daily_progress


def _log(**kwargs) -> DailyLog:  # type: ignore[no-untyped-def]
    return DailyLog(user_id=uuid4(), log_date=date(2026, 1, 5), **kwargs)


def test_overshooting_target_is_not_clamped() -> None:
    progress = compute_daily_progress(2000, _log(calories_consumed=2500))

    assert progress.calories_remaining == -500
    assert progress.calories_progress_pct == pytest.approx(125)


def test_absent_target_defaults_to_2000() -> None:
    progress = compute_daily_progress(None, _log(calories_consumed=500))

    assert progress.calorie_target == 2000
    assert progress.calories_remaining == 1500
    assert progress.calories_progress_pct == pytest.approx(25)


def test_steps_and_water_against_fixed_goals() -> None:
    progress = compute_daily_progress(
        1800, _log(steps=12000, water_intake_liters=1.25)
    )

    assert progress.steps_progress_pct == pytest.approx(120)
    assert progress.water_progress_pct == pytest.approx(50)


def test_negative_values_propagate() -> None:
    progress = compute_daily_progress(2000, _log(steps=-500))

    assert progress.steps_progress_pct == pytest.approx(-5)


def test_zero_target_treated_as_absent() -> None:
    progress = compute_daily_progress(0, _log(calories_consumed=1000))

    assert progress.calorie_target == 2000
    assert progress.calories_remaining == 1000
    assert progress.calories_progress_pct == pytest.approx(50)
