"""Daily progress aggregation."""

from nutri_coach.domain.dashboard import DailyLog, DailyProgress

DEFAULT_CALORIE_TARGET = 2000
STEPS_GOAL = 10000
WATER_GOAL_LITERS = 2.5


def resolve_calorie_target(calorie_target: int | None) -> int:
    """Return the target to measure against, defaulting when absent.

    A stored target of zero is treated as absent since it cannot be divided by.
    """
    if calorie_target is None or calorie_target == 0:
        return DEFAULT_CALORIE_TARGET
    return calorie_target


def compute_daily_progress(calorie_target: int | None, log: DailyLog) -> DailyProgress:
    """Merge a calorie target with a daily log into raw progress ratios.

    Values are not clamped: overshooting a goal gives more than 100 percent
    and a malformed negative log gives negative percentages.
    """
    target = resolve_calorie_target(calorie_target)
    return DailyProgress(
        calorie_target=target,
        calories_remaining=target - log.calories_consumed,
        calories_progress_pct=log.calories_consumed / target * 100,
        steps_progress_pct=log.steps / STEPS_GOAL * 100,
        water_progress_pct=log.water_intake_liters / WATER_GOAL_LITERS * 100,
    )
