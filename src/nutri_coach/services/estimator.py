"""Calorie target estimation (Mifflin-St Jeor)."""

import math

from nutri_coach.domain.profiles import (
    ActivityLevel,
    Biometrics,
    CalorieEstimate,
    Goal,
    Sex,
)

ACTIVITY_MULTIPLIERS: dict[str, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}
DEFAULT_ACTIVITY_MULTIPLIER = 1.2

GOAL_FACTORS: dict[str, float] = {
    Goal.LOSS: 0.8,
    Goal.GAIN: 1.2,
}


def basal_metabolic_rate(biometrics: Biometrics) -> float:
    """Return BMR in kcal/day. Any sex other than male uses the female formula."""
    base = (
        10 * biometrics.weight_kg
        + 6.25 * biometrics.height_cm
        - 5 * biometrics.age
    )
    if biometrics.sex == Sex.MALE:
        return base + 5
    return base - 161


def activity_multiplier(activity_level: str | None) -> float:
    """Return the TDEE multiplier, falling back to sedentary when unknown."""
    if activity_level is None:
        return DEFAULT_ACTIVITY_MULTIPLIER
    return ACTIVITY_MULTIPLIERS.get(activity_level, DEFAULT_ACTIVITY_MULTIPLIER)


def goal_factor(goal: str | None) -> float:
    """Return the goal adjustment; maintain and unknown goals leave TDEE as is."""
    if goal is None:
        return 1.0
    return GOAL_FACTORS.get(goal, 1.0)


def estimate(biometrics: Biometrics) -> CalorieEstimate:
    """Compute BMR, TDEE and the goal-adjusted daily calorie target.

    Inputs are not validated: zero or negative biometrics produce a
    degenerate (but deterministic) result.
    """
    bmr = basal_metabolic_rate(biometrics)
    tdee = bmr * activity_multiplier(biometrics.activity_level)
    adjusted = tdee * goal_factor(biometrics.goal)
    return CalorieEstimate(bmr=bmr, tdee=tdee, calorie_target=round_half_up(adjusted))


def calorie_target(biometrics: Biometrics) -> int:
    """Return the integer daily calorie target for the biometrics."""
    return estimate(biometrics).calorie_target


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up."""
    return math.floor(value + 0.5)
