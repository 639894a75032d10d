"""Profile and calorie estimate endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from nutri_coach.api.auth import require_user
from nutri_coach.api.models import BiometricsRequest, ProfileRequest
from nutri_coach.domain.models import AuthUser  # noqa: TC001
from nutri_coach.domain.profiles import Biometrics, Profile
from nutri_coach.services import estimator

if TYPE_CHECKING:
    from nutri_coach.containers import AppContainer

router = APIRouter(prefix="/api", tags=["profile"])


@router.post("/estimate")
async def estimate_calories(payload: BiometricsRequest) -> dict[str, object]:
    """Preview the calorie target for onboarding inputs."""
    result = estimator.estimate(_to_biometrics(payload))
    return {
        "bmr": result.bmr,
        "tdee": result.tdee,
        "calorie_target": result.calorie_target,
    }


@router.get("/profile")
async def get_profile(
    request: Request, user: AuthUser = Depends(require_user)
) -> dict[str, object]:
    """Return the caller's profile, or an empty object before onboarding."""
    container: AppContainer = request.app.state.container
    profile = container.profile_service.get_profile(user.id)
    if profile is None:
        return {}
    return serialize_profile(profile)


@router.post("/profile")
async def save_profile(
    payload: ProfileRequest,
    request: Request,
    user: AuthUser = Depends(require_user),
) -> dict[str, object]:
    """Create or update the caller's profile."""
    container: AppContainer = request.app.state.container
    profile = Profile(
        user_id=user.id,
        biometrics=_to_biometrics(payload),
        calorie_target=None,
        timeframe=payload.timeframe,
        cuisine=payload.cuisine,
        diet_type=payload.diet_type,
        allergies=payload.allergies,
        pantry_items=payload.pantry_items,
        time_per_meal=payload.time_per_meal,
        budget=payload.budget,
    )
    return serialize_profile(container.profile_service.save_profile(profile))


def serialize_profile(profile: Profile) -> dict[str, object]:
    """Flatten a profile for JSON responses."""
    return {
        "user_id": str(profile.user_id),
        "age": profile.biometrics.age,
        "sex": profile.biometrics.sex,
        "height_cm": profile.biometrics.height_cm,
        "weight_kg": profile.biometrics.weight_kg,
        "activity_level": profile.biometrics.activity_level,
        "goal": profile.biometrics.goal,
        "calorie_target": profile.calorie_target,
        "timeframe": profile.timeframe,
        "cuisine": profile.cuisine,
        "diet_type": profile.diet_type,
        "allergies": profile.allergies,
        "pantry_items": profile.pantry_items,
        "time_per_meal": profile.time_per_meal,
        "budget": profile.budget,
    }


def _to_biometrics(payload: BiometricsRequest) -> Biometrics:
    return Biometrics(
        age=payload.age,
        sex=payload.sex,
        height_cm=payload.height_cm,
        weight_kg=payload.weight_kg,
        activity_level=payload.activity_level,
        goal=payload.goal,
    )
