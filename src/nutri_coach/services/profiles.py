"""Profile service."""

from dataclasses import dataclass, replace
from typing import Protocol
from uuid import UUID

from nutri_coach.domain.profiles import Profile
from nutri_coach.services import estimator


class ProfileRepository(Protocol):
    """Persistence interface for profiles."""

    def get_profile(self, user_id: UUID) -> Profile | None:
        """Return the profile for a user, if present."""

    def upsert_profile(self, profile: Profile) -> Profile:
        """Create or replace a profile and return the stored row."""


@dataclass
class ProfileService:
    """Application service for onboarding profiles."""

    repository: ProfileRepository

    def get_profile(self, user_id: UUID) -> Profile | None:
        """Return the user's profile."""
        return self.repository.get_profile(user_id)

    def save_profile(self, profile: Profile) -> Profile:
        """Persist a profile with its calorie target derived from biometrics."""
        derived = replace(
            profile, calorie_target=estimator.calorie_target(profile.biometrics)
        )
        return self.repository.upsert_profile(derived)

    def get_calorie_target(self, user_id: UUID) -> int | None:
        """Return the stored calorie target, if any."""
        profile = self.repository.get_profile(user_id)
        if profile is None:
            return None
        return profile.calorie_target
