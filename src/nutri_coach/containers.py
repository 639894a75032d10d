"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from nutri_coach.adapters.supabase_auth_client import SupabaseAuthClient
from nutri_coach.adapters.supabase_daily_log_repository import (
    SupabaseDailyLogRepository,
)
from nutri_coach.adapters.supabase_meal_repository import SupabaseMealRepository
from nutri_coach.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from nutri_coach.adapters.supabase_recipe_repository import SupabaseRecipeRepository
from nutri_coach.config import Settings
from nutri_coach.services.auth import AuthService
from nutri_coach.services.dashboard import DashboardService
from nutri_coach.services.meals import MealService
from nutri_coach.services.profiles import ProfileService
from nutri_coach.services.recipes import RecipeService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    auth_service: AuthService
    profile_service: ProfileService
    recipe_service: RecipeService
    meal_service: MealService
    dashboard_service: DashboardService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    profile_service = ProfileService(SupabaseProfileRepository(supabase_client))
    dashboard_service = DashboardService(
        repository=SupabaseDailyLogRepository(supabase_client),
        profile_service=profile_service,
    )
    return AppContainer(
        settings=resolved_settings,
        auth_service=AuthService(SupabaseAuthClient(supabase_client)),
        profile_service=profile_service,
        recipe_service=RecipeService(
            repository=SupabaseRecipeRepository(supabase_client),
            profile_service=profile_service,
        ),
        meal_service=MealService(
            repository=SupabaseMealRepository(supabase_client),
            dashboard_service=dashboard_service,
        ),
        dashboard_service=dashboard_service,
    )
