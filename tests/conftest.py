"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from uuid import UUID, uuid4

import pytest
from fastapi.testclient import TestClient

from nutri_coach.api.app import create_app
from nutri_coach.config import Settings
from nutri_coach.containers import AppContainer
from nutri_coach.domain.dashboard import DailyLog
from nutri_coach.domain.meals import MealDraft, MealEntry
from nutri_coach.domain.models import AuthUser
from nutri_coach.domain.profiles import Profile
from nutri_coach.domain.recipes import Recipe, RecipeDraft
from nutri_coach.services.auth import AuthClient, AuthService
from nutri_coach.services.dashboard import DailyLogRepository, DashboardService
from nutri_coach.services.meals import MealRepository, MealService
from nutri_coach.services.profiles import ProfileRepository, ProfileService
from nutri_coach.services.recipes import RecipeRepository, RecipeService

VALID_TOKEN = "valid-token"


@dataclass
class FakeAuthClient(AuthClient):
    """Auth client that accepts a fixed set of tokens."""

    users: dict[str, AuthUser] = field(default_factory=dict)

    def get_user(self, token: str) -> AuthUser | None:
        return self.users.get(token)


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile repository for tests."""

    profiles: dict[UUID, Profile] = field(default_factory=dict)

    def get_profile(self, user_id: UUID) -> Profile | None:
        return self.profiles.get(user_id)

    def upsert_profile(self, profile: Profile) -> Profile:
        self.profiles[profile.user_id] = profile
        return profile


@dataclass
class InMemoryRecipeRepository(RecipeRepository):
    """In-memory recipe repository for tests."""

    recipes: list[Recipe] = field(default_factory=list)

    def list_recipes(self, user_id: UUID) -> list[Recipe]:
        return [recipe for recipe in self.recipes if recipe.user_id == user_id]

    def create_recipe(self, user_id: UUID, draft: RecipeDraft) -> Recipe:
        recipe = Recipe(
            id=uuid4(),
            user_id=user_id,
            name=draft.name,
            calories=draft.calories,
            protein_g=draft.protein_g,
            carbs_g=draft.carbs_g,
            fat_g=draft.fat_g,
            servings=draft.servings,
            cook_time_minutes=draft.cook_time_minutes,
            difficulty=draft.difficulty,
            ingredients=list(draft.ingredients),
            instructions=list(draft.instructions),
            tags=list(draft.tags),
        )
        self.recipes.append(recipe)
        return recipe


@dataclass
class InMemoryMealRepository(MealRepository):
    """In-memory meal repository for tests."""

    meals: list[MealEntry] = field(default_factory=list)

    def list_meals(self, user_id: UUID) -> list[MealEntry]:
        owned = [meal for meal in self.meals if meal.user_id == user_id]
        return sorted(owned, key=lambda meal: meal.created_at, reverse=True)

    def create_meal(self, user_id: UUID, draft: MealDraft) -> MealEntry:
        meal = MealEntry(
            id=uuid4(),
            user_id=user_id,
            meal_time=draft.meal_time,
            name=draft.name,
            calories=draft.calories,
            protein_g=draft.protein_g,
            carbs_g=draft.carbs_g,
            fiber_g=draft.fiber_g,
            created_at=datetime.now(tz=UTC),
        )
        self.meals.append(meal)
        return meal

    def delete_meal(self, user_id: UUID, meal_id: UUID) -> None:
        self.meals = [
            meal
            for meal in self.meals
            if not (meal.id == meal_id and meal.user_id == user_id)
        ]


@dataclass
class InMemoryDailyLogRepository(DailyLogRepository):
    """In-memory daily log repository for tests."""

    logs: dict[tuple[UUID, date], DailyLog] = field(default_factory=dict)
    created: list[DailyLog] = field(default_factory=list)

    def get_log(self, user_id: UUID, log_date: date) -> DailyLog | None:
        return self.logs.get((user_id, log_date))

    def create_log(self, log: DailyLog) -> DailyLog:
        self.logs[(log.user_id, log.log_date)] = log
        self.created.append(log)
        return log

    def upsert_log(self, log: DailyLog) -> None:
        self.logs[(log.user_id, log.log_date)] = log


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        environment="test",
    )


@pytest.fixture
def auth_user() -> AuthUser:
    return AuthUser(id=uuid4(), email="coach@example.com")


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {VALID_TOKEN}"}


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def recipe_repository() -> InMemoryRecipeRepository:
    return InMemoryRecipeRepository()


@pytest.fixture
def meal_repository() -> InMemoryMealRepository:
    return InMemoryMealRepository()


@pytest.fixture
def daily_log_repository() -> InMemoryDailyLogRepository:
    return InMemoryDailyLogRepository()


@pytest.fixture
def container(  # noqa: PLR0913
    settings: Settings,
    auth_user: AuthUser,
    profile_repository: InMemoryProfileRepository,
    recipe_repository: InMemoryRecipeRepository,
    meal_repository: InMemoryMealRepository,
    daily_log_repository: InMemoryDailyLogRepository,
) -> AppContainer:
    profile_service = ProfileService(profile_repository)
    dashboard_service = DashboardService(
        repository=daily_log_repository, profile_service=profile_service
    )
    return AppContainer(
        settings=settings,
        auth_service=AuthService(FakeAuthClient(users={VALID_TOKEN: auth_user})),
        profile_service=profile_service,
        recipe_service=RecipeService(
            repository=recipe_repository, profile_service=profile_service
        ),
        meal_service=MealService(
            repository=meal_repository, dashboard_service=dashboard_service
        ),
        dashboard_service=dashboard_service,
    )


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))
