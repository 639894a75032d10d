"""Tests for recipe service."""

from uuid import uuid4

import pytest

from nutri_coach.domain.profiles import Biometrics, Profile
from nutri_coach.domain.recipes import Recipe, RecipeDraft
from nutri_coach.services.profiles import ProfileService
from nutri_coach.services.recipes import RecipeService, pantry_match, parse_pantry
from tests.conftest import InMemoryProfileRepository, InMemoryRecipeRepository


def _service() -> tuple[RecipeService, ProfileService]:
    profile_service = ProfileService(InMemoryProfileRepository())
    return RecipeService(InMemoryRecipeRepository(), profile_service), profile_service


def _seed(service: RecipeService, user_id) -> None:  # type: ignore[no-untyped-def]
    service.create_recipe(
        user_id,
        RecipeDraft(
            name="Mediterranean Chicken Bowl",
            ingredients=[
                "200g chicken breast",
                "1 cup quinoa",
                "1 cucumber",
                "100g feta cheese",
            ],
            tags=["High Protein", "Mediterranean"],
        ),
    )
    service.create_recipe(
        user_id,
        RecipeDraft(
            name="Veggie Stir-Fry with Tofu",
            ingredients=["200g firm tofu", "1 bell pepper", "2 tbsp soy sauce"],
            tags=["Vegetarian", "Quick"],
        ),
    )


def test_create_recipe_requires_name() -> None:
    service, _ = _service()

    with pytest.raises(ValueError, match="missing recipe.name"):
        service.create_recipe(uuid4(), RecipeDraft(name="  "))


def test_suggest_ranks_by_pantry_match() -> None:
    service, _ = _service()
    user_id = uuid4()
    _seed(service, user_id)

    suggestions = service.suggest(user_id, pantry="Chicken, quinoa", diet_type="mixed")

    assert [item.recipe.name for item in suggestions] == [
        "Mediterranean Chicken Bowl",
        "Veggie Stir-Fry with Tofu",
    ]
    assert suggestions[0].pantry_match_pct == 50
    assert suggestions[1].pantry_match_pct == 0


def test_suggest_filters_vegetarian_from_profile() -> None:
    service, profile_service = _service()
    user_id = uuid4()
    _seed(service, user_id)
    profile_service.save_profile(
        Profile(
            user_id=user_id,
            biometrics=Biometrics(age=28, sex="male", height_cm=180, weight_kg=75),
            calorie_target=None,
            diet_type="vegetarian",
            pantry_items="tofu, soy sauce",
        )
    )

    suggestions = service.suggest(user_id)

    assert len(suggestions) == 1
    assert suggestions[0].recipe.name == "Veggie Stir-Fry with Tofu"
    assert suggestions[0].pantry_match_pct == 67


def test_parse_pantry_ignores_blank_entries() -> None:
    assert parse_pantry(" Rice, ,Onions ,") == ["rice", "onions"]
    assert parse_pantry(None) == []


def test_pantry_match_rounds_halves_up() -> None:
    recipe = Recipe(
        id=uuid4(),
        user_id=uuid4(),
        name="Trail Mix",
        calories=300,
        protein_g=8,
        carbs_g=30,
        fat_g=15,
        servings=4,
        cook_time_minutes=None,
        difficulty=None,
        ingredients=[
            "oats",
            "raisins",
            "almonds",
            "cashews",
            "dates",
            "figs",
            "cranberries",
            "cocoa nibs",
        ],
        tags=[],
        instructions=[],
    )

    assert pantry_match(recipe, ["oats"]) == 13
