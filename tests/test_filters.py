"""Tests for local list filtering."""

from caloriv_admin.domain.catalog import Exercise, Food
from caloriv_admin.domain.users import AppUser
from caloriv_admin.services.filters import filter_exercises, filter_foods, filter_users

FOODS = [
    Food(
        id="1", name="Masala Dosa", category="Grains", name_hindi="मसाला डोसा"
    ),
    Food(id="2", name="Greek Yogurt", category="Dairy", search_terms="curd, dahi"),
    Food(id="3", name="Banana", category="Fruits"),
]


def test_filter_foods_is_case_insensitive() -> None:
    assert [food.id for food in filter_foods(FOODS, "DOSA")] == ["1"]


def test_filter_foods_matches_category_and_search_terms() -> None:
    assert [food.id for food in filter_foods(FOODS, "fruit")] == ["3"]
    assert [food.id for food in filter_foods(FOODS, "dahi")] == ["2"]
    assert [food.id for food in filter_foods(FOODS, "मसाला")] == ["1"]


def test_filter_foods_empty_search_returns_everything() -> None:
    result = filter_foods(FOODS, "")

    assert result == FOODS
    assert result is not FOODS


def test_filter_does_not_mutate_input() -> None:
    original = list(FOODS)

    filter_foods(FOODS, "banana")

    assert FOODS == original


def test_filter_exercises_matches_difficulty() -> None:
    exercises = [
        Exercise(id="1", name="Push Up", category="chest", difficulty="beginner"),
        Exercise(id="2", name="Deadlift", category="back", difficulty="advanced"),
    ]

    assert [ex.id for ex in filter_exercises(exercises, "Advanced")] == ["2"]
    assert [ex.id for ex in filter_exercises(exercises, "chest")] == ["1"]
    assert filter_exercises(exercises, "yoga") == []


def test_filter_users_by_name_or_email() -> None:
    users = [
        AppUser(id="1", email="ravi@example.com", name="Ravi"),
        AppUser(id="2", email="meera@example.com", name="Meera"),
    ]

    assert [user.id for user in filter_users(users, "RAVI@")] == ["1"]
    assert [user.id for user in filter_users(users, "meera")] == ["2"]
