"""Client-side free-text filtering of already-fetched lists."""

from collections.abc import Iterable, Sequence

from caloriv_admin.domain.catalog import Exercise, Food
from caloriv_admin.domain.users import AppUser


def filter_foods(foods: Sequence[Food], search: str | None) -> list[Food]:
    """Return foods whose name, Hindi name, category or keywords match."""
    return [
        food
        for food in foods
        if _matches(
            search,
            (food.name, food.name_hindi, food.category, food.search_terms),
        )
    ]


def filter_exercises(
    exercises: Sequence[Exercise], search: str | None
) -> list[Exercise]:
    """Return exercises whose name, category or difficulty match."""
    return [
        exercise
        for exercise in exercises
        if _matches(search, (exercise.name, exercise.category, exercise.difficulty))
    ]


def filter_users(users: Sequence[AppUser], search: str | None) -> list[AppUser]:
    """Return users whose name or email match."""
    return [user for user in users if _matches(search, (user.name, user.email))]


def _matches(search: str | None, fields: Iterable[str | None]) -> bool:
    if not search:
        return True
    needle = search.lower()
    return any(value and needle in value.lower() for value in fields)
