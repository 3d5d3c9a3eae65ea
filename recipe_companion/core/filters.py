"""Predicate factories for narrowing a recipe list.

Each factory checks its parameter once and returns a single-argument
predicate over a :class:`Recipe`.
"""

from typing import Callable

from .data import DIFFICULTY_LEVELS, Recipe

Predicate = Callable[[Recipe], bool]


def _require_str(name: str, value) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {type(value).__name__}")


def filter_by_difficulty(level: str) -> Predicate:
    """Match recipes whose difficulty equals ``level`` exactly."""
    _require_str("level", level)
    if level not in DIFFICULTY_LEVELS:
        raise ValueError(
            f"Unknown difficulty {level!r}; expected one of {', '.join(DIFFICULTY_LEVELS)}"
        )

    def predicate(recipe: Recipe) -> bool:
        return recipe.difficulty == level

    return predicate


def filter_by_time(minutes: int) -> Predicate:
    """Match recipes that take at most ``minutes``."""
    if isinstance(minutes, bool) or not isinstance(minutes, int):
        raise TypeError(f"minutes must be an integer, got {type(minutes).__name__}")

    def predicate(recipe: Recipe) -> bool:
        return recipe.time <= minutes

    return predicate


def filter_by_cuisine(cuisine: str) -> Predicate:
    """Match recipes whose cuisine equals ``cuisine`` exactly."""
    _require_str("cuisine", cuisine)

    def predicate(recipe: Recipe) -> bool:
        return recipe.cuisine == cuisine

    return predicate


def search_recipes(query: str) -> Predicate:
    """Case-insensitive substring search over name and ingredients.

    The query is not trimmed; an empty query matches every recipe.
    """
    _require_str("query", query)
    lower_query = query.lower()

    def predicate(recipe: Recipe) -> bool:
        if lower_query in recipe.name.lower():
            return True
        return any(lower_query in ing for ing in recipe.ingredients_normalized)

    return predicate
