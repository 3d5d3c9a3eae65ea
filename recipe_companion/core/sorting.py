"""Comparator factory for ordering recipes by one attribute."""

import unicodedata
from functools import cmp_to_key
from typing import Callable, Iterable, List, Tuple

from .data import Recipe

SORTABLE_PROPERTIES = ("id", "name", "cuisine", "difficulty", "time")

Comparator = Callable[[Recipe, Recipe], int]


def _sign(delta) -> int:
    return (delta > 0) - (delta < 0)


def collation_key(text: str) -> Tuple[str, str, str]:
    """Key ordering by base letters, then accents, then case.

    Independent of the process locale, so "Éclair" sorts with the E's.
    """
    folded = unicodedata.normalize("NFKD", text.casefold())
    base = "".join(ch for ch in folded if not unicodedata.combining(ch))
    return base, folded, text


def _text_compare(left: str, right: str) -> int:
    left_key, right_key = collation_key(left), collation_key(right)
    return (left_key > right_key) - (left_key < right_key)


def sort_by(prop: str) -> Comparator:
    """Build an ascending comparator on ``prop``.

    Raises ValueError for attributes outside SORTABLE_PROPERTIES.
    """
    if prop not in SORTABLE_PROPERTIES:
        raise ValueError(
            f"Cannot sort by {prop!r}; expected one of {', '.join(SORTABLE_PROPERTIES)}"
        )

    def comparator(a: Recipe, b: Recipe) -> int:
        left, right = getattr(a, prop), getattr(b, prop)
        if isinstance(left, str):
            return _text_compare(left, right)
        return _sign(left - right)

    return comparator


def sort_recipes(recipes: Iterable[Recipe], prop: str = "name") -> List[Recipe]:
    """Return a new, stably sorted list; ``recipes`` is left untouched."""
    return sorted(recipes, key=cmp_to_key(sort_by(prop)))
