"""Core recipe filtering, sorting and rendering."""

from .data import DIFFICULTY_LEVELS, RECIPES, Recipe
from .filters import filter_by_cuisine, filter_by_difficulty, filter_by_time, search_recipes
from .sorting import SORTABLE_PROPERTIES, sort_by, sort_recipes
from .combinators import compose, pipe
from .query import display_recipes, find_recipes, select_recipes
from .rendering import build_cards, render_page, render_recipes

__all__ = [
    "DIFFICULTY_LEVELS",
    "RECIPES",
    "Recipe",
    "filter_by_cuisine",
    "filter_by_difficulty",
    "filter_by_time",
    "search_recipes",
    "SORTABLE_PROPERTIES",
    "sort_by",
    "sort_recipes",
    "compose",
    "pipe",
    "display_recipes",
    "find_recipes",
    "select_recipes",
    "build_cards",
    "render_page",
    "render_recipes",
]
