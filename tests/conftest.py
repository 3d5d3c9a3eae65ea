"""Shared fixtures for the recipe tests."""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from recipe_companion.core.data import RECIPES, Recipe


@pytest.fixture
def recipes():
    """The built-in sample recipes as a fresh list."""
    return list(RECIPES)


@pytest.fixture
def make_recipe():
    """Factory for one-off recipes with sensible defaults."""
    def _make(**overrides):
        fields = {
            "id": 99,
            "name": "Test Dish",
            "cuisine": "Test",
            "difficulty": "Easy",
            "time": 10,
            "ingredients": ("Salt",),
            "instructions": "Cook it."
        }
        fields.update(overrides)
        return Recipe(**fields)
    return _make
