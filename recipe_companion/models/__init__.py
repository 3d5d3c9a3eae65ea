"""API models for the Recipe Companion application."""

from .schemas import (
    DisplayOptions,
    RecipeCard,
    RecipeListResponse,
    HealthResponse
)

__all__ = [
    "DisplayOptions",
    "RecipeCard",
    "RecipeListResponse",
    "HealthResponse"
]
