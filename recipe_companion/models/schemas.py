"""Pydantic models for display options and API responses."""

from typing import List, Optional, Literal
from pydantic import BaseModel, ConfigDict, Field

Difficulty = Literal["Easy", "Medium", "Hard"]
SortProperty = Literal["id", "name", "cuisine", "difficulty", "time"]


class DisplayOptions(BaseModel):
    """Filter and sort options for a recipe listing.

    ``None`` means no filter on that dimension. The camelCase keys
    ``maxTime`` and ``sortProperty`` are accepted alongside the field names.
    """
    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)

    difficulty: Optional[Difficulty] = Field(default=None, description="Exact difficulty level")
    max_time: Optional[int] = Field(
        default=None,
        ge=0,
        strict=True,
        alias="maxTime",
        description="Maximum time in minutes"
    )
    cuisine: Optional[str] = Field(default=None, strict=True, description="Exact cuisine label")
    sort_property: SortProperty = Field(
        default="name",
        alias="sortProperty",
        description="Attribute to order by"
    )


class RecipeCard(BaseModel):
    """Display-agnostic view of one recipe."""
    id: int = Field(description="Recipe identifier")
    name: str = Field(description="Recipe name")
    cuisine: str = Field(description="Cuisine label")
    difficulty: str = Field(description="Difficulty level")
    difficulty_key: str = Field(description="Lowercased difficulty, used as a styling key")
    time: int = Field(description="Time in minutes")
    ingredients: List[str] = Field(default_factory=list, description="Ingredients in display order")
    instructions: str = Field(default="", description="Cooking instructions")


class RecipeListResponse(BaseModel):
    """Response body for recipe listings."""
    total: int = Field(description="Number of recipes returned")
    recipes: List[RecipeCard] = Field(description="Recipes in display order")


class HealthResponse(BaseModel):
    """Response body for the /health endpoint."""
    status: str = Field(description="Service status")
    recipes_loaded: int = Field(description="Number of recipes in the data set")
    version: str = Field(description="API version")
