"""Recipe records and the built-in sample data set."""

from typing import Iterable, Optional, Set, Tuple
from dataclasses import dataclass, field


DIFFICULTY_LEVELS = ("Easy", "Medium", "Hard")


@dataclass(frozen=True)
class Recipe:
    """Recipe data class."""
    id: int
    name: str
    cuisine: str
    difficulty: str
    time: int
    ingredients: Tuple[str, ...] = field(default_factory=tuple)
    instructions: str = ""

    def __post_init__(self):
        if not isinstance(self.ingredients, tuple):
            object.__setattr__(self, "ingredients", tuple(self.ingredients))

    @property
    def ingredients_normalized(self) -> Tuple[str, ...]:
        """Return lowercased ingredient names."""
        return tuple(ing.lower() for ing in self.ingredients)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "cuisine": self.cuisine,
            "difficulty": self.difficulty,
            "time": self.time,
            "ingredients": list(self.ingredients),
            "instructions": self.instructions
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Recipe":
        """Create Recipe from dictionary."""
        return cls(
            id=data["id"],
            name=data["name"],
            cuisine=data.get("cuisine", ""),
            difficulty=data.get("difficulty", ""),
            time=data.get("time", 0),
            ingredients=tuple(data.get("ingredients", ())),
            instructions=data.get("instructions", "")
        )


RECIPES: Tuple[Recipe, ...] = (
    Recipe(
        id=1,
        name="Pasta Carbonara",
        cuisine="Italian",
        difficulty="Medium",
        time=20,
        ingredients=("Pasta", "Eggs", "Bacon", "Parmesan", "Black Pepper"),
        instructions="Cook pasta, fry bacon, mix eggs and cheese, combine all."
    ),
    Recipe(
        id=2,
        name="Chicken Stir-Fry",
        cuisine="Asian",
        difficulty="Easy",
        time=15,
        ingredients=("Chicken", "Bell Peppers", "Soy Sauce", "Garlic", "Ginger"),
        instructions="Dice chicken, stir-fry with vegetables and sauce."
    ),
    Recipe(
        id=3,
        name="Vegetable Soup",
        cuisine="International",
        difficulty="Easy",
        time=30,
        ingredients=("Carrots", "Celery", "Onions", "Tomatoes", "Broth"),
        instructions="Chop vegetables, simmer in broth for 30 minutes."
    ),
    Recipe(
        id=4,
        name="Tiramisu",
        cuisine="Italian",
        difficulty="Hard",
        time=120,
        ingredients=("Mascarpone", "Eggs", "Coffee", "Ladyfingers", "Cocoa"),
        instructions="Layer mascarpone cream and dipped ladyfingers, chill."
    ),
)


def get_recipe_by_id(recipes: Iterable[Recipe], recipe_id: int) -> Optional[Recipe]:
    """Get a recipe by its ID."""
    for recipe in recipes:
        if recipe.id == recipe_id:
            return recipe
    return None


def get_all_ingredients(recipes: Iterable[Recipe]) -> Set[str]:
    """Get all unique ingredients across all recipes."""
    ingredients = set()
    for recipe in recipes:
        ingredients.update(recipe.ingredients_normalized)
    return ingredients
