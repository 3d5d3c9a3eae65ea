"""Turn ordered recipes into cards and HTML markup.

Cards are plain structured data; the HTML helpers are one presentation
adapter over them, rendered from autoescaped jinja2 templates.
"""

from pathlib import Path
from typing import Iterable, List

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from ..models.schemas import RecipeCard
from .data import Recipe

TEMPLATES = Environment(
    loader=FileSystemLoader(Path(__file__).parent / "templates"),
    autoescape=select_autoescape(),
)


def to_card(recipe: Recipe) -> RecipeCard:
    """Build the display view of a single recipe."""
    return RecipeCard(
        id=recipe.id,
        name=recipe.name,
        cuisine=recipe.cuisine,
        difficulty=recipe.difficulty,
        difficulty_key=recipe.difficulty.lower(),
        time=recipe.time,
        ingredients=list(recipe.ingredients),
        instructions=recipe.instructions
    )


def build_cards(recipes: Iterable[Recipe]) -> List[RecipeCard]:
    return [to_card(recipe) for recipe in recipes]


def card_to_html(card: RecipeCard) -> str:
    """Render one card as a recipe-card fragment."""
    return TEMPLATES.get_template("recipe_card.html").render(card=card)


def render_recipes(recipes: Iterable[Recipe]) -> str:
    """Concatenate the card markup of every recipe, in order."""
    return "".join(card_to_html(card) for card in build_cards(recipes))


def render_page(
    markup: str,
    container_id: str = "recipe-container",
    title: str = "Recipe Companion"
) -> str:
    """Place ``markup`` inside the container element of a full HTML page.

    ``markup`` is inserted as is; pass only output of render_recipes.
    """
    if not container_id:
        raise ValueError("A container element id is required to place the recipes")

    return TEMPLATES.get_template("recipe_page.html").render(
        markup=Markup(markup),
        container_id=container_id,
        title=title
    )
