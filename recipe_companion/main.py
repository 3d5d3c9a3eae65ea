"""FastAPI application serving the recipe listing."""

import logging
from typing import Optional
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import HTMLResponse
from pydantic import ValidationError
from cachetools import TTLCache

from config.settings import get_settings
from recipe_companion.core.data import RECIPES, get_all_ingredients, get_recipe_by_id
from recipe_companion.core.query import find_recipes, parse_options, select_recipes
from recipe_companion.core.rendering import build_cards, render_page, render_recipes
from recipe_companion.models.schemas import (
    DisplayOptions,
    HealthResponse,
    RecipeListResponse
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

settings = get_settings()

page_cache: TTLCache = TTLCache(maxsize=settings.cache_maxsize, ttl=settings.cache_ttl)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info(f"Starting {settings.app_name}...")
    logger.info(f"Serving {len(RECIPES)} recipes")
    
    yield
    
    logger.info(f"Shutting down {settings.app_name}...")
    page_cache.clear()


app = FastAPI(
    title="Recipe Companion API",
    description="Filter, sort, search and render a small recipe collection",
    version=settings.app_version,
    lifespan=lifespan
)


def _options_from_query(
    difficulty: Optional[str],
    max_time: Optional[str],
    cuisine: Optional[str],
    sort: Optional[str]
) -> DisplayOptions:
    """Validate query params into DisplayOptions, answering 400 on bad values.

    Empty params count as absent.
    """
    difficulty, max_time, cuisine, sort = (
        value or None for value in (difficulty, max_time, cuisine, sort)
    )

    if max_time is not None:
        try:
            max_time = int(max_time)
        except ValueError:
            logger.info(f"Rejected listing options: max_time {max_time!r}")
            raise HTTPException(status_code=400, detail="max_time: Input should be a valid integer")

    raw = {
        "difficulty": difficulty,
        "max_time": max_time,
        "cuisine": cuisine,
        "sort_property": sort or settings.default_sort_property
    }
    try:
        return parse_options(raw)
    except ValidationError as e:
        messages = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        logger.info(f"Rejected listing options: {messages}")
        raise HTTPException(status_code=400, detail=messages)


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """Check service health and status."""
    return HealthResponse(
        status="healthy",
        recipes_loaded=len(RECIPES),
        version=settings.app_version
    )


@app.get("/", response_class=HTMLResponse, tags=["UI"])
async def recipe_page(
    difficulty: str = Query(None, description="Filter by difficulty"),
    max_time: str = Query(None, description="Maximum time in minutes"),
    cuisine: str = Query(None, description="Filter by cuisine"),
    sort: str = Query(None, description="Attribute to sort by")
):
    """Render the recipe page with the filtered, sorted cards."""
    options = _options_from_query(difficulty, max_time, cuisine, sort)
    
    if options in page_cache:
        logger.info("Returning cached page")
        return page_cache[options]
    
    markup = render_recipes(select_recipes(RECIPES, options))
    page = render_page(markup, container_id=settings.container_id, title=settings.page_title)
    
    page_cache[options] = page
    return page


@app.get("/api/v1/recipes", response_model=RecipeListResponse, tags=["Recipes"])
async def list_recipes(
    difficulty: str = Query(None, description="Filter by difficulty"),
    max_time: str = Query(None, description="Maximum time in minutes"),
    cuisine: str = Query(None, description="Filter by cuisine"),
    sort: str = Query(None, description="Attribute to sort by")
):
    """List recipes with optional filtering and sorting."""
    options = _options_from_query(difficulty, max_time, cuisine, sort)
    cards = build_cards(select_recipes(RECIPES, options))
    
    return RecipeListResponse(total=len(cards), recipes=cards)


@app.get("/api/v1/recipes/search", response_model=RecipeListResponse, tags=["Recipes"])
async def search(q: str = Query("", description="Text to find in names or ingredients")):
    """Search recipes by name or ingredient."""
    cards = build_cards(find_recipes(RECIPES, q))
    
    return RecipeListResponse(total=len(cards), recipes=cards)


@app.get("/api/v1/recipes/{recipe_id}", tags=["Recipes"])
async def get_recipe(recipe_id: int):
    """Get a specific recipe by ID."""
    recipe = get_recipe_by_id(RECIPES, recipe_id)
    if not recipe:
        raise HTTPException(status_code=404, detail="Recipe not found")
    
    return recipe.to_dict()


@app.get("/api/v1/ingredients", tags=["Ingredients"])
async def list_ingredients():
    """List all ingredients in the data set."""
    ingredients = sorted(get_all_ingredients(RECIPES))
    return {
        "total": len(ingredients),
        "ingredients": ingredients
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "recipe_companion.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
