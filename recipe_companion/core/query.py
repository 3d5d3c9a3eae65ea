"""Filter, sort and render a recipe listing."""

import logging
from typing import Any, Callable, Iterable, List, Mapping, Optional, Union

from ..models.schemas import DisplayOptions
from .combinators import compose
from .data import Recipe
from .filters import (
    Predicate,
    filter_by_cuisine,
    filter_by_difficulty,
    filter_by_time,
    search_recipes,
)
from .rendering import render_recipes
from .sorting import sort_recipes

logger = logging.getLogger(__name__)

OptionsLike = Union[DisplayOptions, Mapping[str, Any], None]


def parse_options(options: OptionsLike = None) -> DisplayOptions:
    """Validate ``options`` into a DisplayOptions.

    Raises pydantic.ValidationError on unknown keys or bad values.
    """
    if options is None:
        return DisplayOptions()
    if isinstance(options, DisplayOptions):
        return options
    return DisplayOptions.model_validate(dict(options))


def build_predicates(options: DisplayOptions) -> List[Predicate]:
    """Active predicates, in the order difficulty, time, cuisine."""
    predicates = []
    if options.difficulty is not None:
        predicates.append(filter_by_difficulty(options.difficulty))
    if options.max_time is not None:
        predicates.append(filter_by_time(options.max_time))
    if options.cuisine is not None:
        predicates.append(filter_by_cuisine(options.cuisine))
    return predicates


def select_recipes(data: Iterable[Recipe], options: OptionsLike = None) -> List[Recipe]:
    """Return the filtered recipes as a new list in display order."""
    opts = parse_options(options)
    predicates = build_predicates(opts)

    if predicates:
        matches = compose(*predicates)
        filtered = [recipe for recipe in data if matches(recipe)]
    else:
        filtered = list(data)

    logger.debug(
        f"Selected {len(filtered)} recipes with {len(predicates)} filters, "
        f"sorted by {opts.sort_property}"
    )
    return sort_recipes(filtered, opts.sort_property)


def display_recipes(
    data: Iterable[Recipe],
    options: OptionsLike = None,
    render: Callable[[List[Recipe]], Any] = render_recipes
) -> Any:
    """Select recipes and hand the ordered list to ``render``.

    The default renderer returns the concatenated card markup.
    """
    return render(select_recipes(data, options))


def find_recipes(data: Iterable[Recipe], query: str) -> List[Recipe]:
    """Recipes whose name or ingredients contain ``query``, in data order."""
    matches = search_recipes(query)
    return [recipe for recipe in data if matches(recipe)]
