"""Higher-order helpers for combining predicates and functions."""

from functools import reduce
from typing import Any, Callable

from .filters import Predicate


def compose(*predicates: Predicate) -> Predicate:
    """Logical AND of ``predicates``; vacuously true when none are given."""
    def combined(recipe) -> bool:
        return all(predicate(recipe) for predicate in predicates)

    return combined


def pipe(value: Any, *functions: Callable[[Any], Any]) -> Any:
    """Apply ``functions`` to ``value`` left to right."""
    return reduce(lambda acc, fn: fn(acc), functions, value)
