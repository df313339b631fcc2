"""Identifier and category primitives shared by every entity record."""

from __future__ import annotations

from enum import Enum
from typing import NewType

Atom = NewType("Atom", int)
"""Opaque integer key assigned by the store, unique only within one category."""


class Category(str, Enum):
    """Closed set of entity categories understood by the resolver."""

    MOVIE = "movie"
    TVSHOW = "tvshow"
    EPISODE = "episode"
    ACTOR = "actor"

    def __str__(self) -> str:
        return category_to_name(self)


CATEGORIES: dict[str, Category] = {
    category.value: category for category in Category
}

# Guess lookups try categories in this order and stop at the first hit.
GUESS_ORDER: tuple[Category, ...] = (
    Category.MOVIE,
    Category.TVSHOW,
    Category.EPISODE,
    Category.ACTOR,
)


def name_to_category(name: str) -> Category:
    """Return the category registered under ``name``.

    Only the four lowercase names in :data:`CATEGORIES` are valid. Anything
    else is a bug in the caller and raises :class:`AssertionError`.
    """

    try:
        return CATEGORIES[name]
    except (KeyError, TypeError):
        raise AssertionError(f"BUG: unrecognized category {name!r}") from None


def category_to_name(category: Category) -> str:
    """Return the stable lowercase name of ``category``."""

    if not isinstance(category, Category):
        raise AssertionError(f"BUG: unrecognized category {category!r}")
    return category.value
