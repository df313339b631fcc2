"""Typed entity lookups over the media metadata store."""

from __future__ import annotations

from .categories import (
    CATEGORIES,
    GUESS_ORDER,
    Atom,
    Category,
    category_to_name,
    name_to_category,
)
from .exceptions import (
    EntityDecodeError,
    EntityNotFoundError,
    MediaDBError,
    UnknownCategoryError,
)
from .loaders import LOADERS, load_actor, load_episode, load_movie, load_tvshow
from .models import (
    Actor,
    Attributer,
    Entity,
    EntityRecord,
    Episode,
    Movie,
    QueryExecutor,
    Tvshow,
    entity_string,
)
from .resolver import episode_tvshow, resolve, resolve_any

__all__ = [
    "CATEGORIES",
    "GUESS_ORDER",
    "LOADERS",
    "Actor",
    "Atom",
    "Attributer",
    "Category",
    "Entity",
    "EntityDecodeError",
    "EntityNotFoundError",
    "EntityRecord",
    "Episode",
    "MediaDBError",
    "Movie",
    "QueryExecutor",
    "Tvshow",
    "UnknownCategoryError",
    "category_to_name",
    "entity_string",
    "episode_tvshow",
    "load_actor",
    "load_episode",
    "load_movie",
    "load_tvshow",
    "name_to_category",
    "resolve",
    "resolve_any",
]
