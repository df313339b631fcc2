"""Resolve an atom to an entity, with or without knowing its category."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError

from .categories import GUESS_ORDER, Atom, Category
from .exceptions import EntityNotFoundError, MediaDBError, UnknownCategoryError
from .loaders import LOADERS, load_tvshow
from .models import Entity, Episode, QueryExecutor, Tvshow

logger = logging.getLogger(__name__)


def resolve(executor: QueryExecutor, category: Category, ident: Atom) -> Entity:
    """Load ``ident`` from the table of ``category`` only.

    Errors from the loader are raised as-is; no other category is tried.
    """

    loader = LOADERS.get(category) if isinstance(category, Category) else None
    if loader is None:
        raise UnknownCategoryError(category)
    return loader(executor, ident)  # type: ignore[return-value]


def resolve_any(executor: QueryExecutor, ident: Atom) -> Entity:
    """Load ``ident`` without a category hint.

    Categories are tried one after another in :data:`GUESS_ORDER` and the first
    hit wins, so an atom present in several tables always resolves to the
    highest priority one. When nothing matches a single
    :class:`EntityNotFoundError` is raised; the individual failures are only
    logged.
    """

    for category in GUESS_ORDER:
        try:
            entity = LOADERS[category](executor, ident)
        except (MediaDBError, SQLAlchemyError) as exc:
            logger.debug("Atom %s is not a %s: %s", ident, category.value, exc)
            continue
        logger.info("Guessed atom %s as %s", ident, category.value)
        return entity  # type: ignore[return-value]
    raise EntityNotFoundError(None, ident)


def episode_tvshow(executor: QueryExecutor, episode: Episode) -> Tvshow:
    """Return the show that ``episode`` belongs to."""

    return load_tvshow(executor, episode.tvshow_id)
