"""One loader per category, each reading a single row from the store."""

from __future__ import annotations

import logging
from typing import Any, Callable, TypeVar

from sqlalchemy import Select, select

from .categories import Atom, Category
from .db_models import ActorRow, EpisodeRow, MovieRow, NameRow, TvshowRow
from .exceptions import EntityNotFoundError
from .models import Actor, EntityRecord, Episode, Movie, QueryExecutor, Tvshow

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=EntityRecord)


def _fetch(
    executor: QueryExecutor,
    record_type: type[RecordT],
    statement: Select[Any],
    ident: Atom,
) -> RecordT:
    """Run ``statement`` and decode its first row into ``record_type``."""

    logger.debug("Loading %s with atom %s", record_type.category.value, ident)
    row = executor.execute(statement).first()
    if row is None:
        raise EntityNotFoundError(record_type.category, ident)
    return record_type.from_row(row)  # type: ignore[return-value]


def load_movie(executor: QueryExecutor, ident: Atom) -> Movie:
    """Load a movie and its display name."""

    statement = (
        select(
            MovieRow.atom_id,
            NameRow.name,
            MovieRow.year,
            MovieRow.sequence,
            MovieRow.tv,
            MovieRow.video,
        )
        .outerjoin(NameRow, NameRow.atom_id == MovieRow.atom_id)
        .where(MovieRow.atom_id == ident)
    )
    return _fetch(executor, Movie, statement, ident)


def load_tvshow(executor: QueryExecutor, ident: Atom) -> Tvshow:
    """Load a TV show, including the years it ran."""

    statement = (
        select(
            TvshowRow.atom_id,
            NameRow.name,
            TvshowRow.year,
            TvshowRow.sequence,
            TvshowRow.year_start,
            TvshowRow.year_end,
        )
        .outerjoin(NameRow, NameRow.atom_id == TvshowRow.atom_id)
        .where(TvshowRow.atom_id == ident)
    )
    return _fetch(executor, Tvshow, statement, ident)


def load_episode(executor: QueryExecutor, ident: Atom) -> Episode:
    """Load an episode; its show is only referenced, never loaded here."""

    statement = (
        select(
            EpisodeRow.atom_id,
            EpisodeRow.tvshow_atom_id,
            NameRow.name,
            EpisodeRow.year,
            EpisodeRow.season,
            EpisodeRow.episode_num,
        )
        .outerjoin(NameRow, NameRow.atom_id == EpisodeRow.atom_id)
        .where(EpisodeRow.atom_id == ident)
    )
    return _fetch(executor, Episode, statement, ident)


def load_actor(executor: QueryExecutor, ident: Atom) -> Actor:
    """Load an actor; the shared name table holds the full name."""

    statement = (
        select(ActorRow.atom_id, NameRow.name, ActorRow.sequence)
        .outerjoin(NameRow, NameRow.atom_id == ActorRow.atom_id)
        .where(ActorRow.atom_id == ident)
    )
    return _fetch(executor, Actor, statement, ident)


LOADERS: dict[Category, Callable[[QueryExecutor, Atom], EntityRecord]] = {
    Category.MOVIE: load_movie,
    Category.TVSHOW: load_tvshow,
    Category.EPISODE: load_episode,
    Category.ACTOR: load_actor,
}
