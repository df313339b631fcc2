"""Pytest configuration and test helpers."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterator

import pytest

# Ensure the package is importable when running tests without an editable
# install.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sqlalchemy.orm import Session  # noqa: E402

from mediadb.database import Database  # noqa: E402
from mediadb.db_models import (  # noqa: E402
    ActorRow,
    EpisodeRow,
    MovieRow,
    NameRow,
    TvshowRow,
)

# Atoms used across the test-suite.
ALIEN = 1
THE_WIRE = 2
THE_TARGET = 3
DOMINIC_WEST = 4
UNNAMED_MOVIE = 5
SHOW_AND_ACTOR = 6
EPISODE_AND_ACTOR = 7
MOVIE_AND_EPISODE = 8
MISSING = 999


def _seed(session: Session) -> None:
    session.add_all(
        [
            NameRow(atom_id=ALIEN, name="Alien"),
            NameRow(atom_id=THE_WIRE, name="The Wire"),
            NameRow(atom_id=THE_TARGET, name="The Target"),
            NameRow(atom_id=DOMINIC_WEST, name="West, Dominic"),
            NameRow(atom_id=SHOW_AND_ACTOR, name="Shared Six"),
            NameRow(atom_id=EPISODE_AND_ACTOR, name="Shared Seven"),
            NameRow(atom_id=MOVIE_AND_EPISODE, name="Shared Eight"),
            MovieRow(atom_id=ALIEN, year=1979, sequence="", tv=False, video=False),
            MovieRow(atom_id=UNNAMED_MOVIE, year=1999, sequence="II", tv=True, video=False),
            MovieRow(atom_id=MOVIE_AND_EPISODE, year=2010, sequence="", tv=False, video=True),
            TvshowRow(
                atom_id=THE_WIRE, year=2002, sequence="", year_start=2002, year_end=2008
            ),
            TvshowRow(
                atom_id=SHOW_AND_ACTOR, year=1990, sequence="", year_start=1990, year_end=None
            ),
            EpisodeRow(
                atom_id=THE_TARGET, tvshow_atom_id=THE_WIRE, year=2002, season=1, episode_num=1
            ),
            EpisodeRow(
                atom_id=EPISODE_AND_ACTOR, tvshow_atom_id=THE_WIRE, year=2003, season=2, episode_num=4
            ),
            EpisodeRow(
                atom_id=MOVIE_AND_EPISODE, tvshow_atom_id=THE_WIRE, year=2004, season=3, episode_num=9
            ),
            ActorRow(atom_id=DOMINIC_WEST, sequence="I"),
            ActorRow(atom_id=SHOW_AND_ACTOR, sequence=""),
            ActorRow(atom_id=EPISODE_AND_ACTOR, sequence=""),
        ]
    )
    session.commit()


@pytest.fixture
def database(tmp_path) -> Iterator[Database]:
    """Return a file-backed SQLite database with the store tables created."""

    database = Database(f"sqlite:///{tmp_path / 'media.db'}")
    database.create_all()
    try:
        yield database
    finally:
        database.dispose()


@pytest.fixture
def session(database: Database) -> Iterator[Session]:
    """Return a session over a database seeded with sample entities."""

    with database.session() as session:
        _seed(session)
        yield session
