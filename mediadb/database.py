"""Database utilities for the media store."""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator

from sqlalchemy import Engine, MetaData, create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

if TYPE_CHECKING:
    from .config import Settings


class Base(DeclarativeBase):
    """Declarative base for the tables read by the loaders."""

    metadata = MetaData()


class Database:
    """Thin wrapper managing the SQLAlchemy engine and sessions."""

    def __init__(self, database_url: str, *, echo: bool = False):
        self._engine: Engine = create_engine(database_url, echo=echo)
        self.session_factory: sessionmaker[Session] = sessionmaker(
            self._engine, expire_on_commit=False
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(settings.database_url, echo=settings.database_echo)

    @property
    def engine(self) -> Engine:
        return self._engine

    def create_all(self) -> None:
        """Create database tables if they do not yet exist."""

        # Registers the mapped tables on Base.metadata.
        from . import db_models  # noqa: F401

        Base.metadata.create_all(self._engine)

    def dispose(self) -> None:
        """Dispose of the underlying database engine."""

        self._engine.dispose()

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Provide a session usable as a query executor."""

        with self.session_factory() as session:
            yield session
