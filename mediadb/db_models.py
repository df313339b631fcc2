"""SQLAlchemy ORM mapping of the store tables the loaders select from."""

from __future__ import annotations

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .database import Base


class NameRow(Base):
    """Display name shared by every category, keyed by atom."""

    __tablename__ = "name"

    atom_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(Text)


class MovieRow(Base):
    __tablename__ = "movie"

    atom_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    sequence: Mapped[str | None] = mapped_column(String(32), nullable=True)
    tv: Mapped[bool] = mapped_column(Boolean, default=False)
    video: Mapped[bool] = mapped_column(Boolean, default=False)


class TvshowRow(Base):
    __tablename__ = "tvshow"

    atom_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    sequence: Mapped[str | None] = mapped_column(String(32), nullable=True)
    year_start: Mapped[int | None] = mapped_column(Integer, nullable=True)
    year_end: Mapped[int | None] = mapped_column(Integer, nullable=True)


class EpisodeRow(Base):
    __tablename__ = "episode"

    atom_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    tvshow_atom_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("tvshow.atom_id")
    )
    year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    season: Mapped[int | None] = mapped_column(Integer, nullable=True)
    episode_num: Mapped[int | None] = mapped_column(Integer, nullable=True)


class ActorRow(Base):
    __tablename__ = "actor"

    atom_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    sequence: Mapped[str | None] = mapped_column(String(32), nullable=True)
