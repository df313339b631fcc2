"""Typed, read-only records for every entity category."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar, Protocol, Sequence, Union

from pydantic import BaseModel, ConfigDict, ValidationError, ValidationInfo, field_validator

from .categories import Atom, Category
from .exceptions import EntityDecodeError

if TYPE_CHECKING:
    from sqlalchemy.engine import Result


NOT_AVAILABLE = "N/A"


class QueryExecutor(Protocol):
    """Anything able to run a SQLAlchemy statement, e.g. a Session or Connection."""

    def execute(self, statement: Any, *args: Any, **kwargs: Any) -> "Result[Any]":
        ...


class Attributer(Protocol):
    """Collaborator that loads secondary attributes for an entity."""

    def for_entity(self, executor: QueryExecutor, entity: "EntityRecord") -> None:
        ...


def entity_string(title: str, year: int) -> str:
    """Return ``title`` (or a placeholder) followed by the year when known."""

    text = title if title else NOT_AVAILABLE
    if year > 0:
        text += f" ({year})"
    return text


class EntityRecord(BaseModel):
    """Capabilities shared by movies, TV shows, episodes and actors.

    Subclasses declare their ``category`` and the ``columns`` their loader
    selects, in order. Records are immutable snapshots of a single row.
    """

    model_config = ConfigDict(frozen=True)

    category: ClassVar[Category]
    columns: ClassVar[tuple[str, ...]]

    id: Atom

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_zero_value(cls, value: object, info: ValidationInfo) -> object:
        """Decode SQL NULLs (e.g. a missing joined name) to the field default."""

        field = cls.model_fields[info.field_name]
        if value is None and not field.is_required():
            return field.default
        return value

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> "EntityRecord":
        """Build a record from a positional row in ``columns`` order."""

        values = tuple(row)
        if len(values) != len(cls.columns):
            raise EntityDecodeError(
                cls.category,
                f"expected {len(cls.columns)} columns, got {len(values)}",
            )
        try:
            return cls.model_validate(dict(zip(cls.columns, values)))
        except ValidationError as exc:
            raise EntityDecodeError(cls.category, str(exc)) from exc

    @property
    def ident(self) -> Atom:
        return self.id

    @property
    @abstractmethod
    def name(self) -> str:
        raise NotImplementedError

    @property
    @abstractmethod
    def entity_year(self) -> int:
        raise NotImplementedError

    def attrs(self, executor: QueryExecutor, attributer: Attributer) -> None:
        """Let ``attributer`` load the secondary attributes of this entity."""

        attributer.for_entity(executor, self)

    def __str__(self) -> str:
        return entity_string(self.name, self.entity_year)


class Movie(EntityRecord):
    category: ClassVar[Category] = Category.MOVIE
    columns: ClassVar[tuple[str, ...]] = (
        "id",
        "title",
        "year",
        "sequence",
        "tv",
        "video",
    )

    title: str = ""
    year: int = 0
    sequence: str = ""
    tv: bool = False
    video: bool = False

    @property
    def name(self) -> str:
        return self.title

    @property
    def entity_year(self) -> int:
        return self.year


class Tvshow(EntityRecord):
    category: ClassVar[Category] = Category.TVSHOW
    columns: ClassVar[tuple[str, ...]] = (
        "id",
        "title",
        "year",
        "sequence",
        "year_start",
        "year_end",
    )

    title: str = ""
    year: int = 0
    sequence: str = ""
    year_start: int = 0
    year_end: int = 0

    @property
    def name(self) -> str:
        return self.title

    @property
    def entity_year(self) -> int:
        return self.year


class Episode(EntityRecord):
    """A single episode; ``tvshow_id`` references the show it belongs to."""

    category: ClassVar[Category] = Category.EPISODE
    columns: ClassVar[tuple[str, ...]] = (
        "id",
        "tvshow_id",
        "title",
        "year",
        "season",
        "episode_num",
    )

    tvshow_id: Atom
    title: str = ""
    year: int = 0
    season: int = 0
    episode_num: int = 0

    @property
    def name(self) -> str:
        return self.title

    @property
    def entity_year(self) -> int:
        return self.year

    def tvshow(self, executor: QueryExecutor) -> "Tvshow":
        """Load the show this episode belongs to."""

        from .loaders import load_tvshow

        return load_tvshow(executor, self.tvshow_id)


class Actor(EntityRecord):
    category: ClassVar[Category] = Category.ACTOR
    columns: ClassVar[tuple[str, ...]] = ("id", "full_name", "sequence")

    full_name: str = ""
    sequence: str = ""

    @property
    def name(self) -> str:
        return self.full_name

    @property
    def entity_year(self) -> int:
        return 0


Entity = Union[Movie, Tvshow, Episode, Actor]
