"""Recoverable errors raised while loading entities from the store."""

from __future__ import annotations

from .categories import Atom, Category


class MediaDBError(Exception):
    """Base class for data and store errors returned to callers."""


class EntityNotFoundError(MediaDBError, LookupError):
    """No row matched the requested identifier.

    ``category`` is ``None`` when the lookup did not know which category to
    search, i.e. after a guess lookup exhausted every category.
    """

    def __init__(self, category: Category | None, ident: Atom):
        self.category = category
        self.ident = ident
        if category is None:
            message = f"Could not find any entity corresponding to atom {ident}"
        else:
            message = f"No {category.value} found with atom {ident}"
        super().__init__(message)


class EntityDecodeError(MediaDBError, ValueError):
    """A result row did not have the shape expected for its category."""

    def __init__(self, category: Category, reason: str):
        self.category = category
        self.reason = reason
        super().__init__(f"Could not decode {category.value} row: {reason}")


class UnknownCategoryError(MediaDBError, ValueError):
    """A directed lookup was given a value outside :class:`Category`."""

    def __init__(self, category: object):
        self.category = category
        super().__init__(f"Unrecognized entity type: {category!r}")
