"""Exception hierarchy for lazyhn."""

from __future__ import annotations

from typing import Any


class HackerNewsError(Exception):
    """Base exception for all library errors."""

    pass


class PreconditionError(HackerNewsError, ValueError):
    """Caller misuse detected before any I/O (bad page, page size, index...)."""

    pass


class OutOfRangeError(HackerNewsError, IndexError):
    """No element exists at the requested position."""

    pass


class ShapeMismatchError(HackerNewsError, TypeError):
    """A fetched value did not satisfy an ``ensure`` predicate."""

    pass


class ItemKindError(ShapeMismatchError):
    """An item resolved to a different kind than the one requested."""

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


class SourceError(HackerNewsError):
    """Error from the remote data source."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(SourceError):
    """The remote resource does not exist (the API answered ``null``)."""

    pass


class RecordError(SourceError):
    """A raw payload could not be turned into a record."""

    pass
