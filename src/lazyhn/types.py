"""Core types for lazyhn."""

from __future__ import annotations

import enum
import math
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, replace
from datetime import timedelta
from typing import Any, Generic, TypeVar, Union

from lazyhn.errors import PreconditionError

T = TypeVar("T")
V = TypeVar("V")
O = TypeVar("O")  # noqa: E741


class _Missing(enum.Enum):
    """Marker type for an absent cache entry."""

    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"


# JSON ``null`` is a legitimate payload, so absence needs its own marker
MISSING = _Missing.MISSING

# Duration type alias
Duration = Union[str, int, float, timedelta]  # "2s", "250ms" or milliseconds

MapFn = Callable[[V], Union[O, Awaitable[O]]]
PredicateFn = Callable[[V], Union[bool, Awaitable[bool]]]
ErrorFactory = Callable[[V], BaseException]


@dataclass(frozen=True, slots=True)
class PaginatedResult(Generic[T]):
    """One page of resolved values."""

    elements: list[T]
    page: int
    page_size: int
    total_pages: int
    total_elements: int

    @classmethod
    def build(
        cls, elements: list[T], page: int, page_size: int, total_elements: int
    ) -> PaginatedResult[T]:
        return cls(
            elements=elements,
            page=page,
            page_size=page_size,
            total_pages=math.ceil(total_elements / page_size),
            total_elements=total_elements,
        )


@dataclass(frozen=True, slots=True)
class ListSettings:
    """Pagination and concurrency settings shared by lists."""

    page: int = 1
    page_size: int = 10
    max_concurrency: int = 10

    def __post_init__(self) -> None:
        for name in ("page", "page_size", "max_concurrency"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise PreconditionError(f"{name!r} must be an integer, got {value!r}")
            if value < 1:
                raise PreconditionError(f"Invalid {name!r}, must be larger than 0")

    def replace(self, **changes: Any) -> ListSettings:
        """Return a validated copy with ``changes`` applied."""
        return replace(self, **changes)

    @property
    def offset(self) -> int:
        """Absolute index of the first element on the current page."""
        return (self.page - 1) * self.page_size
