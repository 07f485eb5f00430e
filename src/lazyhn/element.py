"""Lazily-fetchable single values addressed by a lazily-resolved id."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import Any, Generic, TypeVar

from lazyhn.errors import ShapeMismatchError
from lazyhn.types import ErrorFactory, MapFn, PredicateFn

V = TypeVar("V")
I = TypeVar("I")  # noqa: E741
O = TypeVar("O")  # noqa: E741


async def resolve(value: Any) -> Any:
    """Await ``value`` if it is awaitable, otherwise return it."""
    if inspect.isawaitable(value):
        return await value
    return value


class Element(Generic[V, I]):
    """A deferred ``(id, value)`` pair.

    Nothing runs until ``fetch`` or ``get_id`` is awaited, and nothing is
    memoised: every ``fetch`` resolves the id and the value again. Repeated
    network cost is the cache's concern, not the element's.
    """

    __slots__ = ("_fetch_id", "_fetch_value")

    def __init__(
        self,
        fetch_id: Callable[[], Awaitable[I]],
        fetch_value: Callable[[I], Awaitable[V]],
    ) -> None:
        self._fetch_id = fetch_id
        self._fetch_value = fetch_value

    @classmethod
    def of(cls, id: I, fetch_value: Callable[[I], Awaitable[V]]) -> Element[V, I]:
        """Build an element whose id is already known."""

        async def fetch_id() -> I:
            return id

        return cls(fetch_id, fetch_value)

    async def fetch(self) -> V:
        """Resolve the id, then the value."""
        id = await self._fetch_id()
        return await self._fetch_value(id)

    async def get_id(self) -> I:
        """Resolve only the id."""
        return await self._fetch_id()

    def map(self, fn: MapFn[V, O]) -> Element[O, I]:
        """Return an element whose value is ``fn`` applied to this one's."""
        fetch_value = self._fetch_value

        async def mapped(id: I) -> O:
            return await resolve(fn(await fetch_value(id)))

        return Element(self._fetch_id, mapped)

    def ensure(
        self,
        predicate: PredicateFn[V],
        error: ErrorFactory[V] | None = None,
    ) -> Element[V, I]:
        """Return an element that fails unless ``predicate`` holds for the value.

        ``error`` builds the exception from the offending value; without it a
        ``ShapeMismatchError`` is raised.
        """
        fetch_value = self._fetch_value

        async def checked(id: I) -> V:
            value = await fetch_value(id)
            if not await resolve(predicate(value)):
                if error is None:
                    raise ShapeMismatchError("The element data did not match the predicate")
                raise error(value)
            return value

        return Element(self._fetch_id, checked)


__all__ = ["Element", "resolve"]
