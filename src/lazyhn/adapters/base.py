"""Base cache protocol and shared behaviour."""

from collections.abc import Awaitable, Callable
from typing import Any, Protocol, TypeVar, runtime_checkable

from lazyhn.types import MISSING

T = TypeVar("T")


@runtime_checkable
class AsyncCache(Protocol):
    """Async key/value cache with per-entry expiry."""

    async def get(self, key: str) -> Any:
        """Get a cached value by key, or ``MISSING``."""
        ...

    async def get_or_set(self, key: str, producer: Callable[[], Awaitable[T]]) -> T:
        """Get a cached value, populating it from ``producer`` on a miss."""
        ...

    async def set(self, key: str, value: object) -> None:
        """Store a value and (re)start its expiry."""
        ...

    async def remove(self, key: str) -> None:
        """Evict a value immediately."""
        ...

    async def clear(self) -> None:
        """Evict every value."""
        ...

    async def close(self) -> None:
        """Release resources held by the cache."""
        ...


class CacheMixin:
    """Implements ``get_or_set`` on top of ``get`` and ``set``.

    There is no lock across the miss: two callers racing on the same key
    may both run their producer, and the later ``set`` wins.
    """

    async def get(self, key: str) -> Any:
        raise NotImplementedError

    async def set(self, key: str, value: object) -> None:
        raise NotImplementedError

    async def get_or_set(self, key: str, producer: Callable[[], Awaitable[T]]) -> T:
        value = await self.get(key)
        if value is not MISSING:
            return value
        value = await producer()
        await self.set(key, value)
        return value
