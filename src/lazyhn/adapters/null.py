"""Cache that stores nothing."""

from typing import Any

from lazyhn.adapters.base import CacheMixin
from lazyhn.types import MISSING


class NullCache(CacheMixin):
    """Satisfies the cache protocol without keeping anything.

    Every read misses, so ``get_or_set`` always runs its producer.
    """

    async def get(self, key: str) -> Any:
        return MISSING

    async def set(self, key: str, value: object) -> None:
        pass

    async def remove(self, key: str) -> None:
        pass

    async def clear(self) -> None:
        pass

    async def close(self) -> None:
        pass
