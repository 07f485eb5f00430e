"""In-memory TTL cache (async only)."""

import asyncio
import logging
from typing import Any

from lazyhn.adapters.base import CacheMixin
from lazyhn.duration import parse_duration
from lazyhn.types import MISSING, Duration

logger = logging.getLogger(__name__)


class TTLCache(CacheMixin):
    """In-memory cache evicting each entry ``ttl`` after it was set.

    Eviction is driven by a timer on the running event loop, scheduled when
    the entry is stored. Reads never check or extend the expiry.
    """

    def __init__(self, ttl: Duration = "2s") -> None:
        self._ttl = parse_duration(ttl)
        self._values: dict[str, Any] = {}
        self._timers: dict[str, asyncio.TimerHandle] = {}

    @property
    def ttl(self) -> float:
        """Time to live in seconds."""
        return self._ttl

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    async def get(self, key: str) -> Any:
        """Get a cached value by key, or ``MISSING``."""
        return self._values.get(key, MISSING)

    async def set(self, key: str, value: object) -> None:
        """Store a value and restart its eviction timer."""
        self._cancel_timer(key)
        self._values[key] = value
        loop = asyncio.get_running_loop()
        self._timers[key] = loop.call_later(self._ttl, self._evict, key)

    async def remove(self, key: str) -> None:
        """Evict a value now and cancel its timer."""
        self._cancel_timer(key)
        self._values.pop(key, None)

    async def clear(self) -> None:
        """Evict every value."""
        for handle in self._timers.values():
            handle.cancel()
        self._timers.clear()
        self._values.clear()

    async def close(self) -> None:
        """Cancel pending timers and drop all values."""
        await self.clear()

    def _evict(self, key: str) -> None:
        self._timers.pop(key, None)
        if self._values.pop(key, MISSING) is not MISSING:
            logger.debug("Cache entry expired", extra={"key": key})

    def _cancel_timer(self, key: str) -> None:
        handle = self._timers.pop(key, None)
        if handle is not None:
            handle.cancel()
