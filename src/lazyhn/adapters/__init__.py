"""Cache adapters for lazyhn (async only)."""

from lazyhn.adapters.base import AsyncCache, CacheMixin
from lazyhn.adapters.memory import TTLCache
from lazyhn.adapters.null import NullCache

__all__ = [
    "AsyncCache",
    "CacheMixin",
    "NullCache",
    "TTLCache",
]
