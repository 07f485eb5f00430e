"""lazyhn - Lazy, paginated, cached access to the Hacker News API."""

# Cache adapters (async only)
from lazyhn.adapters import AsyncCache, NullCache, TTLCache

# Client API
from lazyhn.client import HackerNews, create_client
from lazyhn.config import ClientSettings

# Lazy collections
from lazyhn.element import Element
from lazyhn.errors import (
    HackerNewsError,
    ItemKindError,
    NotFoundError,
    OutOfRangeError,
    PreconditionError,
    RecordError,
    ShapeMismatchError,
    SourceError,
)
from lazyhn.models import (
    Comment,
    Item,
    Job,
    Poll,
    PollOption,
    Story,
    Tombstone,
    User,
)
from lazyhn.paginated import IdList, PaginatedList, WatermarkList
from lazyhn.source import DataSource, HackerNewsSource

# Core types
from lazyhn.types import MISSING, Duration, ListSettings, PaginatedResult

__version__ = "0.1.0"

__all__ = [
    "MISSING",
    "AsyncCache",
    "ClientSettings",
    "Comment",
    "DataSource",
    "Duration",
    "Element",
    "HackerNews",
    "HackerNewsError",
    "HackerNewsSource",
    "IdList",
    "Item",
    "ItemKindError",
    "Job",
    "ListSettings",
    "NotFoundError",
    "NullCache",
    "OutOfRangeError",
    "PaginatedList",
    "PaginatedResult",
    "Poll",
    "PollOption",
    "PreconditionError",
    "RecordError",
    "ShapeMismatchError",
    "SourceError",
    "Story",
    "TTLCache",
    "Tombstone",
    "User",
    "WatermarkList",
    "create_client",
]
