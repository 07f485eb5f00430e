"""Public entry point: lazy access to Hacker News items and users."""

from __future__ import annotations

from typing import Any

import httpx

from lazyhn.adapters.base import AsyncCache
from lazyhn.adapters.memory import TTLCache
from lazyhn.assembler import Assembler
from lazyhn.config import ClientSettings
from lazyhn.element import Element
from lazyhn.errors import ItemKindError
from lazyhn.models import (
    Comment,
    Item,
    Job,
    Poll,
    PollOption,
    Story,
    User,
    is_comment,
    is_job,
    is_poll,
    is_poll_option,
    is_story,
)
from lazyhn.paginated import IdList, PaginatedList, WatermarkList
from lazyhn.source import DEFAULT_BASE_URL, DataSource, HackerNewsSource
from lazyhn.types import Duration, ListSettings


def _kind_error(expected: str):
    def make(item: Item) -> ItemKindError:
        return ItemKindError(f"Item {item.id} is a {item.kind}, not a {expected}", item)

    return make


class HackerNews:
    """Lazy Hacker News client.

    Every method returns immediately without network access; work happens
    when the returned element or list is fetched.

    Usage:
        async with create_client(page_size=5) as hn:
            page = await hn.top_stories().fetch()
            first = page.elements[0]
            author = await first.author.fetch()
    """

    def __init__(self, source: DataSource, settings: ListSettings | None = None) -> None:
        self._source = source
        self._settings = settings or ListSettings()
        self._assembler = Assembler(source, self._settings)

    @property
    def source(self) -> DataSource:
        return self._source

    @property
    def settings(self) -> ListSettings:
        return self._settings

    def item(self, item_id: int) -> Element[Item, int]:
        return self._assembler.item(item_id)

    def user(self, user_id: str) -> Element[User, str]:
        return self._assembler.user(user_id)

    def story(self, item_id: int) -> Element[Story, int]:
        return self.item(item_id).ensure(is_story, _kind_error("story"))

    def comment(self, item_id: int) -> Element[Comment, int]:
        return self.item(item_id).ensure(is_comment, _kind_error("comment"))

    def job(self, item_id: int) -> Element[Job, int]:
        return self.item(item_id).ensure(is_job, _kind_error("job"))

    def poll(self, item_id: int) -> Element[Poll, int]:
        return self.item(item_id).ensure(is_poll, _kind_error("poll"))

    def poll_option(self, item_id: int) -> Element[PollOption, int]:
        return self.item(item_id).ensure(is_poll_option, _kind_error("pollopt"))

    def _named(self, name: str) -> PaginatedList[Item, int]:
        async def fetch_ids() -> list[int]:
            return await self._source.fetch_id_list(name)

        return IdList(fetch_ids, self._assembler.item, self._settings)

    def top_stories(self) -> PaginatedList[Item, int]:
        return self._named("topstories")

    def new_stories(self) -> PaginatedList[Item, int]:
        return self._named("newstories")

    def best_stories(self) -> PaginatedList[Item, int]:
        return self._named("beststories")

    def ask_stories(self) -> PaginatedList[Item, int]:
        return self._named("askstories")

    def show_stories(self) -> PaginatedList[Item, int]:
        return self._named("showstories")

    def job_stories(self) -> PaginatedList[Item, int]:
        return self._named("jobstories")

    def changed_items(self) -> PaginatedList[Item, int]:
        """Items changed recently; fetching also invalidates them in the cache."""

        async def fetch_ids() -> list[int]:
            return (await self._source.fetch_updates()).items

        return IdList(fetch_ids, self._assembler.item, self._settings)

    def changed_users(self) -> PaginatedList[User, str]:
        """Users changed recently; fetching also invalidates them in the cache."""

        async def fetch_ids() -> list[str]:
            return (await self._source.fetch_updates()).profiles

        return IdList(fetch_ids, self._assembler.user, self._settings)

    def all_items(self) -> PaginatedList[Item, int]:
        """Every item ever posted, newest first."""
        return WatermarkList(self._source.fetch_max_item, self._assembler.item, self._settings)

    async def close(self) -> None:
        """Close the underlying source if it can be closed."""
        close = getattr(self._source, "close", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> HackerNews:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()


def create_client(
    *,
    cache: AsyncCache | None = None,
    page_size: int = 10,
    max_concurrency: int = 10,
    cache_ttl: Duration = "2s",
    base_url: str = DEFAULT_BASE_URL,
    timeout: float = 10.0,
    http_client: httpx.AsyncClient | None = None,
) -> HackerNews:
    """Create a Hacker News client.

    Args:
        cache: Cache for raw payloads (default: a new ``TTLCache(cache_ttl)``)
        page_size: Default page size of every list
        max_concurrency: Maximum concurrent item fetches per page
        cache_ttl: TTL of the default cache; ignored when ``cache`` is given
        base_url: API root, without a trailing slash
        timeout: HTTP timeout in seconds; ignored when ``http_client`` is given
        http_client: Optional pre-configured httpx client (not closed by us)

    Returns:
        HackerNews client owning its own cache
    """
    settings = ClientSettings(
        base_url=base_url,
        page_size=page_size,
        max_concurrency=max_concurrency,
        cache_ttl=cache_ttl,
        timeout=timeout,
    )
    source = HackerNewsSource(
        cache if cache is not None else TTLCache(settings.cache_ttl),
        base_url=settings.base_url,
        timeout=settings.timeout,
        client=http_client,
    )
    return HackerNews(source, settings.list_settings())


__all__ = ["HackerNews", "create_client"]
