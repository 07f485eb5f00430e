"""Hacker News data source backed by the Firebase JSON API."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Protocol, runtime_checkable

import httpx

from lazyhn.adapters.base import AsyncCache
from lazyhn.errors import NotFoundError, PreconditionError, SourceError
from lazyhn.schemas import (
    ItemRecord,
    UpdatesRecord,
    UserRecord,
    parse_id_list,
    parse_item,
    parse_max_item,
    parse_updates,
    parse_user,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://hacker-news.firebaseio.com/v0"

ID_LISTS = frozenset(
    {
        "topstories",
        "newstories",
        "beststories",
        "askstories",
        "showstories",
        "jobstories",
    }
)


@runtime_checkable
class DataSource(Protocol):
    """Translates entity requests into validated raw records."""

    async def fetch_item(self, item_id: int) -> ItemRecord:
        """Fetch one item by id."""
        ...

    async def fetch_user(self, user_id: str) -> UserRecord:
        """Fetch one user by name."""
        ...

    async def fetch_id_list(self, name: str) -> list[int]:
        """Fetch a named, ordered list of item ids."""
        ...

    async def fetch_updates(self) -> UpdatesRecord:
        """Fetch recently changed item ids and user names."""
        ...

    async def fetch_max_item(self) -> int:
        """Fetch the current largest item id."""
        ...


def ensure_valid_url(url: str) -> None:
    """Reject base URLs with a trailing slash."""
    if not url:
        raise PreconditionError("The base url cannot be empty")
    if url.endswith("/"):
        raise PreconditionError('The base url cannot end with "/"')


class HackerNewsSource:
    """Async data source reading the Hacker News API through a cache.

    Raw JSON payloads are cached under ``item/<id>``, ``user/<name>``,
    ``<list name>``, ``updates`` and ``maxitem``. Payloads are validated on
    every read, so a cached payload is held to the same schema as a fresh one.
    """

    def __init__(
        self,
        cache: AsyncCache,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        ensure_valid_url(base_url)
        self._cache = cache
        self._base_url = base_url
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    @property
    def cache(self) -> AsyncCache:
        return self._cache

    async def _request(self, path: str) -> Any:
        """GET ``<base_url>/<path>.json`` and decode the body."""
        url = f"{self._base_url}/{path}.json"
        logger.debug("Requesting resource", extra={"url": url})
        try:
            response = await self._client.get(url)
        except httpx.HTTPError as e:
            raise SourceError(f"Request to {url} failed: {e}") from e
        if not response.is_success:
            raise SourceError(
                f"HTTP {response.status_code} for {url}",
                status_code=response.status_code,
            )
        try:
            return response.json()
        except ValueError as e:
            raise SourceError(f"Invalid JSON from {url}") from e

    async def _fetch(self, key: str, *, required: bool = False) -> Any:
        """Fetch ``key`` through the cache; ``required`` rejects ``null``."""

        async def produce() -> Any:
            logger.debug("Cache miss", extra={"key": key})
            payload = await self._request(key)
            if required and payload is None:
                raise NotFoundError(f"{key} does not exist", status_code=200)
            return payload

        return await self._cache.get_or_set(key, produce)

    async def fetch_item(self, item_id: int) -> ItemRecord:
        """Fetch one item by id."""
        return parse_item(await self._fetch(f"item/{item_id}", required=True))

    async def fetch_user(self, user_id: str) -> UserRecord:
        """Fetch one user by name."""
        return parse_user(await self._fetch(f"user/{user_id}", required=True))

    async def fetch_id_list(self, name: str) -> list[int]:
        """Fetch a named, ordered list of item ids."""
        if name not in ID_LISTS:
            raise PreconditionError(f"Unknown id list: {name!r}")
        return parse_id_list(await self._fetch(name))

    async def fetch_max_item(self) -> int:
        """Fetch the current largest item id."""
        return parse_max_item(await self._fetch("maxitem"))

    async def fetch_updates(self) -> UpdatesRecord:
        """Fetch recent changes and drop the changed entries from the cache.

        Invalidation only happens when the updates payload itself was fetched
        from the network; a cached payload has already been applied.
        """
        fresh = False

        async def produce() -> Any:
            nonlocal fresh
            payload = await self._request("updates")
            fresh = True
            return payload

        updates = parse_updates(await self._cache.get_or_set("updates", produce))
        if fresh:
            await self._invalidate(updates)
        return updates

    async def _invalidate(self, updates: UpdatesRecord) -> None:
        keys = [f"item/{item_id}" for item_id in updates.items]
        keys.extend(f"user/{name}" for name in updates.profiles)
        await asyncio.gather(*(self._cache.remove(key) for key in keys))
        logger.debug(
            "Invalidated changed entries",
            extra={"items": len(updates.items), "profiles": len(updates.profiles)},
        )

    async def close(self) -> None:
        """Close the HTTP client if this source created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> HackerNewsSource:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


__all__ = ["DEFAULT_BASE_URL", "ID_LISTS", "DataSource", "HackerNewsSource", "ensure_valid_url"]
