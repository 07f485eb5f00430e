"""Lazily-fetchable, page-sliced lists of elements.

Architecture:
    A list owns an id provider, an element factory keyed by id, and
    ``ListSettings``. Nothing is fetched at construction. ``fetch`` derives
    the full id sequence afresh, slices out the current page and resolves
    the page's elements through a ``BatchFetcher``.

    ``IdList`` is backed by an explicit, ordered id sequence.
    ``WatermarkList`` addresses every item below a maximum id, newest first,
    without ever materialising the full sequence.

    ``set_page``, ``set_page_size`` and ``map`` never mutate: they return a
    new list sharing the same id provider.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Awaitable, Callable, Sequence
from typing import Generic, TypeVar

from lazyhn.batch import BatchFetcher
from lazyhn.element import Element
from lazyhn.errors import OutOfRangeError, PreconditionError
from lazyhn.types import ListSettings, MapFn, PaginatedResult

V = TypeVar("V")
I = TypeVar("I")  # noqa: E741
O = TypeVar("O")  # noqa: E741

ItemFactory = Callable[[I], Element[V, I]]


class PaginatedList(ABC, Generic[V, I]):
    """Base class holding the operations shared by every list variant."""

    def __init__(self, item_factory: ItemFactory[I, V], settings: ListSettings) -> None:
        self._item_factory = item_factory
        self._settings = settings

    @property
    def settings(self) -> ListSettings:
        return self._settings

    @property
    def page(self) -> int:
        return self._settings.page

    @property
    def page_size(self) -> int:
        return self._settings.page_size

    @abstractmethod
    async def _page_ids(self) -> tuple[list[I], int]:
        """Return the current page's ids and the total element count."""

    @abstractmethod
    async def _id_at(self, index: int) -> I | None:
        """Return the id at absolute ``index`` of the unpaginated sequence."""

    @abstractmethod
    def _derive(self, item_factory: ItemFactory, settings: ListSettings) -> PaginatedList:
        """Build a list of the same variant with another factory or settings."""

    async def ids(self) -> list[I]:
        """Ids on the current page, without resolving their values."""
        ids, _ = await self._page_ids()
        return ids

    async def fetch(self) -> PaginatedResult[V]:
        """Resolve every element on the current page."""
        ids, total = await self._page_ids()
        fetcher: BatchFetcher[V, I] = BatchFetcher(self._settings.max_concurrency)
        pairs = await fetcher.fetch(ids, self._item_factory)
        return PaginatedResult.build(
            elements=[value for _, value in pairs],
            page=self._settings.page,
            page_size=self._settings.page_size,
            total_elements=total,
        )

    async def pages(self) -> AsyncIterator[PaginatedResult[V]]:
        """Yield this page and every following one until the last page."""
        current: PaginatedList[V, I] = self
        while True:
            result = await current.fetch()
            yield result
            if result.page >= result.total_pages:
                return
            current = current.set_page(result.page + 1)

    def set_page(self, page: int) -> PaginatedList[V, I]:
        return self._derive(self._item_factory, self._settings.replace(page=page))

    def set_page_size(self, page_size: int) -> PaginatedList[V, I]:
        return self._derive(self._item_factory, self._settings.replace(page_size=page_size))

    def set_max_concurrency(self, max_concurrency: int) -> PaginatedList[V, I]:
        return self._derive(
            self._item_factory, self._settings.replace(max_concurrency=max_concurrency)
        )

    def get_item(self, index: int) -> Element[V, I | None]:
        """Element at absolute ``index``, ignoring the current page.

        A negative index fails immediately. An index past the end fails only
        once the element's value is fetched.
        """
        if index < 0:
            raise PreconditionError('"index" is out of range, must be larger than -1')
        item_factory = self._item_factory

        async def fetch_id() -> I | None:
            return await self._id_at(index)

        async def fetch_value(id: I | None) -> V:
            if id is None:
                raise OutOfRangeError(f"No element at index {index}")
            return await item_factory(id).fetch()

        return Element(fetch_id, fetch_value)

    def map(self, fn: MapFn[V, O]) -> PaginatedList[O, I]:
        """Return a list whose elements are transformed by ``fn``."""
        item_factory = self._item_factory

        def mapped(id: I) -> Element[O, I]:
            return item_factory(id).map(fn)

        return self._derive(mapped, self._settings)


class IdList(PaginatedList[V, I]):
    """List backed by an explicit ordered id sequence."""

    def __init__(
        self,
        fetch_ids: Callable[[], Awaitable[Sequence[I]]],
        item_factory: ItemFactory[I, V],
        settings: ListSettings,
    ) -> None:
        super().__init__(item_factory, settings)
        self._fetch_ids = fetch_ids

    @classmethod
    def of(
        cls,
        ids: Sequence[I],
        item_factory: ItemFactory[I, V],
        settings: ListSettings,
    ) -> IdList[V, I]:
        """Build a list over ids that are already known."""
        snapshot = tuple(ids)

        async def fetch_ids() -> Sequence[I]:
            return snapshot

        return cls(fetch_ids, item_factory, settings)

    async def _page_ids(self) -> tuple[list[I], int]:
        all_ids = await self._fetch_ids()
        start = self._settings.offset
        return list(all_ids[start : start + self._settings.page_size]), len(all_ids)

    async def _id_at(self, index: int) -> I | None:
        all_ids = await self._fetch_ids()
        if index >= len(all_ids):
            return None
        return all_ids[index]

    def _derive(self, item_factory: ItemFactory, settings: ListSettings) -> IdList:
        return IdList(self._fetch_ids, item_factory, settings)


class WatermarkList(PaginatedList[V, int]):
    """Every id from a maximum down to 1, newest first.

    Page ``p`` of size ``s`` covers ``max - (p - 1) * s`` down to
    ``max - p * s + 1``, clamped at 1.
    """

    def __init__(
        self,
        fetch_max_id: Callable[[], Awaitable[int]],
        item_factory: ItemFactory[int, V],
        settings: ListSettings,
    ) -> None:
        super().__init__(item_factory, settings)
        self._fetch_max_id = fetch_max_id

    async def _page_ids(self) -> tuple[list[int], int]:
        max_id = await self._fetch_max_id()
        start = max_id - self._settings.offset
        stop = max(max_id - self._settings.page * self._settings.page_size, 0)
        return list(range(start, stop, -1)), max_id

    async def _id_at(self, index: int) -> int | None:
        max_id = await self._fetch_max_id()
        if index >= max_id:
            return None
        return max_id - index

    def _derive(self, item_factory: ItemFactory, settings: ListSettings) -> WatermarkList:
        return WatermarkList(self._fetch_max_id, item_factory, settings)


__all__ = ["IdList", "ItemFactory", "PaginatedList", "WatermarkList"]
