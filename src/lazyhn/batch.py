"""Bounded-concurrency resolution of element batches."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Generic, TypeVar

from lazyhn.element import Element
from lazyhn.errors import PreconditionError

logger = logging.getLogger(__name__)

T = TypeVar("T")
V = TypeVar("V")
I = TypeVar("I")  # noqa: E741


def grouped(items: Iterable[T], size: int) -> Iterator[list[T]]:
    """Yield contiguous groups of ``size`` items; the last may be shorter."""
    if size < 1:
        raise PreconditionError("Invalid group size, must be larger than 0")
    group: list[T] = []
    for item in items:
        group.append(item)
        if len(group) == size:
            yield group
            group = []
    if group:
        yield group


class BatchFetcher(Generic[V, I]):
    """Resolves elements group by group, at most ``max_concurrency`` at a time.

    Each group runs fully concurrently and is awaited as a whole before the
    next one starts. The first failure in a group is raised at once; the
    group's other members are left running and their outcomes discarded.
    """

    # Keeps abandoned siblings referenced until they finish
    _background: set[asyncio.Task[object]] = set()

    def __init__(self, max_concurrency: int) -> None:
        if max_concurrency < 1:
            raise PreconditionError("Invalid 'max_concurrency', must be larger than 0")
        self._max_concurrency = max_concurrency

    @property
    def max_concurrency(self) -> int:
        return self._max_concurrency

    async def fetch(
        self,
        ids: Sequence[I],
        factory: Callable[[I], Element[V, I]],
    ) -> list[tuple[I, V]]:
        """Resolve ``factory(id)`` for every id, preserving input order."""
        results: list[tuple[I, V]] = []
        for index, group in enumerate(grouped(ids, self._max_concurrency)):
            logger.debug(
                "Resolving batch group",
                extra={"group": index, "size": len(group)},
            )
            tasks = [asyncio.ensure_future(self._resolve(factory(id))) for id in group]
            try:
                results.extend(await asyncio.gather(*tasks))
            except BaseException:
                self._abandon(tasks)
                raise
        return results

    @staticmethod
    async def _resolve(element: Element[V, I]) -> tuple[I, V]:
        id = await element.get_id()
        value = await element.fetch()
        return id, value

    @classmethod
    def _abandon(cls, tasks: list[asyncio.Future[tuple[I, V]]]) -> None:
        for task in tasks:
            if task.done():
                cls._consume(task)
                continue
            cls._background.add(task)
            task.add_done_callback(cls._consume)

    @classmethod
    def _consume(cls, task: asyncio.Future[object]) -> None:
        cls._background.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.debug(
                "Abandoned batch member failed",
                extra={"error_type": type(error).__name__},
            )


__all__ = ["BatchFetcher", "grouped"]
