"""Tests for bounded-concurrency batch fetching."""

import asyncio

import pytest

from lazyhn import Element, PreconditionError
from lazyhn.batch import BatchFetcher, grouped


class TestGrouped:
    """Tests for grouped."""

    def test_even_groups(self) -> None:
        assert list(grouped([1, 2, 3, 4], 2)) == [[1, 2], [3, 4]]

    def test_keeps_trailing_partial_group(self) -> None:
        assert list(grouped([1, 2, 3, 4, 5], 2)) == [[1, 2], [3, 4], [5]]

    def test_empty(self) -> None:
        assert list(grouped([], 3)) == []

    def test_invalid_size(self) -> None:
        with pytest.raises(PreconditionError):
            list(grouped([1], 0))


class InFlightProbe:
    """Element factory recording peak concurrency; latency falls as id grows."""

    def __init__(self, ids: list[int]) -> None:
        self.current = 0
        self.peak = 0
        self.completed: list[int] = []
        self._slowest = max(ids, default=0)

    def __call__(self, item_id: int) -> Element[str, int]:
        async def fetch_value(id: int) -> str:
            self.current += 1
            self.peak = max(self.peak, self.current)
            try:
                await asyncio.sleep((self._slowest - id + 1) * 0.005)
            finally:
                self.current -= 1
            self.completed.append(id)
            return f"value-{id}"

        return Element.of(item_id, fetch_value)


class TestBatchFetcher:
    """Tests for BatchFetcher."""

    async def test_pairs_ids_with_values(self) -> None:
        probe = InFlightProbe([1, 2, 3])
        pairs = await BatchFetcher(2).fetch([1, 2, 3], probe)
        assert pairs == [(1, "value-1"), (2, "value-2"), (3, "value-3")]

    async def test_order_survives_out_of_order_completion(self) -> None:
        ids = list(range(1, 9))
        probe = InFlightProbe(ids)
        pairs = await BatchFetcher(4).fetch(ids, probe)
        assert [id for id, _ in pairs] == ids
        # Higher ids finish first inside each group
        assert probe.completed[:4] == [4, 3, 2, 1]

    @pytest.mark.parametrize("limit", [1, 3, 5])
    async def test_never_exceeds_limit(self, limit: int) -> None:
        ids = list(range(1, 12))
        probe = InFlightProbe(ids)
        await BatchFetcher(limit).fetch(ids, probe)
        assert probe.peak == limit

    async def test_groups_are_sequential(self) -> None:
        events: list[str] = []

        def factory(item_id: int) -> Element[int, int]:
            async def fetch_value(id: int) -> int:
                events.append(f"start-{id}")
                await asyncio.sleep(0.01 if id % 2 else 0.001)
                events.append(f"end-{id}")
                return id

            return Element.of(item_id, fetch_value)

        await BatchFetcher(2).fetch([1, 2, 3, 4], factory)
        # Group two only starts once both members of group one have ended
        assert events.index("start-3") > events.index("end-1")
        assert events.index("start-3") > events.index("end-2")

    async def test_empty_ids(self) -> None:
        assert await BatchFetcher(3).fetch([], InFlightProbe([])) == []

    async def test_failure_fails_whole_batch(self) -> None:
        started: list[int] = []

        def factory(item_id: int) -> Element[int, int]:
            async def fetch_value(id: int) -> int:
                started.append(id)
                if id == 2:
                    raise LookupError(f"item {id} failed")
                await asyncio.sleep(0.01)
                return id

            return Element.of(item_id, fetch_value)

        with pytest.raises(LookupError, match="item 2 failed"):
            await BatchFetcher(2).fetch([1, 2, 3, 4], factory)
        # Later groups never start
        assert 3 not in started and 4 not in started
        await asyncio.sleep(0.02)

    async def test_failure_does_not_wait_for_siblings(self) -> None:
        finished: list[int] = []

        def factory(item_id: int) -> Element[int, int]:
            async def fetch_value(id: int) -> int:
                if id == 1:
                    raise LookupError("fast failure")
                await asyncio.sleep(0.05)
                finished.append(id)
                return id

            return Element.of(item_id, fetch_value)

        with pytest.raises(LookupError):
            await BatchFetcher(2).fetch([1, 2], factory)
        assert finished == []
        # The sibling is not cancelled and completes in the background
        await asyncio.sleep(0.1)
        assert finished == [2]

    def test_invalid_concurrency(self) -> None:
        with pytest.raises(PreconditionError):
            BatchFetcher(0)
