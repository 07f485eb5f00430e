"""Shared pytest fixtures."""

import asyncio
from typing import Any

import pytest

from lazyhn import ListSettings, NotFoundError, TTLCache
from lazyhn.schemas import parse_id_list, parse_item, parse_updates, parse_user

NOW = 1_700_000_000


class FakeSource:
    """In-memory DataSource with request counters and optional latency."""

    def __init__(
        self,
        items: dict[int, dict[str, Any]] | None = None,
        users: dict[str, dict[str, Any]] | None = None,
        lists: dict[str, list[int]] | None = None,
        updates: dict[str, Any] | None = None,
        max_item: int = 0,
    ) -> None:
        self.items = items or {}
        self.users = users or {}
        self.lists = lists or {}
        self.updates = updates or {"items": [], "profiles": []}
        self.max_item = max_item
        self.calls: list[tuple[str, Any]] = []
        self.latency: dict[Any, float] = {}

    async def _wait(self, key: Any) -> None:
        await asyncio.sleep(self.latency.get(key, 0))

    async def fetch_item(self, item_id: int):
        self.calls.append(("item", item_id))
        await self._wait(item_id)
        if item_id not in self.items:
            raise NotFoundError(f"item/{item_id} does not exist")
        return parse_item(self.items[item_id])

    async def fetch_user(self, user_id: str):
        self.calls.append(("user", user_id))
        await self._wait(user_id)
        if user_id not in self.users:
            raise NotFoundError(f"user/{user_id} does not exist")
        return parse_user(self.users[user_id])

    async def fetch_id_list(self, name: str) -> list[int]:
        self.calls.append(("list", name))
        return parse_id_list(self.lists.get(name, []))

    async def fetch_updates(self):
        self.calls.append(("updates", None))
        return parse_updates(self.updates)

    async def fetch_max_item(self) -> int:
        self.calls.append(("maxitem", None))
        return self.max_item


def story(item_id: int, **fields: Any) -> dict[str, Any]:
    """Raw story payload."""
    return {"id": item_id, "type": "story", "by": "alice", "time": NOW, "title": f"Story {item_id}", **fields}


def comment(item_id: int, parent: int, **fields: Any) -> dict[str, Any]:
    """Raw comment payload."""
    return {"id": item_id, "type": "comment", "by": "bob", "time": NOW, "parent": parent, **fields}


@pytest.fixture
def settings() -> ListSettings:
    return ListSettings(page=1, page_size=2, max_concurrency=2)


@pytest.fixture
def cache() -> TTLCache:
    """Create a fresh TTLCache with a long TTL for each test."""
    return TTLCache(ttl="10s")


@pytest.fixture
def source() -> FakeSource:
    """A small discussion: story 1 with two comments and a reply."""
    return FakeSource(
        items={
            1: story(1, kids=[2, 3], descendants=3, score=42, url="https://example.com"),
            2: comment(2, parent=1, kids=[4], text="First"),
            3: comment(3, parent=1, text="Second"),
            4: comment(4, parent=2, text="Reply"),
            5: {"id": 5, "type": "comment", "time": NOW, "deleted": True, "parent": 1},
            6: {
                "id": 6, "type": "job", "by": "carol", "time": NOW,
                "title": "Hiring", "score": 1,
            },
            7: {
                "id": 7, "type": "poll", "by": "alice", "time": NOW,
                "title": "Poll", "parts": [8, 9], "kids": [],
            },
            8: {"id": 8, "type": "pollopt", "by": "alice", "time": NOW, "poll": 7, "score": 3},
            9: {"id": 9, "type": "pollopt", "by": "alice", "time": NOW, "poll": 7, "score": 5},
            10: story(10, dead=True),
        },
        users={
            "alice": {"id": "alice", "created": NOW, "karma": 100, "submitted": [7, 1]},
            "bob": {"id": "bob", "created": NOW, "karma": 5, "about": "hi"},
        },
        lists={"topstories": [1, 6, 7], "newstories": [10, 7, 6, 1]},
        updates={"items": [2, 3], "profiles": ["bob"]},
        max_item=10,
    )
