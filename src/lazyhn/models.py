"""Typed Hacker News entities.

Items form a tagged union on ``kind``. Cross-references are lazy
``Element``/``PaginatedList`` values, recomputed on demand, so no in-memory
graph is ever built. Deleted and dead items collapse to ``Tombstone``,
which carries no references at all.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal, Union

from lazyhn.element import Element
from lazyhn.paginated import PaginatedList


@dataclass(frozen=True, slots=True)
class Story:
    id: int
    author: Element[User, str]
    created_at: datetime
    title: str | None
    url: str | None
    text: str | None
    score: int
    total_kids: int
    kids: PaginatedList[Item, int]
    kind: Literal["story"] = "story"


@dataclass(frozen=True, slots=True)
class Comment:
    id: int
    author: Element[User, str]
    created_at: datetime
    text: str | None
    parent: Element[Item, int]
    kids: PaginatedList[Item, int]
    kind: Literal["comment"] = "comment"


@dataclass(frozen=True, slots=True)
class Job:
    id: int
    author: Element[User, str]
    created_at: datetime
    title: str | None
    url: str | None
    text: str | None
    score: int
    kind: Literal["job"] = "job"


@dataclass(frozen=True, slots=True)
class Poll:
    id: int
    author: Element[User, str]
    created_at: datetime
    title: str | None
    text: str | None
    score: int
    total_kids: int
    kids: PaginatedList[Item, int]
    parts: PaginatedList[Item, int]
    kind: Literal["poll"] = "poll"


@dataclass(frozen=True, slots=True)
class PollOption:
    id: int
    author: Element[User, str]
    created_at: datetime
    text: str | None
    score: int
    poll: Element[Item, int]
    kind: Literal["pollopt"] = "pollopt"


@dataclass(frozen=True, slots=True)
class Tombstone:
    """A deleted or dead item. Only identity, timestamp and flags survive."""

    id: int
    item_type: str
    created_at: datetime
    deleted: bool
    dead: bool
    kind: Literal["tombstone"] = "tombstone"


@dataclass(frozen=True, slots=True)
class User:
    username: str
    created_at: datetime
    about: str | None
    karma: int
    submitted: PaginatedList[Item, int]


Item = Union[Story, Comment, Job, Poll, PollOption, Tombstone]


def is_story(item: Item) -> bool:
    return item.kind == "story"


def is_comment(item: Item) -> bool:
    return item.kind == "comment"


def is_job(item: Item) -> bool:
    return item.kind == "job"


def is_poll(item: Item) -> bool:
    return item.kind == "poll"


def is_poll_option(item: Item) -> bool:
    return item.kind == "pollopt"


def is_tombstone(item: Item) -> bool:
    return item.kind == "tombstone"


__all__ = [
    "Comment",
    "Item",
    "Job",
    "Poll",
    "PollOption",
    "Story",
    "Tombstone",
    "User",
    "is_comment",
    "is_job",
    "is_poll",
    "is_poll_option",
    "is_story",
    "is_tombstone",
]
