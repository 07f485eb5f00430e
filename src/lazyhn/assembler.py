"""Turns raw records into lazily-linked entities."""

from __future__ import annotations

from lazyhn.element import Element
from lazyhn.errors import RecordError
from lazyhn.models import Comment, Item, Job, Poll, PollOption, Story, Tombstone, User
from lazyhn.paginated import IdList, PaginatedList
from lazyhn.schemas import (
    CommentRecord,
    ItemRecord,
    JobRecord,
    PollOptionRecord,
    PollRecord,
    StoryRecord,
    UserRecord,
)
from lazyhn.source import DataSource
from lazyhn.types import ListSettings


class Assembler:
    """Builds items and users whose references resolve through ``source``.

    Every reference (author, parent, kids, parts, poll, submitted) is a fresh
    element or list that calls back into this assembler when fetched.
    """

    def __init__(self, source: DataSource, settings: ListSettings) -> None:
        self._source = source
        self._settings = settings

    @property
    def settings(self) -> ListSettings:
        return self._settings

    def item(self, item_id: int) -> Element[Item, int]:
        """Lazy item by id."""
        return Element.of(item_id, self._load_item)

    def user(self, user_id: str) -> Element[User, str]:
        """Lazy user by name."""
        return Element.of(user_id, self._load_user)

    def items(self, ids: list[int]) -> PaginatedList[Item, int]:
        """Lazy list over already-known item ids."""
        return IdList.of(ids, self.item, self._settings)

    async def _load_item(self, item_id: int) -> Item:
        return self.build_item(await self._source.fetch_item(item_id))

    async def _load_user(self, user_id: str) -> User:
        return self.build_user(await self._source.fetch_user(user_id))

    def build_item(self, record: ItemRecord) -> Item:
        """Assemble one item; deleted and dead records become tombstones."""
        if record.deleted or record.dead:
            return Tombstone(
                id=record.id,
                item_type=record.type,
                created_at=record.time,
                deleted=record.deleted,
                dead=record.dead,
            )
        if record.by is None:
            raise RecordError(f"Item {record.id} has no author")
        author = self.user(record.by)

        if isinstance(record, StoryRecord):
            return Story(
                id=record.id,
                author=author,
                created_at=record.time,
                title=record.title,
                url=record.url,
                text=record.text,
                score=record.score,
                total_kids=record.descendants,
                kids=self.items(record.kids),
            )
        if isinstance(record, CommentRecord):
            return Comment(
                id=record.id,
                author=author,
                created_at=record.time,
                text=record.text,
                parent=self.item(record.parent),
                kids=self.items(record.kids),
            )
        if isinstance(record, JobRecord):
            return Job(
                id=record.id,
                author=author,
                created_at=record.time,
                title=record.title,
                url=record.url,
                text=record.text,
                score=record.score,
            )
        if isinstance(record, PollRecord):
            return Poll(
                id=record.id,
                author=author,
                created_at=record.time,
                title=record.title,
                text=record.text,
                score=record.score,
                total_kids=record.descendants,
                kids=self.items(record.kids),
                parts=self.items(record.parts),
            )
        if isinstance(record, PollOptionRecord):
            return PollOption(
                id=record.id,
                author=author,
                created_at=record.time,
                text=record.text,
                score=record.score,
                poll=self.item(record.poll),
            )
        raise RecordError(f"Unsupported item type: {type(record).__name__}")

    def build_user(self, record: UserRecord) -> User:
        """Assemble one user."""
        return User(
            username=record.id,
            created_at=record.created,
            about=record.about,
            karma=record.karma,
            submitted=self.items(record.submitted),
        )


__all__ = ["Assembler"]
