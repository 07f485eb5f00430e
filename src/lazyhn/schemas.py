"""Raw Hacker News API payload schemas.

These models describe the JSON returned by the Firebase endpoints before it
is assembled into lazily-linked entities. Negative ids and counters fail
validation. Fields the API omits when empty (``kids``, ``score``,
``submitted``...) fall back to empty defaults.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Literal, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, TypeAdapter, ValidationError

from lazyhn.errors import RecordError

T = TypeVar("T")


class _ItemBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: NonNegativeInt
    by: str | None = None
    time: datetime
    text: str | None = None
    url: str | None = None
    deleted: bool = False
    dead: bool = False


class StoryRecord(_ItemBase):
    """Raw story item."""

    type: Literal["story"]
    title: str | None = None
    score: NonNegativeInt = 0
    descendants: NonNegativeInt = 0
    kids: list[NonNegativeInt] = Field(default_factory=list)


class CommentRecord(_ItemBase):
    """Raw comment item."""

    type: Literal["comment"]
    parent: NonNegativeInt
    kids: list[NonNegativeInt] = Field(default_factory=list)


class JobRecord(_ItemBase):
    """Raw job item."""

    type: Literal["job"]
    title: str | None = None
    score: NonNegativeInt = 0


class PollRecord(_ItemBase):
    """Raw poll item."""

    type: Literal["poll"]
    title: str | None = None
    score: NonNegativeInt = 0
    descendants: NonNegativeInt = 0
    kids: list[NonNegativeInt] = Field(default_factory=list)
    parts: list[NonNegativeInt] = Field(default_factory=list)


class PollOptionRecord(_ItemBase):
    """Raw poll option item."""

    type: Literal["pollopt"]
    poll: NonNegativeInt
    score: NonNegativeInt = 0


ItemRecord = Annotated[
    Union[StoryRecord, CommentRecord, JobRecord, PollRecord, PollOptionRecord],
    Field(discriminator="type"),
]


class UserRecord(BaseModel):
    """Raw user profile."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    created: datetime
    about: str | None = None
    karma: NonNegativeInt = 0
    submitted: list[NonNegativeInt] = Field(default_factory=list)


class UpdatesRecord(BaseModel):
    """Items and profiles that changed recently."""

    model_config = ConfigDict(frozen=True)

    items: list[NonNegativeInt] = Field(default_factory=list)
    profiles: list[str] = Field(default_factory=list)


_ITEM_ADAPTER: TypeAdapter[ItemRecord] = TypeAdapter(ItemRecord)
_ID_LIST_ADAPTER: TypeAdapter[list[int]] = TypeAdapter(list[NonNegativeInt])
_MAX_ITEM_ADAPTER: TypeAdapter[int] = TypeAdapter(NonNegativeInt)


def _validate(adapter: TypeAdapter[T], payload: Any, what: str) -> T:
    try:
        return adapter.validate_python(payload)
    except ValidationError as e:
        raise RecordError(f"Invalid {what} payload: {e}") from e


def parse_item(payload: Any) -> ItemRecord:
    """Validate a raw item payload."""
    return _validate(_ITEM_ADAPTER, payload, "item")


def parse_user(payload: Any) -> UserRecord:
    """Validate a raw user payload."""
    try:
        return UserRecord.model_validate(payload)
    except ValidationError as e:
        raise RecordError(f"Invalid user payload: {e}") from e


def parse_updates(payload: Any) -> UpdatesRecord:
    """Validate a raw updates payload."""
    try:
        return UpdatesRecord.model_validate(payload)
    except ValidationError as e:
        raise RecordError(f"Invalid updates payload: {e}") from e


def parse_id_list(payload: Any) -> list[int]:
    """Validate a list of item ids."""
    return _validate(_ID_LIST_ADAPTER, payload, "id list")


def parse_max_item(payload: Any) -> int:
    """Validate the max item id."""
    return _validate(_MAX_ITEM_ADAPTER, payload, "max item")


__all__ = [
    "CommentRecord",
    "ItemRecord",
    "JobRecord",
    "PollOptionRecord",
    "PollRecord",
    "StoryRecord",
    "UpdatesRecord",
    "UserRecord",
    "parse_id_list",
    "parse_item",
    "parse_max_item",
    "parse_updates",
    "parse_user",
]
