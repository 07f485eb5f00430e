"""Client configuration."""

from __future__ import annotations

from dataclasses import dataclass

from lazyhn.duration import parse_duration
from lazyhn.errors import PreconditionError
from lazyhn.source import DEFAULT_BASE_URL, ensure_valid_url
from lazyhn.types import Duration, ListSettings


@dataclass(frozen=True, slots=True)
class ClientSettings:
    """Settings accepted by ``create_client``, validated on construction."""

    base_url: str = DEFAULT_BASE_URL
    page_size: int = 10
    max_concurrency: int = 10
    cache_ttl: Duration = "2s"
    timeout: float = 10.0

    def __post_init__(self) -> None:
        ensure_valid_url(self.base_url)
        parse_duration(self.cache_ttl)
        if self.timeout <= 0:
            raise PreconditionError("timeout must be positive")
        self.list_settings()

    def list_settings(self) -> ListSettings:
        """Settings for lists created by the client, starting at page 1."""
        return ListSettings(
            page=1,
            page_size=self.page_size,
            max_concurrency=self.max_concurrency,
        )


__all__ = ["ClientSettings"]
