"""Tests for core types."""

import pytest

from lazyhn import MISSING, ListSettings, PaginatedResult, PreconditionError


class TestListSettings:
    """Tests for ListSettings validation."""

    def test_defaults(self) -> None:
        settings = ListSettings()
        assert (settings.page, settings.page_size, settings.max_concurrency) == (1, 10, 10)

    @pytest.mark.parametrize("field", ["page", "page_size", "max_concurrency"])
    def test_rejects_values_below_one(self, field: str) -> None:
        with pytest.raises(PreconditionError, match=field):
            ListSettings(**{field: 0})

    def test_rejects_non_integers(self) -> None:
        with pytest.raises(PreconditionError):
            ListSettings(page=1.5)  # type: ignore[arg-type]
        with pytest.raises(PreconditionError):
            ListSettings(page_size=True)

    def test_replace_validates(self) -> None:
        settings = ListSettings()
        assert settings.replace(page=3).page == 3
        assert settings.page == 1
        with pytest.raises(PreconditionError):
            settings.replace(page=-1)

    def test_offset(self) -> None:
        assert ListSettings(page=3, page_size=4).offset == 8


class TestPaginatedResult:
    """Tests for PaginatedResult.build."""

    def test_total_pages_rounds_up(self) -> None:
        result = PaginatedResult.build([1, 2], page=1, page_size=2, total_elements=5)
        assert result.total_pages == 3
        assert result.total_elements == 5

    def test_empty(self) -> None:
        result = PaginatedResult.build([], page=1, page_size=10, total_elements=0)
        assert result.total_pages == 0


def test_missing_repr() -> None:
    assert repr(MISSING) == "MISSING"
