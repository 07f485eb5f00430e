"""Tests for package exports."""


def test_public_api_available() -> None:
    """Test that the public API is importable from the package root."""
    from lazyhn import (
        MISSING,
        AsyncCache,
        Element,
        HackerNews,
        IdList,
        NullCache,
        PaginatedList,
        TTLCache,
        WatermarkList,
        create_client,
    )

    # Just verify they're importable
    assert MISSING is not None
    assert AsyncCache is not None
    assert Element is not None
    assert HackerNews is not None
    assert IdList is not None
    assert NullCache is not None
    assert PaginatedList is not None
    assert TTLCache is not None
    assert WatermarkList is not None
    assert create_client is not None


def test_error_hierarchy() -> None:
    """Test that every library error shares the base class."""
    from lazyhn import (
        HackerNewsError,
        ItemKindError,
        NotFoundError,
        OutOfRangeError,
        PreconditionError,
        RecordError,
        ShapeMismatchError,
        SourceError,
    )

    for error in (
        ItemKindError,
        NotFoundError,
        OutOfRangeError,
        PreconditionError,
        RecordError,
        ShapeMismatchError,
        SourceError,
    ):
        assert issubclass(error, HackerNewsError)
    assert issubclass(PreconditionError, ValueError)
