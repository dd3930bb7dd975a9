"""Shared fixtures for unit tests."""

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Callable

    from jsonthumb._types import JSONObject


@pytest.fixture
def make_nested_object() -> "Callable[[int], JSONObject]":
    """Factory fixture for deeply nested single-key objects.

    The returned callable takes a number of levels and builds
    ``{"level0": {"level1": ... {"value": 42}}}`` with that many ``levelN``
    keys wrapped around the innermost ``{"value": 42}``.

    Returns:
        A callable that builds nested objects.

    Example:
        def test_nesting(make_nested_object) -> None:
            value = make_nested_object(2)
            assert value == {"level0": {"level1": {"value": 42}}}
    """

    def create_nested_object(levels: int) -> "JSONObject":
        value: JSONObject = {"value": 42}
        for i in reversed(range(levels)):
            value = {f"level{i}": value}
        return value

    return create_nested_object


@pytest.fixture
def make_records() -> "Callable[..., list[JSONObject]]":
    """Factory fixture for lists of uniformly shaped records.

    Returns:
        A callable taking a count and returning that many records of the
        form ``{"id": i, "name": "item-i", "active": bool}``.

    Example:
        def test_records(make_records) -> None:
            records = make_records(3)
            assert records[2] == {"id": 2, "name": "item-2", "active": True}
    """

    def create_records(count: int) -> "list[JSONObject]":
        return [
            {"id": i, "name": f"item-{i}", "active": i % 2 == 0} for i in range(count)
        ]

    return create_records


@pytest.fixture
def api_response() -> "JSONObject":
    """A paginated API response with nested records."""
    return {
        "results": [
            {
                "id": f"id-{i}",
                "name": f"Item {i}",
                "price": i * 10.5,
                "tags": ["tag1", "tag2"],
                "metadata": {
                    "created": "2024-01-01",
                    "author": {"name": "Alice", "email": "a@b.com"},
                },
            }
            for i in range(100)
        ],
        "pagination": {"page": 1, "pageSize": 50, "total": 100, "hasNext": True},
        "_meta": {"requestId": "req-123", "timing": 0.5},
    }
