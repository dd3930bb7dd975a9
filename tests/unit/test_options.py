import logging
from typing import TYPE_CHECKING

import pytest

from jsonthumb import InvalidOptionsError, JSONThumbError, ThumbOptions
from jsonthumb._options import depth_limit, resolve_options

if TYPE_CHECKING:
    from pytest_mock import MockerFixture


class TestThumbOptionsDefaults:
    def test_defaults(self) -> None:
        options = ThumbOptions()
        assert options.sample_size == 100
        assert options.max_depth == 8

    def test_explicit_values(self) -> None:
        options = ThumbOptions(sample_size=5, max_depth=2)
        assert options.sample_size == 5
        assert options.max_depth == 2

    def test_options_are_frozen(self) -> None:
        options = ThumbOptions()
        with pytest.raises(AttributeError):
            options.sample_size = 3  # type: ignore[misc]


class TestThumbOptionsClamping:
    @pytest.mark.parametrize(
        ("sample_size", "expected"),
        [(0, 1), (-1, 1), (-1000, 1), (1, 1), (7, 7)],
        ids=["zero", "negative", "very_negative", "one", "positive"],
    )
    def test_sample_size_clamped_to_one(self, sample_size: int, expected: int) -> None:
        assert ThumbOptions(sample_size=sample_size).sample_size == expected

    @pytest.mark.parametrize(
        ("max_depth", "expected"),
        [(-1, 0), (-50, 0), (0, 0), (3, 3)],
        ids=["negative", "very_negative", "zero", "positive"],
    )
    def test_max_depth_clamped_to_zero(self, max_depth: int, expected: int) -> None:
        assert ThumbOptions(max_depth=max_depth).max_depth == expected

    def test_clamping_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="jsonthumb"):
            _ = ThumbOptions(sample_size=0)
        assert "sample_size 0 is below 1" in caplog.text

    def test_valid_options_log_nothing(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="jsonthumb"):
            _ = ThumbOptions(sample_size=10, max_depth=2)
        assert caplog.records == []


class TestThumbOptionsTypes:
    @pytest.mark.parametrize(
        ("kwargs", "match"),
        [
            ({"sample_size": "10"}, "sample_size must be an integer, got str"),
            ({"sample_size": 2.5}, "sample_size must be an integer, got float"),
            ({"sample_size": True}, "sample_size must be an integer, got bool"),
            ({"max_depth": None}, "max_depth must be an integer, got NoneType"),
            ({"max_depth": [3]}, "max_depth must be an integer, got list"),
        ],
        ids=["str", "float", "bool", "none", "list"],
    )
    def test_rejects_non_integers(self, kwargs: dict[str, object], match: str) -> None:
        with pytest.raises(InvalidOptionsError, match=match):
            _ = ThumbOptions(**kwargs)  # type: ignore[arg-type]

    def test_error_hierarchy(self) -> None:
        assert issubclass(InvalidOptionsError, JSONThumbError)
        assert issubclass(InvalidOptionsError, TypeError)


class TestResolveOptions:
    def test_none_gives_defaults(self) -> None:
        assert resolve_options(None) == ThumbOptions()

    def test_options_returned_unchanged_without_overrides(self) -> None:
        options = ThumbOptions(sample_size=3, max_depth=1)
        assert resolve_options(options) is options

    def test_keyword_overrides_win(self) -> None:
        options = ThumbOptions(sample_size=3, max_depth=1)
        resolved = resolve_options(options, max_depth=5)
        assert resolved == ThumbOptions(sample_size=3, max_depth=5)

    def test_keyword_overrides_without_options(self) -> None:
        resolved = resolve_options(None, sample_size=20)
        assert resolved == ThumbOptions(sample_size=20, max_depth=8)

    def test_overrides_are_clamped(self) -> None:
        resolved = resolve_options(None, sample_size=-4, max_depth=-4)
        assert resolved == ThumbOptions(sample_size=1, max_depth=0)

    def test_rejects_non_options_object(self) -> None:
        with pytest.raises(
            InvalidOptionsError, match="options must be a ThumbOptions instance"
        ):
            _ = resolve_options({"sample_size": 10})  # type: ignore[arg-type]


class TestDepthLimit:
    @pytest.mark.parametrize(
        ("limit", "max_depth", "expected"),
        [
            (1000, 8, 8),
            (1000, 100, 100),
            (1000, 101, 100),
            (1000, 10**6, 100),
            (5000, 1000, 600),
            (100, 8, 0),
        ],
        ids=["default", "at_cap", "above_cap", "huge", "raised_limit", "tiny_limit"],
    )
    def test_cap_follows_recursion_limit(
        self, mocker: "MockerFixture", limit: int, max_depth: int, expected: int
    ) -> None:
        _ = mocker.patch("sys.getrecursionlimit", return_value=limit)
        assert depth_limit(max_depth) == expected

    def test_capping_is_logged(
        self, mocker: "MockerFixture", caplog: pytest.LogCaptureFixture
    ) -> None:
        _ = mocker.patch("sys.getrecursionlimit", return_value=1000)
        with caplog.at_level(logging.DEBUG, logger="jsonthumb"):
            _ = depth_limit(500)
        expected = "max_depth 500 exceeds the recursion limit, capping at 100"
        assert expected in caplog.text
