"""Thumbnail options."""

import logging
import sys
from dataclasses import dataclass, replace

from ._constants import (
    DEFAULT_MAX_DEPTH,
    DEFAULT_SAMPLE_SIZE,
    FRAMES_PER_LEVEL,
    MIN_MAX_DEPTH,
    MIN_SAMPLE_SIZE,
    RESERVED_FRAMES,
)
from ._exceptions import InvalidOptionsError

__all__ = ["ThumbOptions", "depth_limit", "resolve_options"]

logger = logging.getLogger(__name__)


def _check_int(name: str, value: object) -> int:
    # bool is an int subclass but never a meaningful count
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{name} must be an integer, got {type(value).__name__}"
        raise InvalidOptionsError(msg)
    return value


@dataclass(frozen=True, slots=True)
class ThumbOptions:
    """Options controlling inference and rendering.

    Out-of-range values are clamped rather than rejected, so that any pair
    of integers yields a usable configuration.

    Attributes:
        sample_size: Maximum number of elements inspected per array.
            Values below 1 are treated as 1.
        max_depth: Nesting depth at which objects and arrays collapse.
            Negative values are treated as 0.

    Raises:
        InvalidOptionsError: If either option is not an integer.
    """

    sample_size: int = DEFAULT_SAMPLE_SIZE
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        sample_size = _check_int("sample_size", self.sample_size)
        max_depth = _check_int("max_depth", self.max_depth)
        if sample_size < MIN_SAMPLE_SIZE:
            logger.debug(
                "sample_size %d is below %d, clamping", sample_size, MIN_SAMPLE_SIZE
            )
            object.__setattr__(self, "sample_size", MIN_SAMPLE_SIZE)
        if max_depth < MIN_MAX_DEPTH:
            logger.debug(
                "max_depth %d is below %d, clamping", max_depth, MIN_MAX_DEPTH
            )
            object.__setattr__(self, "max_depth", MIN_MAX_DEPTH)


def resolve_options(
    options: "ThumbOptions | None",
    *,
    sample_size: "int | None" = None,
    max_depth: "int | None" = None,
) -> ThumbOptions:
    """Combine an options object with keyword overrides.

    Args:
        options: Base options, or None for the defaults.
        sample_size: Overrides options.sample_size when given.
        max_depth: Overrides options.max_depth when given.

    Returns:
        The effective options.

    Raises:
        InvalidOptionsError: If options is not a ThumbOptions instance, or
            an override is not an integer.
    """
    if options is None:
        options = ThumbOptions()
    elif not isinstance(options, ThumbOptions):
        msg = f"options must be a ThumbOptions instance, got {type(options).__name__}"
        raise InvalidOptionsError(msg)
    if sample_size is None and max_depth is None:
        return options
    return replace(
        options,
        sample_size=options.sample_size if sample_size is None else sample_size,
        max_depth=options.max_depth if max_depth is None else max_depth,
    )


def depth_limit(max_depth: int) -> int:
    """Cap a max_depth so that walking to it fits in the recursion limit.

    Inference and rendering both recurse once per nesting level. Beyond the
    cap, nodes collapse exactly as they do at an ordinary depth limit.

    Args:
        max_depth: The requested depth limit.

    Returns:
        max_depth, or the largest depth the current recursion limit allows.
    """
    ceiling = max(
        (sys.getrecursionlimit() - RESERVED_FRAMES) // FRAMES_PER_LEVEL, MIN_MAX_DEPTH
    )
    if max_depth > ceiling:
        logger.debug(
            "max_depth %d exceeds the recursion limit, capping at %d",
            max_depth,
            ceiling,
        )
        return ceiling
    return max_depth
