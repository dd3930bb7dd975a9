"""Defaults and notation constants."""

from typing import Final

DEFAULT_SAMPLE_SIZE: Final[int] = 100
"""Maximum number of array elements inspected per array."""

DEFAULT_MAX_DEPTH: Final[int] = 8
"""Nesting depth at which objects and arrays collapse."""

MIN_SAMPLE_SIZE: Final[int] = 1
MIN_MAX_DEPTH: Final[int] = 0

# Objects with more keys than this always render across multiple lines
MAX_INLINE_KEYS: Final[int] = 3

INDENT_WIDTH: Final[int] = 2

VARIANT_SEPARATOR: Final[str] = " | "
INLINE_FIELD_SEPARATOR: Final[str] = ", "
MULTILINE_FIELD_SEPARATOR: Final[str] = ",\n"
OPTIONAL_MARKER: Final[str] = "?"
COLLAPSED_OBJECT: Final[str] = "{...}"
EMPTY_OBJECT: Final[str] = "{}"
COLLAPSED_CHILDREN: Final[str] = "..."

# Recursion budget: Python frames one nesting level may cost across
# inference, merging and rendering, and frames left for the caller's stack
FRAMES_PER_LEVEL: Final[int] = 8
RESERVED_FRAMES: Final[int] = 200
