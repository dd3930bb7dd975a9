"""The thumb() entry point."""

from typing import TYPE_CHECKING

from ._infer import infer_shape
from ._options import resolve_options
from ._render import render

if TYPE_CHECKING:
    from ._options import ThumbOptions

__all__ = ["thumb"]


def thumb(
    value: object,
    options: "ThumbOptions | None" = None,
    *,
    sample_size: "int | None" = None,
    max_depth: "int | None" = None,
) -> str:
    """Generate a compact, type-aware thumbnail of a JSON-like value.

    The thumbnail describes the structure of the value (keys, element
    types and counts, unions and optional keys) without any of its data.
    It is meant for writing queries, such as jq filters, against data too
    large to read.

    Args:
        value: The value to describe.
        options: Base options. Defaults to ThumbOptions().
        sample_size: Maximum number of elements inspected per array.
            Overrides options.sample_size.
        max_depth: Nesting depth at which output collapses to ``{...}`` or
            ``Array(N) of ...``. Overrides options.max_depth.

    Returns:
        The thumbnail string.

    Raises:
        InvalidOptionsError: If an option is not an integer.

    Example:
        >>> thumb([{"id": 1, "name": "Alice"}, {"id": 2, "name": "Bob"}])
        'Array(2) of {id: number, name: string}'
        >>> thumb([[1, 2], [3, 4, 5]])
        'Array(2) of Array(2-3) of number'
    """
    resolved = resolve_options(options, sample_size=sample_size, max_depth=max_depth)
    return render(infer_shape(value, resolved), resolved.max_depth)
