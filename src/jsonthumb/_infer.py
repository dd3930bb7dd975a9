"""Shape inference.

Walks a JSON-like Python value and builds its shape tree. Large lists are
sampled at evenly spaced indices, and the sampled element shapes are folded
together with merge_shapes().
"""

import logging
from collections.abc import Mapping
from decimal import Decimal
from functools import reduce
from typing import TYPE_CHECKING, ClassVar, cast

from ._merge import merge_shapes
from ._options import depth_limit, resolve_options
from ._shapes import NULL_PLACEHOLDER, ArrayShape, FieldShape, ObjectShape, ScalarShape

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ._options import ThumbOptions
    from ._shapes import Shape

__all__ = ["infer_shape", "sample_indices"]

logger = logging.getLogger(__name__)

_NULL = ScalarShape("null")
_STRING = ScalarShape("string")
_NUMBER = ScalarShape("number")
_BOOLEAN = ScalarShape("boolean")


def sample_indices(length: int, sample_size: int) -> "Sequence[int]":
    """Pick up to sample_size evenly spaced indices into a sequence.

    Deterministic: the same length and sample size always give the same
    indices. The spacing covers the whole sequence, including its tail.

    Args:
        length: Length of the sequence.
        sample_size: Maximum number of indices to return. Must be positive.

    Returns:
        Every index if length <= sample_size, otherwise sample_size indices
        in ascending order.
    """
    if length <= sample_size:
        return range(length)
    return [i * length // sample_size for i in range(sample_size)]


class _ShapeInferrer:
    """Recursive inference state for a single call."""

    __slots__: ClassVar[tuple[str, ...]] = ("_active", "_max_depth", "_sample_size")

    def __init__(self, options: "ThumbOptions") -> None:
        self._sample_size = options.sample_size
        self._max_depth = depth_limit(options.max_depth)
        # ids of containers on the current descent path
        self._active: set[int] = set()

    def infer(self, value: object, depth: int) -> "Shape":
        if value is None:
            return _NULL
        if isinstance(value, bool):
            return _BOOLEAN
        if isinstance(value, (int, float, Decimal)):
            return _NUMBER
        if isinstance(value, str):
            return _STRING
        if isinstance(value, (list, tuple)):
            return self._guarded(value, depth)
        if isinstance(value, Mapping):
            return self._guarded(value, depth)
        # Anything with no JSON equivalent is described as an opaque string
        return _STRING

    def _guarded(self, container: object, depth: int) -> "Shape":
        marker = id(container)
        if marker in self._active:
            logger.debug(
                "reference cycle at depth %d through %s, collapsing",
                depth,
                type(container).__name__,
            )
            if isinstance(container, Mapping):
                return ObjectShape({}, collapsed=True)
            length = len(cast("Sequence[object]", container))
            return ArrayShape(length=length, children=NULL_PLACEHOLDER, collapsed=True)
        self._active.add(marker)
        try:
            if isinstance(container, Mapping):
                return self._infer_object(container, depth)
            return self._infer_array(cast("Sequence[object]", container), depth)
        finally:
            self._active.discard(marker)

    def _infer_array(self, items: "Sequence[object]", depth: int) -> ArrayShape:
        length = len(items)
        # Empty, or at the depth limit: record the length only
        if length == 0 or depth >= self._max_depth:
            return ArrayShape(length=length, children=NULL_PLACEHOLDER)

        shapes = (
            self.infer(items[i], depth + 1)
            for i in sample_indices(length, self._sample_size)
        )
        return ArrayShape(length=length, children=reduce(merge_shapes, shapes))

    def _infer_object(
        self, mapping: "Mapping[object, object]", depth: int
    ) -> ObjectShape:
        # An empty mapping and a collapsed one look the same here; the
        # renderer tells them apart by depth.
        if len(mapping) == 0 or depth >= self._max_depth:
            return ObjectShape({})
        keys: dict[str, FieldShape] = {}
        for key, value in mapping.items():
            name = str(key)
            if name in keys:
                # First key wins, e.g. 1 and "1"
                logger.debug("key %r renders as existing key %r, skipping", key, name)
                continue
            keys[name] = FieldShape(self.infer(value, depth + 1), optional=False)
        return ObjectShape(keys)


def infer_shape(
    value: object,
    options: "ThumbOptions | None" = None,
    *,
    sample_size: "int | None" = None,
    max_depth: "int | None" = None,
) -> "Shape":
    """Infer the structural shape of a JSON-like value.

    Lists and tuples are arrays, mappings are objects, and None, bool,
    int, float, Decimal and str are scalars. Any other value is described
    as a string. A list or mapping that contains itself collapses where it
    repeats. Never raises for any value.

    Args:
        value: The value to describe.
        options: Base options. Defaults to ThumbOptions().
        sample_size: Maximum number of elements inspected per array.
            Overrides options.sample_size.
        max_depth: Depth at which nested objects and arrays stop being
            inspected. Overrides options.max_depth. Capped to what the
            recursion limit allows.

    Returns:
        The shape tree for value.

    Raises:
        InvalidOptionsError: If an option is not an integer.
    """
    resolved = resolve_options(options, sample_size=sample_size, max_depth=max_depth)
    return _ShapeInferrer(resolved).infer(value, 0)
