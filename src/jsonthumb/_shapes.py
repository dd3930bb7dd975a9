"""Shape data model.

A shape is the structural description of one position in a JSON-like
value. It is a closed union of four frozen dataclasses: ScalarShape,
ArrayShape, ObjectShape and VariedShape. Shape trees are never mutated
after construction, so nodes may be shared freely between trees.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TypeAlias, cast

from ._exceptions import InvalidShapeError
from ._types import ScalarType

__all__ = [
    "NULL_PLACEHOLDER",
    "ArrayShape",
    "FieldShape",
    "ObjectShape",
    "ScalarShape",
    "Shape",
    "VariedShape",
    "shapes_equal",
]


@dataclass(frozen=True, slots=True)
class ScalarShape:
    """A leaf shape: string, number, boolean, or null."""

    type: ScalarType


@dataclass(frozen=True, slots=True)
class ArrayShape:
    """Shape of a list, with length information and the merged element shape.

    Attributes:
        length: The element count of the concrete list this shape was
            inferred from, or None when the shape is the result of merging
            several lists and no single length applies.
        children: The merged shape of all sampled elements. For an empty
            list, or a list at the depth limit, this is a placeholder that
            is never rendered. The same holds for a collapsed list.
        min_length: Smallest length seen across merged lists, if any.
        max_length: Largest length seen across merged lists, if any.
        collapsed: True if the elements were withheld because the list
            refers back to itself. Renders as ``Array(N) of ...`` at any
            depth.

    Raises:
        InvalidShapeError: If neither a length nor a full range is given.
    """

    length: "int | None"
    children: "Shape"
    min_length: "int | None" = None
    max_length: "int | None" = None
    collapsed: bool = False

    def __post_init__(self) -> None:
        if self.length is None and (self.min_length is None or self.max_length is None):
            msg = "ArrayShape needs a length or both min_length and max_length"
            raise InvalidShapeError(msg)

    @property
    def has_children(self) -> bool:
        """Whether children describes at least one inspected element."""
        return not (self.is_empty or self.collapsed)

    @property
    def is_empty(self) -> bool:
        """Whether every list folded into this shape was empty."""
        if self.min_length is not None and self.max_length is not None:
            return self.max_length == 0
        return self.length == 0

    def length_range(self) -> tuple[int, int]:
        """Return the (min, max) length pair this shape contributes to a merge."""
        if self.min_length is not None and self.max_length is not None:
            return self.min_length, self.max_length
        # __post_init__ guarantees a length when no range is recorded
        length = cast("int", self.length)
        return length, length


@dataclass(frozen=True, slots=True)
class FieldShape:
    """Shape of one object key, with whether some instance lacked it."""

    shape: "Shape"
    optional: bool = False


@dataclass(frozen=True, slots=True)
class ObjectShape:
    """Shape of a mapping: each key's shape and optionality, in key order.

    A collapsed object has no keys because the mapping refers back to
    itself; it renders as ``{...}`` at any depth.
    """

    keys: Mapping[str, FieldShape] = field(default_factory=dict)
    collapsed: bool = False


@dataclass(frozen=True, slots=True)
class VariedShape:
    """A union of two or more structurally distinct, non-varied shapes."""

    variants: "tuple[Shape, ...]"


Shape: TypeAlias = "ScalarShape | ArrayShape | ObjectShape | VariedShape"
"""Any shape node."""

NULL_PLACEHOLDER = ScalarShape("null")
"""Children placeholder for arrays whose elements were not inspected."""


def shapes_equal(a: Shape, b: Shape) -> bool:
    """Compare two shapes structurally.

    Array lengths and ranges are ignored, as is field optionality. Varied
    shapes compare as unordered collections of variants.

    Args:
        a: The first shape.
        b: The second shape.

    Returns:
        True if the shapes describe the same type structure.
    """
    if isinstance(a, ScalarShape):
        return isinstance(b, ScalarShape) and a.type == b.type
    if isinstance(a, ArrayShape):
        return isinstance(b, ArrayShape) and shapes_equal(a.children, b.children)
    if isinstance(a, ObjectShape):
        if not isinstance(b, ObjectShape):
            return False
        if a.keys.keys() != b.keys.keys():
            return False
        return all(
            shapes_equal(a.keys[key].shape, b.keys[key].shape) for key in a.keys
        )
    if not isinstance(b, VariedShape):
        return False
    if len(a.variants) != len(b.variants):
        return False
    return all(
        any(shapes_equal(av, bv) for bv in b.variants) for av in a.variants
    )
