"""Rendering of shape trees into thumbnail notation.

The notation, by example::

    null
    number | string
    Array(0)
    Array(3) of ...
    Array(2-5) of {id: number, tags?: Array(1-3) of string}
    {
      id: number,
      user: {name: string, email: string | null},
      posts: Array(12) of {...},
      deleted?: boolean
    }

Objects with at most three keys whose values are all inline render on one
line; everything else breaks across lines with a two-space indent per
level.
"""

from ._constants import (
    COLLAPSED_CHILDREN,
    COLLAPSED_OBJECT,
    DEFAULT_MAX_DEPTH,
    EMPTY_OBJECT,
    INDENT_WIDTH,
    INLINE_FIELD_SEPARATOR,
    MAX_INLINE_KEYS,
    MULTILINE_FIELD_SEPARATOR,
    OPTIONAL_MARKER,
    VARIANT_SEPARATOR,
)
from ._options import depth_limit
from ._shapes import (
    ArrayShape,
    FieldShape,
    ObjectShape,
    ScalarShape,
    Shape,
    VariedShape,
)

__all__ = ["format_array_length", "is_inline", "render"]


def render(shape: Shape, max_depth: int = DEFAULT_MAX_DEPTH) -> str:
    """Render a shape tree as a compact thumbnail string.

    Args:
        shape: The shape to render, usually from infer_shape().
        max_depth: Depth at which objects render as ``{...}`` and array
            children as ``...``. Use the same value given to infer_shape().
            Values deeper than the recursion limit allows are capped.

    Returns:
        The thumbnail.
    """
    return _render_shape(shape, 0, depth_limit(max_depth), 0)


def is_inline(shape: Shape) -> bool:
    """Whether a shape can be rendered on a single line."""
    if isinstance(shape, ScalarShape):
        return True
    if isinstance(shape, VariedShape):
        return all(is_inline(variant) for variant in shape.variants)
    if isinstance(shape, ArrayShape):
        return shape.is_empty or is_inline(shape.children)
    return _is_compact_object(shape)


def _is_compact_object(shape: ObjectShape) -> bool:
    if len(shape.keys) > MAX_INLINE_KEYS:
        return False
    return all(is_inline(field.shape) for field in shape.keys.values())


def format_array_length(shape: ArrayShape) -> str:
    """Format the length part of an array descriptor: ``502``, ``3`` or ``2-5``."""
    if shape.min_length is not None and shape.max_length is not None:
        if shape.min_length == shape.max_length:
            return str(shape.min_length)
        return f"{shape.min_length}-{shape.max_length}"
    return str(shape.length)


def _render_shape(shape: Shape, indent: int, max_depth: int, depth: int) -> str:
    if isinstance(shape, ScalarShape):
        return shape.type
    if isinstance(shape, VariedShape):
        return VARIANT_SEPARATOR.join(
            _render_shape(variant, indent, max_depth, depth)
            for variant in shape.variants
        )
    if isinstance(shape, ArrayShape):
        return _render_array(shape, indent, max_depth, depth)
    return _render_object(shape, indent, max_depth, depth)


def _render_array(shape: ArrayShape, indent: int, max_depth: int, depth: int) -> str:
    if shape.is_empty:
        return "Array(0)"
    length = format_array_length(shape)
    if shape.collapsed or depth >= max_depth:
        return f"Array({length}) of {COLLAPSED_CHILDREN}"
    children = _render_shape(shape.children, indent, max_depth, depth + 1)
    return f"Array({length}) of {children}"


def _render_field(
    key: str, field: FieldShape, indent: int, max_depth: int, depth: int
) -> str:
    marker = OPTIONAL_MARKER if field.optional else ""
    value = _render_shape(field.shape, indent, max_depth, depth + 1)
    return f"{key}{marker}: {value}"


def _render_object(
    shape: ObjectShape, indent: int, max_depth: int, depth: int
) -> str:
    if not shape.keys:
        # Collapsed by a cycle or the depth limit, or genuinely empty
        if shape.collapsed or depth >= max_depth:
            return COLLAPSED_OBJECT
        return EMPTY_OBJECT

    if _is_compact_object(shape):
        fields = (
            _render_field(key, field, indent, max_depth, depth)
            for key, field in shape.keys.items()
        )
        return "{" + INLINE_FIELD_SEPARATOR.join(fields) + "}"

    inner = indent + INDENT_WIDTH
    pad = " " * inner
    lines = (
        pad + _render_field(key, field, inner, max_depth, depth)
        for key, field in shape.keys.items()
    )
    return "{\n" + MULTILINE_FIELD_SEPARATOR.join(lines) + "\n" + " " * indent + "}"
