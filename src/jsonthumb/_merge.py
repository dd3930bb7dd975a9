"""Shape merging.

merge_shapes() takes two shapes describing two observations of the same
position in the data and returns the most specific shape consistent with
both. It is used to fold the shapes of sampled array elements into one.

Merging never mutates its inputs: every merged node is newly allocated,
and unchanged subtrees are shared by reference.
"""

from ._shapes import (
    ArrayShape,
    FieldShape,
    ObjectShape,
    ScalarShape,
    Shape,
    VariedShape,
    shapes_equal,
)

__all__ = ["merge_array_shapes", "merge_object_shapes", "merge_shapes"]


def merge_shapes(a: Shape, b: Shape) -> Shape:
    """Merge two shapes into one that describes both.

    - Same scalar type: kept as-is.
    - Different scalar types, or different kinds: a varied shape of both.
    - Two objects: key union; keys missing from one side become optional.
    - Two arrays: children merged, length ranges combined.
    - Either side varied: variants flattened and deduplicated.

    Args:
        a: Shape of the first observation.
        b: Shape of the second observation.

    Returns:
        The merged shape.
    """
    if isinstance(a, VariedShape) or isinstance(b, VariedShape):
        return _merge_with_varied(a, b)
    if isinstance(a, ScalarShape) and isinstance(b, ScalarShape):
        if a.type == b.type:
            return a
        return VariedShape((a, b))
    if isinstance(a, ObjectShape) and isinstance(b, ObjectShape):
        return merge_object_shapes(a, b)
    if isinstance(a, ArrayShape) and isinstance(b, ArrayShape):
        return merge_array_shapes(a, b)
    return VariedShape((a, b))


def merge_object_shapes(a: ObjectShape, b: ObjectShape) -> ObjectShape:
    """Merge two object shapes key by key.

    A key present on both sides has its shapes merged and stays required
    unless it was optional on both sides. A key present on one side only
    becomes optional.

    Args:
        a: The first object shape.
        b: The second object shape.

    Returns:
        An object shape with the union of both key sets, ``a``'s keys first.
    """
    keys: dict[str, FieldShape] = {}
    for key, field_a in a.keys.items():
        field_b = b.keys.get(key)
        if field_b is None:
            keys[key] = FieldShape(field_a.shape, optional=True)
        else:
            keys[key] = FieldShape(
                merge_shapes(field_a.shape, field_b.shape),
                optional=field_a.optional and field_b.optional,
            )
    for key, field_b in b.keys.items():
        if key not in keys:
            keys[key] = FieldShape(field_b.shape, optional=True)
    return ObjectShape(keys, collapsed=not keys and (a.collapsed or b.collapsed))


def merge_array_shapes(a: ArrayShape, b: ArrayShape) -> ArrayShape:
    """Merge two array shapes.

    The result no longer describes a single concrete list, so its length is
    None and the observed range of lengths is recorded instead. An empty
    list, a merge of empty lists only, or a collapsed list contributes its
    lengths to the range but nothing to the children. The result is
    collapsed only if neither side has children and one side is collapsed.

    Args:
        a: The first array shape.
        b: The second array shape.

    Returns:
        The merged array shape.
    """
    a_min, a_max = a.length_range()
    b_min, b_max = b.length_range()

    collapsed = False
    if a.has_children and b.has_children:
        children = merge_shapes(a.children, b.children)
    elif b.has_children:
        children = b.children
    else:
        children = a.children
        collapsed = not a.has_children and (a.collapsed or b.collapsed)

    return ArrayShape(
        length=None,
        children=children,
        min_length=min(a_min, b_min),
        max_length=max(a_max, b_max),
        collapsed=collapsed,
    )


def _merge_with_varied(a: Shape, b: Shape) -> Shape:
    variants: list[Shape] = []
    for candidate in (*_variants_of(a), *_variants_of(b)):
        _add_variant(variants, candidate)
    if len(variants) == 1:
        return variants[0]
    return VariedShape(tuple(variants))


def _variants_of(shape: Shape) -> "tuple[Shape, ...]":
    if isinstance(shape, VariedShape):
        return shape.variants
    return (shape,)


def _add_variant(variants: list[Shape], candidate: Shape) -> None:
    """Fold candidate into a working list of variants, in place.

    The list is local to one merge and never escapes as a shared node.
    """
    for index, existing in enumerate(variants):
        if isinstance(existing, ScalarShape) and shapes_equal(existing, candidate):
            return
        if isinstance(existing, ObjectShape) and isinstance(candidate, ObjectShape):
            variants[index] = merge_object_shapes(existing, candidate)
            return
        if isinstance(existing, ArrayShape) and isinstance(candidate, ArrayShape):
            variants[index] = merge_array_shapes(existing, candidate)
            return
    variants.append(candidate)
