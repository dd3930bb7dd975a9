"""Compact, type-aware thumbnails of JSON data."""

import logging
from importlib.metadata import version

from ._exceptions import InvalidOptionsError, InvalidShapeError, JSONThumbError
from ._infer import infer_shape
from ._merge import merge_shapes
from ._options import ThumbOptions
from ._render import render
from ._shapes import (
    ArrayShape,
    FieldShape,
    ObjectShape,
    ScalarShape,
    Shape,
    VariedShape,
    shapes_equal,
)
from ._thumb import thumb

__version__ = version("jsonthumb")

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ArrayShape",
    "FieldShape",
    "InvalidOptionsError",
    "InvalidShapeError",
    "JSONThumbError",
    "ObjectShape",
    "ScalarShape",
    "Shape",
    "ThumbOptions",
    "VariedShape",
    "__version__",
    "infer_shape",
    "merge_shapes",
    "render",
    "shapes_equal",
    "thumb",
]
