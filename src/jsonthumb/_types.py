"""Type aliases for jsonthumb.

This module contains ONLY TypeAlias definitions for JSON values and scalar
type names. It has no dependencies on other jsonthumb modules so that
_shapes.py, _infer.py and _render.py can all import from it freely.
"""

from typing import Literal, TypeAlias

# JSON type definitions per RFC 8259
# Using string annotations for forward references to avoid runtime | issues
JSONPrimitive: TypeAlias = "str | int | float | bool | None"
"""A JSON primitive value: string, number, boolean, or null."""

JSONArray: TypeAlias = "list[JSONValue]"
"""A JSON array containing any JSON values."""

JSONObject: TypeAlias = "dict[str, JSONValue]"
"""A JSON object mapping string keys to JSON values."""

JSONValue: TypeAlias = "JSONPrimitive | JSONArray | JSONObject"
"""Any JSON value: primitive, array, or object."""

ScalarType: TypeAlias = Literal["string", "number", "boolean", "null"]
"""The name of a scalar type as it appears in a thumbnail."""
