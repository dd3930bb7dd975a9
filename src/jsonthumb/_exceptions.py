"""Exception hierarchy for jsonthumb.

Inference and rendering are total, so the only errors the library raises
come from constructing options or shapes with invalid values.
"""

__all__ = ["InvalidOptionsError", "InvalidShapeError", "JSONThumbError"]


class JSONThumbError(Exception):
    """Base class for all jsonthumb errors."""


class InvalidOptionsError(JSONThumbError, TypeError):
    """An option was given a value of the wrong type.

    Out-of-range integers are clamped rather than rejected; this error is
    reserved for values that are not integers at all.
    """


class InvalidShapeError(JSONThumbError, ValueError):
    """A shape was constructed with inconsistent fields."""
