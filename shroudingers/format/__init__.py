"""Stringifier."""

from shroudingers.format.options import StringifyOptions
from shroudingers.format.stringify import stringify, stringify_primitive, stringify_value

__all__ = [
    "StringifyOptions",
    "stringify",
    "stringify_primitive",
    "stringify_value",
]
