"""AST model for Clausewitz script."""

from shroudingers.ast.model import (
    Block,
    Container,
    Document,
    Operator,
    Primitive,
    Property,
    Value,
    ValueArray,
    is_primitive,
)
from shroudingers.ast.scalar import (
    format_bool,
    format_number,
    parse_bool,
    parse_number,
    primitive_from_token,
)

__all__ = [
    "Block",
    "Container",
    "Document",
    "Operator",
    "Primitive",
    "Property",
    "Value",
    "ValueArray",
    "format_bool",
    "format_number",
    "is_primitive",
    "parse_bool",
    "parse_number",
    "primitive_from_token",
]
