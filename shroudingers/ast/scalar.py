"""Literal-to-primitive conversion shared by the parser and its consumers."""

from __future__ import annotations

from decimal import Decimal
import math

from shroudingers.lexer import Token, TokenKind


def parse_number(text: str) -> int | float:
    """Convert NUMBER token text, collapsing integral values to `int`.

    The collapse looks at the value, not the spelling: `2.0` becomes `2`.
    Integer literals longer than the interpreter's int/str digit limit are
    converted through `Decimal`, which that limit does not cover.
    """
    if "." not in text:
        try:
            return int(text)
        except ValueError:
            return int(Decimal(text))

    number = float(text)
    if number.is_integer():
        return int(number)
    return number


def parse_bool(text: str) -> bool:
    return text == "yes"


def primitive_from_token(token: Token) -> str | int | float | bool:
    """Convert a scalar token to its primitive value.

    Raises `ValueError` for non-scalar tokens.
    """
    match token.kind:
        case TokenKind.NUMBER:
            return parse_number(token.text)
        case TokenKind.BOOLEAN:
            return parse_bool(token.text)
        case TokenKind.STRING | TokenKind.IDENTIFIER:
            return token.text
        case _:
            raise ValueError(f"Not a scalar token kind: {token.kind!r}")


def format_number(value: int | float) -> str:
    """Render a number as plain decimal text, never in exponent notation.

    Integral values print without a decimal point. Other floats keep the
    shortest digits that read back to the same value.
    """
    if isinstance(value, float):
        if not math.isfinite(value):
            return str(value)
        if not value.is_integer():
            return format(Decimal(repr(value)), "f")
        value = int(value)

    try:
        return str(value)
    except ValueError:
        # past the int/str digit limit
        return format(Decimal(value), "f")


def format_bool(value: bool) -> str:
    return "yes" if value else "no"


__all__ = [
    "format_bool",
    "format_number",
    "parse_bool",
    "parse_number",
    "primitive_from_token",
]
