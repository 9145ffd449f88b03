"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum

from shroudingers.text import TextPosition


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 1
    COMMENT = 2

    # -------------------------
    # Identifiers / literals
    # -------------------------
    IDENTIFIER = 10
    STRING = 11  # quoted string, quotes stripped
    NUMBER = 12
    BOOLEAN = 13  # yes / no

    # -------------------------
    # Operators (multi-char included)
    # -------------------------
    EQUAL = 20  # =
    LESS_THAN = 21  # <
    GREATER_THAN = 22  # >
    LESS_THAN_OR_EQUAL = 23  # <=
    GREATER_THAN_OR_EQUAL = 24  # >=
    NOT_EQUAL = 25  # != or <>

    # -------------------------
    # Punctuation
    # -------------------------
    LBRACE = 30  # {
    RBRACE = 31  # }

    @property
    def is_operator(self) -> bool:
        return self in (
            TokenKind.EQUAL,
            TokenKind.LESS_THAN,
            TokenKind.GREATER_THAN,
            TokenKind.LESS_THAN_OR_EQUAL,
            TokenKind.GREATER_THAN_OR_EQUAL,
            TokenKind.NOT_EQUAL,
        )

    @property
    def is_scalar(self) -> bool:
        return self in (
            TokenKind.IDENTIFIER,
            TokenKind.STRING,
            TokenKind.NUMBER,
            TokenKind.BOOLEAN,
        )


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token.

    `text` is the literal text: unquoted and unescaped for strings, trimmed
    for comments, verbatim otherwise. EOF carries an empty text.
    """

    kind: TokenKind
    text: str
    line: int
    column: int

    @property
    def position(self) -> TextPosition:
        return TextPosition(self.line, self.column)
