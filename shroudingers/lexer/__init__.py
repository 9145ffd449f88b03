"""Lexer."""

from shroudingers.lexer.lexer import (
    Lexer,
    LexError,
    dump_tokens,
    is_identifier_char,
    is_identifier_start,
    strip_comments,
    tokenize,
    tokenize_without_comments,
)
from shroudingers.lexer.result import LexResult
from shroudingers.lexer.tokens import Token, TokenKind

__all__ = [
    "LexError",
    "LexResult",
    "Lexer",
    "Token",
    "TokenKind",
    "dump_tokens",
    "is_identifier_char",
    "is_identifier_start",
    "strip_comments",
    "tokenize",
    "tokenize_without_comments",
]
