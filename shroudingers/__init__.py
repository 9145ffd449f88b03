"""Tokenizer, parser, path accessor and stringifier for Clausewitz scripts."""

from shroudingers.ast import Block, Document, Operator, Primitive, Property, Value, ValueArray
from shroudingers.diagnostics import Diagnostic
from shroudingers.document import ClausewitzDocument
from shroudingers.format import StringifyOptions, stringify
from shroudingers.lexer import LexResult, Token, TokenKind, tokenize, tokenize_without_comments
from shroudingers.parser import ParseMode, ParseResult, ParserOptions, parse

__version__ = "1.0.0"


def get_version() -> str:
    return __version__


__all__ = [
    "Block",
    "ClausewitzDocument",
    "Diagnostic",
    "Document",
    "LexResult",
    "Operator",
    "ParseMode",
    "ParseResult",
    "ParserOptions",
    "Primitive",
    "Property",
    "StringifyOptions",
    "Token",
    "TokenKind",
    "Value",
    "ValueArray",
    "__version__",
    "get_version",
    "parse",
    "stringify",
    "tokenize",
    "tokenize_without_comments",
]
