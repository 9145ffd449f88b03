"""Parser: token cursor, grammar routines and the `parse` entrypoint."""

from shroudingers.parser.grammar import (
    is_value_array,
    parse_document,
    parse_operator,
    parse_properties,
    parse_property,
    parse_value_array,
)
from shroudingers.parser.options import ParseMode, ParserOptions
from shroudingers.parser.parse import parse
from shroudingers.parser.parser import ParseError, Parser
from shroudingers.parser.result import ParseResult

__all__ = [
    "ParseError",
    "ParseMode",
    "ParseResult",
    "Parser",
    "ParserOptions",
    "is_value_array",
    "parse",
    "parse_document",
    "parse_operator",
    "parse_properties",
    "parse_property",
    "parse_value_array",
]
