"""Diagnostics."""

from shroudingers.diagnostics.codes import (
    EMPTY_INPUT,
    LEXER_UNEXPECTED_CHARACTER,
    LEXER_UNTERMINATED_STRING,
    PARSER_EXPECTED_OPERATOR,
    PARSER_EXPECTED_RBRACE,
    PARSER_NESTING_TOO_DEEP,
    PARSER_UNEXPECTED_TOKEN,
    DiagnosticSpec,
)
from shroudingers.diagnostics.diagnostic import Diagnostic, DiagnosticError, Severity

__all__ = [
    "EMPTY_INPUT",
    "LEXER_UNEXPECTED_CHARACTER",
    "LEXER_UNTERMINATED_STRING",
    "PARSER_EXPECTED_OPERATOR",
    "PARSER_EXPECTED_RBRACE",
    "PARSER_NESTING_TOO_DEEP",
    "PARSER_UNEXPECTED_TOKEN",
    "Diagnostic",
    "DiagnosticError",
    "DiagnosticSpec",
    "Severity",
]
