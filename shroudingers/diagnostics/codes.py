"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


EMPTY_INPUT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="EMPTY_INPUT",
    message="Input cannot be empty",
    severity="error",
    category="input",
)

LEXER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_STRING",
    message="Unterminated string starting at {position}",
    hint="Close the string with a double quote.",
    severity="error",
    category="lexer",
)

LEXER_UNEXPECTED_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNEXPECTED_CHARACTER",
    message="Unexpected character '{char}' at {position}",
    hint="Quote the value if it contains characters outside identifiers and numbers.",
    severity="error",
    category="lexer",
)

PARSER_EXPECTED_OPERATOR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_OPERATOR",
    message="Expected operator after '{key}' at {key_position}",
    hint="Use one of = < > <= >= != <> between a key and its value.",
    severity="error",
    category="parser",
)

PARSER_EXPECTED_RBRACE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_RBRACE",
    message="Expected '}}' at {position}",
    severity="error",
    category="parser",
)

PARSER_UNEXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_TOKEN",
    message="Unexpected token '{text}' at {position}",
    severity="error",
    category="parser",
)

PARSER_NESTING_TOO_DEEP: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_NESTING_TOO_DEEP",
    message="Nesting deeper than {max_depth} levels at {position}",
    hint="Raise ParserOptions.max_depth or pass max_depth=None for trusted input.",
    severity="error",
    category="parser",
)
