"""Token cursor used by the grammar routines."""

from collections.abc import Sequence
import logging

from shroudingers.diagnostics import (
    PARSER_NESTING_TOO_DEEP,
    Diagnostic,
    DiagnosticError,
    DiagnosticSpec,
)
from shroudingers.lexer import Token, TokenKind, strip_comments
from shroudingers.parser.options import ParserOptions
from shroudingers.parser.result import ParseResult

logger = logging.getLogger(__name__)


class ParseError(DiagnosticError):
    """Fatal parser failure."""


class Parser:
    """Single-cursor parser over a comment-free token stream.

    Lookahead is limited to `nth(1)`; the cursor never moves past EOF.
    """

    def __init__(self, tokens: Sequence[Token], options: ParserOptions | None = None) -> None:
        self._tokens = strip_comments(tokens)
        if not self._tokens or self._tokens[-1].kind != TokenKind.EOF:
            raise ValueError("Token stream must end with an EOF token")
        self._options = options or ParserOptions()
        self._position = 0
        self._depth = 0

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def current(self) -> Token:
        return self._tokens[self._position]

    @property
    def current_kind(self) -> TokenKind:
        return self.current.kind

    @property
    def at_end(self) -> bool:
        return self.current_kind == TokenKind.EOF

    def at(self, kind: TokenKind) -> bool:
        return not self.at_end and self.current_kind == kind

    def nth(self, n: int) -> TokenKind:
        index = self._position + n
        if index >= len(self._tokens):
            return TokenKind.EOF
        return self._tokens[index].kind

    def bump(self) -> Token:
        """Consume and return the current token. At EOF, returns EOF without moving."""
        token = self.current
        if not self.at_end:
            self._position += 1
        return token

    def eat(self, kind: TokenKind) -> bool:
        if self.at(kind):
            self.bump()
            return True
        return False

    def enter_block(self, brace: Token) -> None:
        max_depth = self._options.max_depth
        if max_depth is not None and self._depth >= max_depth:
            raise ParseError(
                Diagnostic.from_spec(
                    PARSER_NESTING_TOO_DEEP,
                    brace.position,
                    max_depth=max_depth,
                )
            )
        self._depth += 1

    def exit_block(self) -> None:
        self._depth -= 1

    def error(self, spec: DiagnosticSpec, **fields: object) -> ParseError:
        """Build a ParseError positioned at the current token."""
        return ParseError(Diagnostic.from_spec(spec, self.current.position, **fields))

    def parse(self) -> ParseResult:
        from shroudingers.parser.grammar import parse_document

        try:
            document = parse_document(self)
        except ParseError as err:
            logger.debug("Parse failed: %s %s", err.diagnostic.code, err.diagnostic.message)
            return ParseResult(diagnostic=err.diagnostic)

        return ParseResult(document=document)
