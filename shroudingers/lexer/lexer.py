"""Lexer."""

from collections.abc import Sequence
import logging

from shroudingers.diagnostics import (
    EMPTY_INPUT,
    LEXER_UNEXPECTED_CHARACTER,
    LEXER_UNTERMINATED_STRING,
    Diagnostic,
    DiagnosticError,
)
from shroudingers.lexer.result import LexResult
from shroudingers.lexer.tokens import Token, TokenKind
from shroudingers.text import TextPosition

logger = logging.getLogger(__name__)

_WHITESPACE = frozenset(" \t\r\n")
_IDENTIFIER_PUNCTUATION = frozenset(":.[]")


class LexError(DiagnosticError):
    """Fatal lexer failure."""


def is_identifier_start(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z") or ch == "_" or ch == "@"


def is_identifier_char(ch: str) -> bool:
    return is_identifier_start(ch) or _is_digit(ch) or ch in _IDENTIFIER_PUNCTUATION


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


class Lexer:
    """Single-pass scanner producing positioned tokens, comments included."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0
        self._line = 1
        self._column = 1

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    @property
    def text_position(self) -> TextPosition:
        return TextPosition(self._line, self._column)

    def lex(self) -> list[Token]:
        """Scan the whole source.

        Raises `LexError` on the first unterminated string or unexpected
        character.
        """
        tokens: list[Token] = []
        while True:
            self._skip_whitespace()
            if self.is_eof:
                break
            tokens.append(self._lex_token())

        tokens.append(Token(TokenKind.EOF, "", self._line, self._column))
        return tokens

    def _lex_token(self) -> Token:
        line, column = self._line, self._column
        ch = self._current_char()

        if ch == "#":
            return Token(TokenKind.COMMENT, self._lex_comment(), line, column)

        if ch == '"':
            return Token(TokenKind.STRING, self._lex_string(), line, column)

        if _is_digit(ch) or (ch == "-" and _is_digit(self._peek_char())):
            return Token(TokenKind.NUMBER, self._lex_number(), line, column)

        # Two-character operators
        if ch == "<" and self._peek_char() == "=":
            self._advance(2)
            return Token(TokenKind.LESS_THAN_OR_EQUAL, "<=", line, column)
        if ch == "<" and self._peek_char() == ">":
            self._advance(2)
            return Token(TokenKind.NOT_EQUAL, "<>", line, column)
        if ch == ">" and self._peek_char() == "=":
            self._advance(2)
            return Token(TokenKind.GREATER_THAN_OR_EQUAL, ">=", line, column)
        if ch == "!" and self._peek_char() == "=":
            self._advance(2)
            return Token(TokenKind.NOT_EQUAL, "!=", line, column)

        # Single-character operators
        if ch == "=":
            self._advance(1)
            return Token(TokenKind.EQUAL, "=", line, column)
        if ch == "<":
            self._advance(1)
            return Token(TokenKind.LESS_THAN, "<", line, column)
        if ch == ">":
            self._advance(1)
            return Token(TokenKind.GREATER_THAN, ">", line, column)
        if ch == "{":
            self._advance(1)
            return Token(TokenKind.LBRACE, "{", line, column)
        if ch == "}":
            self._advance(1)
            return Token(TokenKind.RBRACE, "}", line, column)

        if is_identifier_start(ch):
            text = self._lex_identifier()
            kind = TokenKind.BOOLEAN if text in ("yes", "no") else TokenKind.IDENTIFIER
            return Token(kind, text, line, column)

        raise LexError(
            Diagnostic.from_spec(
                LEXER_UNEXPECTED_CHARACTER,
                TextPosition(line, column),
                char=ch,
            )
        )

    def _lex_comment(self) -> str:
        # Consume until end of line, do not consume the newline itself.
        self._advance(1)
        start = self._position
        while not self.is_eof and self._current_char() != "\n":
            self._advance(1)
        return self._source[start : self._position].strip()

    def _lex_string(self) -> str:
        start = self.text_position
        self._advance(1)
        chars: list[str] = []

        while not self.is_eof:
            ch = self._current_char()
            if ch == '"':
                self._advance(1)
                return "".join(chars)
            if ch == "\\" and self._peek_char() == '"':
                self._advance(2)
                chars.append('"')
                continue
            chars.append(ch)
            self._advance(1)

        raise LexError(Diagnostic.from_spec(LEXER_UNTERMINATED_STRING, start))

    def _lex_number(self) -> str:
        start = self._position
        if self._current_char() == "-":
            self._advance(1)
        while _is_digit(self._current_char()):
            self._advance(1)
        if self._current_char() == "." and _is_digit(self._peek_char()):
            self._advance(1)
            while _is_digit(self._current_char()):
                self._advance(1)
        return self._source[start : self._position]

    def _lex_identifier(self) -> str:
        start = self._position
        while not self.is_eof and is_identifier_char(self._current_char()):
            self._advance(1)
        return self._source[start : self._position]

    def _skip_whitespace(self) -> None:
        while not self.is_eof and self._current_char() in _WHITESPACE:
            self._advance(1)

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._source):
            return "\0"
        return self._source[index]

    def _advance(self, steps: int) -> None:
        for _ in range(steps):
            if self._source[self._position] == "\n":
                self._line += 1
                self._column = 1
            else:
                self._column += 1
            self._position += 1


def is_blank(text: str | None) -> bool:
    return not text or not text.strip()


def tokenize(text: str) -> LexResult:
    """Tokenize Clausewitz script text, comments included."""
    if is_blank(text):
        return LexResult(diagnostic=Diagnostic.from_spec(EMPTY_INPUT))

    lexer = Lexer(text)
    try:
        tokens = lexer.lex()
    except LexError as err:
        logger.debug("Tokenize failed: %s %s", err.diagnostic.code, err.diagnostic.message)
        return LexResult(diagnostic=err.diagnostic)

    logger.debug("Tokenized %d characters into %d tokens", len(text), len(tokens))
    return LexResult(tokens=tuple(tokens))


def tokenize_without_comments(text: str) -> LexResult:
    """Tokenize and drop COMMENT tokens."""
    result = tokenize(text)
    if not result.success:
        return result
    return LexResult(tokens=strip_comments(result.tokens))


def strip_comments(tokens: Sequence[Token]) -> tuple[Token, ...]:
    return tuple(token for token in tokens if token.kind != TokenKind.COMMENT)


def dump_tokens(tokens: Sequence[Token], diagnostic: Diagnostic | None = None) -> None:
    """Print token list with kind, position, and text for debugging."""
    for i, tok in enumerate(tokens):
        print(f"{i:03d} {tok.kind.name:<22} pos=({tok.line},{tok.column}) text={tok.text!r}")

    if diagnostic is not None:
        print("\nDiagnostic:")
        print(f"- {diagnostic.severity.upper()} {diagnostic.code} message={diagnostic.message}")
