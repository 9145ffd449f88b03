"""Tokenizer result carrier."""

from dataclasses import dataclass

from shroudingers.diagnostics import Diagnostic
from shroudingers.lexer.tokens import Token


@dataclass(frozen=True, slots=True)
class LexResult:
    """Either the full token stream or the diagnostic that stopped the lexer."""

    tokens: tuple[Token, ...] = ()
    diagnostic: Diagnostic | None = None

    @property
    def success(self) -> bool:
        return self.diagnostic is None

    @property
    def error(self) -> str | None:
        return self.diagnostic.message if self.diagnostic is not None else None

    @property
    def error_line(self) -> int | None:
        return self.diagnostic.line if self.diagnostic is not None else None

    @property
    def error_column(self) -> int | None:
        return self.diagnostic.column if self.diagnostic is not None else None
