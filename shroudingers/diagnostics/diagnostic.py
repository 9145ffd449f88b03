"""Diagnostics core types."""

from dataclasses import dataclass

from shroudingers.diagnostics.codes import DiagnosticSpec, Severity
from shroudingers.text import TextPosition


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the lexer and parser."""

    code: str
    message: str
    position: TextPosition | None = None
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    @staticmethod
    def from_spec(
        spec: DiagnosticSpec,
        position: TextPosition | None = None,
        **fields: object,
    ) -> "Diagnostic":
        """Build a diagnostic from a spec, filling `{placeholders}` in its message."""
        return Diagnostic(
            code=spec.code,
            message=spec.message.format(position=position, **fields),
            position=position,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
        )

    @property
    def line(self) -> int | None:
        return self.position.line if self.position is not None else None

    @property
    def column(self) -> int | None:
        return self.position.column if self.position is not None else None


class DiagnosticError(Exception):
    """Unwinds a lexer or parser run; caught at the public entrypoints."""

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic
