"""Parse result carrier."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shroudingers.ast import Document
    from shroudingers.diagnostics import Diagnostic
    from shroudingers.document import ClausewitzDocument


@dataclass(slots=True)
class ParseResult:
    """Either a Document or the diagnostic that aborted the parse."""

    document: Document | None = None
    diagnostic: Diagnostic | None = None
    _clausewitz_document: ClausewitzDocument | None = field(default=None, init=False, repr=False)

    @property
    def success(self) -> bool:
        return self.diagnostic is None and self.document is not None

    @property
    def error(self) -> str | None:
        return self.diagnostic.message if self.diagnostic is not None else None

    @property
    def error_line(self) -> int | None:
        return self.diagnostic.line if self.diagnostic is not None else None

    @property
    def error_column(self) -> int | None:
        return self.diagnostic.column if self.diagnostic is not None else None

    def clausewitz_document(self) -> ClausewitzDocument | None:
        """Path-accessor wrapper over the parsed tree, or None on failure."""
        if self.document is None:
            return None
        if self._clausewitz_document is None:
            from shroudingers.document import ClausewitzDocument

            self._clausewitz_document = ClausewitzDocument(self.document)
        return self._clausewitz_document
