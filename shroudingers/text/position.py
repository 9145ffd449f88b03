from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class TextPosition:
    """1-based line/column location in source text.

    Invariant:
    - 1 <= line, 1 <= column
    """

    line: int
    column: int

    def __post_init__(self):
        if self.line < 1 or self.column < 1:
            raise ValueError("TextPosition line and column are 1-based")

    def __str__(self) -> str:
        return f"line {self.line}, column {self.column}"

    def __repr__(self) -> str:
        return f"TextPosition({self.line}, {self.column})"
