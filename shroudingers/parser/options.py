"""Parser modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum


class ParseMode(StrEnum):
    """Top-level parser behavior profile."""

    LENIENT = "lenient"
    STRICT = "strict"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Flags controlling recovery and resource limits."""

    mode: ParseMode = ParseMode.LENIENT
    skip_stray_tokens: bool = True
    max_depth: int | None = None

    def __post_init__(self):
        if self.max_depth is not None and self.max_depth < 1:
            raise ValueError("max_depth must be a positive integer or None")

    @staticmethod
    def for_mode(mode: ParseMode, *, max_depth: int | None = None) -> "ParserOptions":
        if mode == ParseMode.STRICT:
            return ParserOptions(mode=mode, skip_stray_tokens=False, max_depth=max_depth)

        return ParserOptions(mode=mode, skip_stray_tokens=True, max_depth=max_depth)
