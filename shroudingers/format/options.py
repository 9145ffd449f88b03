"""Formatting options for the stringifier."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class StringifyOptions:
    indent: str = "\t"
    spaces: int | None = None  # overrides `indent` when set
    space_between_top_level: bool = False

    # Blocks with at most this many properties, all primitive, render inline.
    inline_block_max_properties: int = 3

    def __post_init__(self):
        if self.spaces is not None and self.spaces < 0:
            raise ValueError("spaces cannot be negative")

    @property
    def indent_unit(self) -> str:
        if self.spaces is not None:
            return " " * self.spaces
        return self.indent


__all__ = ["StringifyOptions"]
