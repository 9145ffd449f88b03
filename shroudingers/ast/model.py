"""AST data model for Clausewitz script."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TypeAlias


class Operator(StrEnum):
    """Property operator, stored with the spelling it was written in."""

    EQUAL = "="
    LESS_THAN = "<"
    GREATER_THAN = ">"
    LESS_THAN_OR_EQUAL = "<="
    GREATER_THAN_OR_EQUAL = ">="
    NOT_EQUAL = "!="
    NOT_EQUAL_ALT = "<>"

    @property
    def is_not_equal(self) -> bool:
        return self in (Operator.NOT_EQUAL, Operator.NOT_EQUAL_ALT)


@dataclass(slots=True)
class Block:
    """Braced sequence of properties. Order is preserved and keys may repeat."""

    properties: list[Property] = field(default_factory=list)
    line: int | None = field(default=None, compare=False)
    column: int | None = field(default=None, compare=False)

    def __len__(self) -> int:
        return len(self.properties)

    @property
    def is_primitive_only(self) -> bool:
        return all(is_primitive(prop.value) for prop in self.properties)


@dataclass(slots=True)
class ValueArray:
    """Braced sequence of unlabeled primitives, e.g. `{ 5.5 6 6.5 }`."""

    values: list[Primitive] = field(default_factory=list)
    line: int | None = field(default=None, compare=False)
    column: int | None = field(default=None, compare=False)

    def __len__(self) -> int:
        return len(self.values)


@dataclass(slots=True)
class Property:
    """One `key operator value` triplet."""

    key: str
    operator: Operator
    value: Value
    line: int | None = field(default=None, compare=False)
    column: int | None = field(default=None, compare=False)


@dataclass(slots=True)
class Document:
    """Root of a parsed script: a Block without braces."""

    properties: list[Property] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.properties)


Primitive: TypeAlias = "str | int | float | bool"
Value: TypeAlias = "Primitive | Block | ValueArray"
Container: TypeAlias = "Document | Block"


def is_primitive(value: object) -> bool:
    return isinstance(value, (str, int, float))


__all__ = [
    "Block",
    "Container",
    "Document",
    "Operator",
    "Primitive",
    "Property",
    "Value",
    "ValueArray",
    "is_primitive",
]
