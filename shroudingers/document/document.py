"""Dot-path accessor and mutator over a parsed Document."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from shroudingers.ast import Block, Container, Document, Operator, Property, Value

if TYPE_CHECKING:
    from shroudingers.format import StringifyOptions

logger = logging.getLogger(__name__)


class ClausewitzDocument:
    """Read/write helper over a Document tree.

    Paths are dot-separated keys (`"scenario.system"`). Each segment picks the
    first property with that key and, for all but the last segment, descends
    only into Block values. All mutation happens in place on the wrapped tree.
    Unresolved paths are reported through the return value, never raised.
    """

    def __init__(self, document: Document) -> None:
        self._root = document

    @property
    def document(self) -> Document:
        """The wrapped tree."""
        return self._root

    @property
    def properties(self) -> list[Property]:
        """Top-level properties of the wrapped tree."""
        return self._root.properties

    def get(self, path: str) -> Value | None:
        """First value at `path`, or None."""
        keys = path.split(".")
        container = self._resolve_container(keys[:-1])
        if container is None:
            return None
        prop = _find_first(container, keys[-1])
        return prop.value if prop is not None else None

    def get_all(self, path: str) -> list[Value]:
        """Values of every property named by the last segment, in order."""
        keys = path.split(".")
        container = self._resolve_container(keys[:-1])
        if container is None:
            return []
        return [prop.value for prop in container.properties if prop.key == keys[-1]]

    def set(self, path: str, value: Value) -> bool:
        """Overwrite the first value at `path`. Missing segments are not created."""
        keys = path.split(".")
        container = self._resolve_container(keys[:-1])
        if container is None:
            return False
        prop = _find_first(container, keys[-1])
        if prop is None:
            return False
        prop.value = value
        return True

    def add(
        self,
        path: str,
        key: str,
        value: Value,
        operator: Operator | str = Operator.EQUAL,
    ) -> bool:
        """Append `key operator value` to the Block at `path` ("" is the root).

        Raises `ValueError` for an operator outside the closed operator set.
        """
        resolved_operator = Operator(operator)
        container = self._container_at(path)
        if container is None:
            logger.debug("add(%r, %r): parent does not resolve to a block", path, key)
            return False
        container.properties.append(Property(key=key, operator=resolved_operator, value=value))
        return True

    def remove_all(self, path: str, key: str) -> int:
        """Remove every `key` property from the Block at `path`. Returns the count."""
        container = self._container_at(path)
        if container is None:
            return 0
        before = len(container.properties)
        container.properties[:] = [prop for prop in container.properties if prop.key != key]
        return before - len(container.properties)

    def stringify(self, options: StringifyOptions | None = None) -> str:
        from shroudingers.format import stringify

        return stringify(self._root, options)

    def _container_at(self, path: str) -> Container | None:
        if path == "":
            return self._root
        value = self.get(path)
        return value if isinstance(value, Block) else None

    def _resolve_container(self, keys: list[str]) -> Container | None:
        container: Container = self._root
        for key in keys:
            prop = _find_first(container, key)
            if prop is None or not isinstance(prop.value, Block):
                return None
            container = prop.value
        return container

    def __repr__(self) -> str:
        return f"ClausewitzDocument(properties={len(self._root.properties)})"


def _find_first(container: Container, key: str) -> Property | None:
    for prop in container.properties:
        if prop.key == key:
            return prop
    return None
