"""AST to Clausewitz script text."""

from __future__ import annotations

import re

from shroudingers.ast import (
    Block,
    Document,
    Primitive,
    Property,
    Value,
    ValueArray,
    format_bool,
    format_number,
    is_primitive,
)
from shroudingers.document import ClausewitzDocument
from shroudingers.format.options import StringifyOptions

_BARE_STRING_RE = re.compile(r"[a-zA-Z_@][a-zA-Z0-9_:.\[\]@]*")


def stringify(
    document: Document | ClausewitzDocument,
    options: StringifyOptions | None = None,
) -> str:
    """Render a Document.

    Output depends only on the tree and `options`; comments and the original
    layout are not reproduced. There is no trailing newline.
    """
    root = document.document if isinstance(document, ClausewitzDocument) else document
    if not isinstance(root, Document):
        raise TypeError("Invalid document: expected a Document with properties")

    resolved = options or StringifyOptions()
    indent = resolved.indent_unit

    lines: list[str] = []
    for index, prop in enumerate(root.properties):
        lines.append(_render_property(prop, 0, indent, resolved))
        if resolved.space_between_top_level and index < len(root.properties) - 1:
            lines.append("")
    return "\n".join(lines)


def stringify_value(value: Value, options: StringifyOptions | None = None, *, depth: int = 0) -> str:
    """Render a single value as it would appear after `key =` at `depth`."""
    resolved = options or StringifyOptions()
    return _render_value(value, depth, resolved.indent_unit, resolved)


def stringify_primitive(value: Primitive) -> str:
    if isinstance(value, bool):
        return format_bool(value)
    if isinstance(value, (int, float)):
        return format_number(value)
    if _BARE_STRING_RE.fullmatch(value):
        return value
    escaped = value.replace('"', '\\"')
    return f'"{escaped}"'


def _render_property(prop: Property, depth: int, indent: str, options: StringifyOptions) -> str:
    return f"{prop.key} {prop.operator} {_render_value(prop.value, depth, indent, options)}"


def _render_value(value: Value, depth: int, indent: str, options: StringifyOptions) -> str:
    # Multi-line blocks are expanded through an explicit stack of pending
    # pieces so rendering depth is not bounded by the interpreter stack.
    parts: list[str] = []
    pending: list[str | tuple[Value, int]] = [(value, depth)]

    while pending:
        item = pending.pop()
        if isinstance(item, str):
            parts.append(item)
            continue

        current, level = item
        if not isinstance(current, Block) or _renders_inline(current, options):
            parts.append(_render_flat(current))
            continue

        inner = indent * (level + 1)
        pending.append(f"\n{indent * level}}}")
        for prop in reversed(current.properties):
            pending.append((prop.value, level + 1))
            pending.append(f"\n{inner}{prop.key} {prop.operator} ")
        pending.append("{")

    return "".join(parts)


def _renders_inline(block: Block, options: StringifyOptions) -> bool:
    if not block.properties:
        return True
    return len(block.properties) <= options.inline_block_max_properties and block.is_primitive_only


def _render_flat(value: Value) -> str:
    if isinstance(value, ValueArray):
        return "{ " + " ".join(stringify_primitive(item) for item in value.values) + " }"

    if isinstance(value, Block):
        if not value.properties:
            return "{ }"
        props = " ".join(
            f"{prop.key} {prop.operator} {stringify_primitive(prop.value)}"
            for prop in value.properties
        )
        return "{ " + props + " }"

    if is_primitive(value):
        return stringify_primitive(value)

    raise TypeError(f"Unsupported value type: {type(value).__name__}")
