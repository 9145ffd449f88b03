"""Clausewitz grammar routines building the AST."""

import logging

from shroudingers.ast import (
    Block,
    Container,
    Document,
    Operator,
    Primitive,
    Property,
    Value,
    ValueArray,
    primitive_from_token,
)
from shroudingers.diagnostics import (
    PARSER_EXPECTED_OPERATOR,
    PARSER_EXPECTED_RBRACE,
    PARSER_UNEXPECTED_TOKEN,
)
from shroudingers.lexer import TokenKind
from shroudingers.parser.parser import Parser

logger = logging.getLogger(__name__)


def parse_document(parser: Parser) -> Document:
    document = Document()
    parse_properties(parser, document)
    return document


def parse_properties(parser: Parser, container: Container) -> None:
    """Append properties to `container` until `}` or EOF.

    Nested blocks are filled through a stack of open blocks rather than by
    recursion, so nesting depth is not bounded by the interpreter stack. The
    `}` that ends `container` itself is left for the caller. A `}` at document
    level ends the document, or is an error when stray tokens are not skipped.
    """
    open_blocks: list[Container] = [container]

    while True:
        if parser.at_end or parser.at(TokenKind.RBRACE):
            if len(open_blocks) == 1:
                strict = not parser.options.skip_stray_tokens
                if strict and isinstance(container, Document) and parser.at(TokenKind.RBRACE):
                    raise parser.error(PARSER_UNEXPECTED_TOKEN, text=parser.current.text)
                return
            _expect_rbrace(parser)
            parser.exit_block()
            open_blocks.pop()
            continue

        prop = parse_property(parser)
        if prop is None:
            continue

        open_blocks[-1].properties.append(prop)
        if isinstance(prop.value, Block):
            open_blocks.append(prop.value)


def parse_property(parser: Parser) -> Property | None:
    """Parse `key operator value`.

    A Block value is returned open: its `{` is consumed but its properties
    and `}` are not. Returns None when a stray token was skipped.
    """
    if not parser.at(TokenKind.IDENTIFIER):
        if not parser.options.skip_stray_tokens:
            raise parser.error(PARSER_UNEXPECTED_TOKEN, text=parser.current.text)
        skipped = parser.bump()
        logger.debug(
            "Skipping stray %s token %r at line %d, column %d",
            skipped.kind.name,
            skipped.text,
            skipped.line,
            skipped.column,
        )
        return None

    key_token = parser.bump()
    operator = parse_operator(parser)
    if operator is None:
        raise parser.error(
            PARSER_EXPECTED_OPERATOR,
            key=key_token.text,
            key_position=key_token.position,
        )

    value = parse_value(parser)
    return Property(
        key=key_token.text,
        operator=operator,
        value=value,
        line=key_token.line,
        column=key_token.column,
    )


def parse_operator(parser: Parser) -> Operator | None:
    if parser.at_end or not parser.current_kind.is_operator:
        return None
    return Operator(parser.bump().text)


def parse_value(parser: Parser) -> Value:
    """Parse one value. A Block comes back open and empty, see `parse_block_or_array`."""
    if parser.at(TokenKind.LBRACE):
        return parse_block_or_array(parser)

    if not parser.at_end and parser.current_kind.is_scalar:
        return primitive_from_token(parser.bump())

    raise parser.error(PARSER_UNEXPECTED_TOKEN, text=parser.current.text)


def parse_block_or_array(parser: Parser) -> Block | ValueArray:
    """Consume `{` and decide between a ValueArray and a Block.

    ValueArrays are parsed to completion. Blocks come back open for
    `parse_properties` to fill and close.
    """
    brace = parser.bump()
    parser.enter_block(brace)

    if is_value_array(parser):
        values = parse_value_array(parser)
        _expect_rbrace(parser)
        parser.exit_block()
        return ValueArray(values=values, line=brace.line, column=brace.column)

    return Block(line=brace.line, column=brace.column)


def is_value_array(parser: Parser) -> bool:
    """One-token lookahead after `{`.

    `{ }` is an empty Block. A NUMBER or BOOLEAN not followed by an operator
    starts a ValueArray. Everything else, including identifier-only lists
    such as `{ a b c }`, is treated as a Block.
    """
    if parser.at(TokenKind.RBRACE):
        return False

    if parser.at(TokenKind.NUMBER) or parser.at(TokenKind.BOOLEAN):
        return not parser.nth(1).is_operator

    return False


def parse_value_array(parser: Parser) -> list[Primitive]:
    values: list[Primitive] = []
    while not parser.at_end and not parser.at(TokenKind.RBRACE):
        if not parser.current_kind.is_scalar:
            break
        values.append(primitive_from_token(parser.bump()))
    return values


def _expect_rbrace(parser: Parser) -> None:
    if not parser.eat(TokenKind.RBRACE):
        raise parser.error(PARSER_EXPECTED_RBRACE)
