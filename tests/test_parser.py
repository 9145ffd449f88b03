import pytest

from shroudingers import (
    Block,
    Document,
    Operator,
    Property,
    ValueArray,
    __version__,
    get_version,
)
from shroudingers.lexer import tokenize
from shroudingers.parser import ParseMode, ParseResult, Parser, ParserOptions, parse
from tests._debug import debug_dump_ast
from tests._shared_cases import SCRIPT_CASES, ScriptCase, case_id


def parse_ok(text: str, options: ParserOptions | None = None) -> Document:
    result = parse(text, options)
    debug_dump_ast(text, result.document)
    assert result.success, result.error
    assert result.document is not None
    return result.document


def parse_err(text: str, options: ParserOptions | None = None) -> ParseResult:
    result = parse(text, options)
    assert not result.success
    assert result.document is None
    assert result.diagnostic is not None
    return result


@pytest.mark.parametrize("case", SCRIPT_CASES, ids=case_id)
def test_all_shared_cases_parse(case: ScriptCase) -> None:
    parse_ok(case.source)


def test_basic_property_shape() -> None:
    document = parse_ok("aaa = foo")

    assert len(document.properties) == 1
    prop = document.properties[0]
    assert prop.key == "aaa"
    assert prop.operator == Operator.EQUAL
    assert prop.value == "foo"
    assert (prop.line, prop.column) == (1, 1)


def test_primitive_value_types() -> None:
    document = parse_ok('s = "quoted"\nident = dyson_sphere_init_01\nflag = yes\noff = no\nn = 42')

    values = [prop.value for prop in document.properties]
    assert values == ["quoted", "dyson_sphere_init_01", True, False, 42]
    assert values[2] is True
    assert values[3] is False


def test_duplicate_keys_are_preserved_in_order() -> None:
    document = parse_ok("k = 1\nk = 2\nk = 3")

    assert [(p.key, p.value) for p in document.properties] == [("k", 1), ("k", 2), ("k", 3)]


def test_duplicate_keys_inside_block() -> None:
    document = parse_ok("outer = { k = 1 k = 2 k = 3 }")

    block = document.properties[0].value
    assert isinstance(block, Block)
    assert [p.value for p in block.properties] == [1, 2, 3]


def test_numeric_normalization() -> None:
    document = parse_ok("odds = 1.75\npriority = 0\nwhole = 1.0\nneg = -3")

    odds, priority, whole, neg = (p.value for p in document.properties)
    assert isinstance(odds, float) and odds == 1.75
    assert type(priority) is int and priority == 0
    assert type(whole) is int and whole == 1
    assert type(neg) is int and neg == -3


def test_small_decimal_is_a_float() -> None:
    document = parse_ok("small = 0.00005")

    value = document.properties[0].value
    assert isinstance(value, float) and value == 0.00005


def test_integer_literal_past_the_str_digit_limit() -> None:
    result = parse("x = " + "1" * 5000)

    assert result.success
    assert result.document is not None
    assert result.document.properties[0].value == (10**5000 - 1) // 9


def test_not_equal_spellings_are_preserved() -> None:
    document = parse_ok("value != 10\nvalue <> 10")

    bang, angle = document.properties
    assert bang.operator == Operator.NOT_EQUAL
    assert angle.operator == Operator.NOT_EQUAL_ALT
    assert bang.operator == "!="
    assert angle.operator == "<>"
    assert bang.operator.is_not_equal and angle.operator.is_not_equal


def test_all_comparison_operators() -> None:
    document = parse_ok("a < 1 b > 2 c <= 3 d >= 4 e = 5")

    assert [p.operator for p in document.properties] == [
        Operator.LESS_THAN,
        Operator.GREATER_THAN,
        Operator.LESS_THAN_OR_EQUAL,
        Operator.GREATER_THAN_OR_EQUAL,
        Operator.EQUAL,
    ]


def test_comments_are_ignored() -> None:
    document = parse_ok("# header\na = 1 # trailing\n# footer")

    assert [p.key for p in document.properties] == ["a"]


def test_empty_braces_are_an_empty_block() -> None:
    document = parse_ok("empty = { }")

    value = document.properties[0].value
    assert isinstance(value, Block)
    assert value.properties == []


def test_numeric_value_array() -> None:
    document = parse_ok("extra_crisis_strength = { 5.5 6 6.5 }")

    value = document.properties[0].value
    assert isinstance(value, ValueArray)
    assert value.values == [5.5, 6, 6.5]
    assert type(value.values[1]) is int


def test_boolean_value_array_accepts_mixed_scalars() -> None:
    document = parse_ok('flags = { yes no "label" ident 3 }')

    value = document.properties[0].value
    assert isinstance(value, ValueArray)
    assert value.values == [True, False, "label", "ident", 3]


def test_number_followed_by_operator_is_a_block() -> None:
    # Numbers are not keys, so their tokens are skipped inside the block.
    document = parse_ok("odd = { 1 = 2 }")

    value = document.properties[0].value
    assert isinstance(value, Block)
    assert value.properties == []


def test_string_first_list_is_a_block_with_skipped_tokens() -> None:
    document = parse_ok('names = { "a" "b" }')

    value = document.properties[0].value
    assert isinstance(value, Block)
    assert value.properties == []


def test_identifier_only_list_is_misread_as_block() -> None:
    # Known limitation: one token of lookahead cannot tell `{ a b c }` from a block.
    result = parse_err("list = { a b c }")

    assert result.diagnostic is not None
    assert result.diagnostic.code == "PARSER_EXPECTED_OPERATOR"
    assert result.error == "Expected operator after 'a' at line 1, column 10"
    assert (result.error_line, result.error_column) == (1, 12)


def test_nested_blocks() -> None:
    document = parse_ok("a = {\n  b = {\n    c = 1\n  }\n}")

    a = document.properties[0]
    assert isinstance(a.value, Block)
    b = a.value.properties[0]
    assert b.key == "b"
    assert (b.line, b.column) == (2, 3)
    assert isinstance(b.value, Block)
    assert (b.value.line, b.value.column) == (2, 7)
    assert b.value.properties == [Property(key="c", operator=Operator.EQUAL, value=1)]


def test_stray_top_level_tokens_are_skipped() -> None:
    document = parse_ok('"orphan" 12 yes a = 1')

    assert [(p.key, p.value) for p in document.properties] == [("a", 1)]


def test_stray_closing_brace_ends_the_document() -> None:
    document = parse_ok("a = 1 } b = 2")

    assert [p.key for p in document.properties] == ["a"]


def test_strict_mode_rejects_stray_tokens() -> None:
    result = parse('x = { "a" }', mode=ParseMode.STRICT)

    assert not result.success
    assert result.diagnostic is not None
    assert result.diagnostic.code == "PARSER_UNEXPECTED_TOKEN"
    assert result.error == "Unexpected token 'a' at line 1, column 7"


def test_strict_mode_rejects_stray_closing_brace() -> None:
    result = parse_err("a = 1 } b = 2", ParserOptions.for_mode(ParseMode.STRICT))

    assert result.diagnostic is not None
    assert result.diagnostic.code == "PARSER_UNEXPECTED_TOKEN"
    assert result.error == "Unexpected token '}' at line 1, column 7"


def test_strict_mode_accepts_well_formed_input() -> None:
    result = parse("x = { a = 1 b = { 1 2 } }", ParserOptions.for_mode(ParseMode.STRICT))

    assert result.success


def test_missing_closing_brace() -> None:
    result = parse_err("a = { b = 1")

    assert result.diagnostic is not None
    assert result.diagnostic.code == "PARSER_EXPECTED_RBRACE"
    assert result.error == "Expected '}' at line 1, column 12"
    assert (result.error_line, result.error_column) == (1, 12)


def test_value_array_stops_at_non_scalar_then_requires_brace() -> None:
    result = parse_err("a = { 1 2 = }")

    assert result.diagnostic is not None
    assert result.diagnostic.code == "PARSER_EXPECTED_RBRACE"
    assert (result.error_line, result.error_column) == (1, 11)


def test_missing_operator() -> None:
    result = parse_err("a b = 1")

    assert result.diagnostic is not None
    assert result.diagnostic.code == "PARSER_EXPECTED_OPERATOR"
    assert (result.error_line, result.error_column) == (1, 3)


def test_unexpected_token_as_value() -> None:
    result = parse_err("a = }")

    assert result.error == "Unexpected token '}' at line 1, column 5"


def test_missing_value_at_end_of_input() -> None:
    result = parse_err("a =")

    assert result.diagnostic is not None
    assert result.diagnostic.code == "PARSER_UNEXPECTED_TOKEN"
    assert (result.error_line, result.error_column) == (1, 4)


def test_lexer_errors_surface_through_parse() -> None:
    result = parse_err('\nname = "unterminated')

    assert result.diagnostic is not None
    assert result.diagnostic.code == "LEXER_UNTERMINATED_STRING"
    assert result.error_line == 2


@pytest.mark.parametrize("text", ["", "   ", "\n\n"])
def test_empty_input_is_rejected(text: str) -> None:
    result = parse_err(text)

    assert result.error == "Input cannot be empty"
    assert result.error_line is None
    assert result.error_column is None


def test_comment_only_input_is_an_empty_document() -> None:
    document = parse_ok("# just a comment")

    assert document.properties == []


def test_max_depth_limits_nesting() -> None:
    source = "a = { b = { c = 1 } }"

    result = parse_err(source, ParserOptions(max_depth=1))
    assert result.diagnostic is not None
    assert result.diagnostic.code == "PARSER_NESTING_TOO_DEEP"
    assert (result.error_line, result.error_column) == (1, 11)

    assert parse(source, ParserOptions(max_depth=2)).success


def test_max_depth_counts_value_arrays() -> None:
    result = parse("a = { b = { 1 2 } }", ParserOptions(max_depth=1))

    assert result.diagnostic is not None
    assert result.diagnostic.code == "PARSER_NESTING_TOO_DEEP"


def test_invalid_max_depth_is_rejected() -> None:
    with pytest.raises(ValueError):
        ParserOptions(max_depth=0)


def test_deep_nesting_does_not_exhaust_the_stack() -> None:
    depth = 5000
    document = parse_ok("a = { " * depth + "leaf = 1" + " }" * depth)

    current = document.properties[0].value
    levels = 1
    while isinstance(current, Block) and current.properties[0].key == "a":
        current = current.properties[0].value
        levels += 1
    assert levels == depth
    assert isinstance(current, Block)
    assert current.properties[0].key == "leaf"


def test_options_and_mode_are_mutually_exclusive() -> None:
    with pytest.raises(ValueError):
        parse("a = 1", ParserOptions(), mode=ParseMode.STRICT)


def test_parser_can_be_driven_from_tokens() -> None:
    lexed = tokenize("# comment\na = { b = 1 }")

    result = Parser(lexed.tokens).parse()

    assert result.success
    assert result.document == parse_ok("a = { b = 1 }")


def test_parser_requires_eof_terminated_stream() -> None:
    with pytest.raises(ValueError):
        Parser(())


def test_equality_ignores_source_positions() -> None:
    compact = parse_ok("a={b=1 c=yes}")
    spaced = parse_ok("\n\n   a = {\n b = 1\n c = yes\n}\n")

    assert compact == spaced
    assert compact.properties[0].line != spaced.properties[0].line


def test_clausewitz_document_is_cached_on_result() -> None:
    result = parse("a = 1")

    first = result.clausewitz_document()
    assert first is not None
    assert first is result.clausewitz_document()
    assert first.document is result.document


def test_failed_result_has_no_clausewitz_document() -> None:
    assert parse("a = {").clausewitz_document() is None


def test_get_version() -> None:
    assert get_version() == __version__ == "1.0.0"
