import io

import pytest

from loxlang.expressions import Binary, Grouping, Literal, Unary
from loxlang.lexer import tokenize
from loxlang.parser import ParseError, Parser
from loxlang.tokens import TokenKind


def _parse(source):
    return Parser(tokenize(source)).parse()


def test_single_literal():
    tokens = tokenize("true")
    expression = Parser(tokens).parse()
    assert expression == Literal(tokens[0])


def test_factor_binds_tighter_than_term():
    expression = _parse("1 + 2 * 3")
    assert isinstance(expression, Binary)
    assert expression.operator.token_type.kind is TokenKind.PLUS
    assert isinstance(expression.right, Binary)
    assert expression.right.operator.token_type.kind is TokenKind.STAR


def test_binary_operators_are_left_associative():
    expression = _parse("1 - 2 - 3")
    assert isinstance(expression, Binary)
    assert isinstance(expression.left, Binary)
    assert isinstance(expression.right, Literal)
    assert expression.render() == "(- (- 1.0 2.0) 3.0)"


def test_equality_is_lowest_precedence():
    expression = _parse("1 < 2 == true")
    assert expression.operator.token_type.kind is TokenKind.EQUAL_EQUAL
    assert expression.left.operator.token_type.kind is TokenKind.LESS


@pytest.mark.parametrize(
    "source, kind",
    [
        ("1 != 2", TokenKind.BANG_EQUAL),
        ("1 >= 2", TokenKind.GREATER_EQUAL),
        ("1 <= 2", TokenKind.LESS_EQUAL),
        ("1 > 2", TokenKind.GREATER),
        ("4 / 2", TokenKind.SLASH),
        ("4 - 2", TokenKind.MINUS),
    ],
)
def test_binary_operator_kinds(source, kind):
    expression = _parse(source)
    assert isinstance(expression, Binary)
    assert expression.operator.token_type.kind is kind


def test_nested_unary():
    expression = _parse("-!true")
    assert isinstance(expression, Unary)
    assert expression.operator.token_type.kind is TokenKind.MINUS
    assert isinstance(expression.operand, Unary)
    assert expression.operand.operator.token_type.kind is TokenKind.BANG


def test_grouping_overrides_precedence():
    expression = _parse("(1 + 2) * 3")
    assert expression.operator.token_type.kind is TokenKind.STAR
    assert isinstance(expression.left, Grouping)
    assert isinstance(expression.left.expression, Binary)


def test_grouped_string_renders():
    assert _parse('("hi")').render() == "(group hi)"


def test_parse_can_be_repeated():
    parser = Parser(tokenize("1 + (2 * -3)"))
    first = parser.parse()
    second = parser.parse()
    assert first.render() == "(+ 1.0 (group (* 2.0 (- 3.0))))"
    assert second.render() == first.render()


def test_trailing_tokens_are_ignored():
    assert _parse("true false") == _parse("true")


def test_unclosed_group_raises():
    with pytest.raises(ParseError, match=r"Expected '\)' after expression\."):
        _parse("(1 + 2")


def test_wrong_closing_token_raises():
    with pytest.raises(ParseError, match="Expected"):
        _parse("(1 }")


@pytest.mark.parametrize("source", ["+", "foo", "print", ")"])
def test_unsupported_token_raises(source):
    with pytest.raises(ParseError, match="doesn't support"):
        _parse(source)


def test_empty_input_raises():
    with pytest.raises(ParseError):
        Parser([]).parse()


def test_missing_operand_raises():
    with pytest.raises(ParseError):
        _parse("1 +")


def test_print_result_writes_rendering_line():
    parser = Parser(tokenize("-(1)"))
    expression = parser.parse()
    out = io.StringIO()
    parser.print_result(expression, out)
    assert out.getvalue() == expression.render() + "\n"