"""Tests for shunting-yard conversion to postfix order."""

import pytest

from tinymath import (
    DEFAULT_OPERATORS,
    Token,
    TokenType,
    UnbalancedParenthesesError,
    UnexpectedParenthesisError,
    UnexpectedTokenError,
    UnknownOperatorOnStackError,
    to_postfix,
    tokenize,
)
from tinymath.converter import _pop_higher_precedence


def rpn(source: str) -> list[str]:
    return [t.text for t in to_postfix(tokenize(source))]


class TestPostfixOrder:
    """Tests for operator precedence and grouping."""

    def test_product(self):
        assert rpn("3*4") == ["3", "4", "*"]

    def test_precedence(self):
        assert rpn("1+2*3") == ["1", "2", "3", "*", "+"]
        assert rpn("1*2+3") == ["1", "2", "*", "3", "+"]

    def test_parentheses_override_precedence(self):
        assert rpn("(1+2)*3") == ["1", "2", "+", "3", "*"]

    def test_left_associative_subtraction(self):
        assert rpn("8-3-2") == ["8", "3", "-", "2", "-"]

    def test_left_associative_division(self):
        assert rpn("8/4/2") == ["8", "4", "/", "2", "/"]

    def test_nested_parentheses(self):
        assert rpn("((1+2)*(3-4))/5") == [
            "1", "2", "+", "3", "4", "-", "*", "5", "/",
        ]

    def test_variables_pass_through_to_output(self):
        assert rpn("x+1") == ["x", "1", "+"]

    def test_function_follows_its_argument(self):
        assert rpn("sin(0)") == ["0", "sin"]
        assert rpn("sin(0)+1") == ["0", "sin", "1", "+"]
        assert rpn("2*sin(x+1)") == ["2", "x", "1", "+", "sin", "*"]

    def test_nested_functions(self):
        assert rpn("sqrt(abs(x))") == ["x", "abs", "sqrt"]

    def test_unary_minus(self):
        assert rpn("-3+5") == ["3", "-", "5", "+"]
        assert rpn("2*-3") == ["2", "3", "-", "*"]

    def test_repeated_unary_minus(self):
        assert rpn("--3") == ["3", "-", "-"]

    def test_output_reuses_input_tokens(self):
        tokens = tokenize("x+1")
        postfix = to_postfix(tokens)

        assert postfix[0] is tokens[0]

    def test_empty_token_list(self):
        assert to_postfix([]) == []


class TestConverterErrors:
    """Tests for malformed token lists."""

    def test_close_without_open(self):
        tokens = [
            Token(TokenType.NUMERIC_LITERAL, "1", value=1.0, position=0),
            Token(TokenType.PAREN_CLOSE, ")", position=1),
        ]
        with pytest.raises(UnexpectedParenthesisError) as exc_info:
            to_postfix(tokens)
        assert exc_info.value.position == 1

    def test_open_never_closed(self):
        tokens = [
            Token(TokenType.PAREN_OPEN, "(", position=0),
            Token(TokenType.NUMERIC_LITERAL, "1", value=1.0, position=1),
        ]
        with pytest.raises(UnbalancedParenthesesError):
            to_postfix(tokens)

    def test_unknown_token(self):
        with pytest.raises(UnexpectedTokenError):
            to_postfix([Token(TokenType.UNKNOWN, "?")])

    def test_operator_without_entry(self):
        with pytest.raises(UnexpectedTokenError):
            to_postfix([Token(TokenType.OPERATOR, "+")])

    def test_incoming_operator_without_entry(self):
        with pytest.raises(UnexpectedTokenError):
            _pop_higher_precedence(Token(TokenType.OPERATOR, "+"), [], [])

    def test_non_operator_blocking_stack(self):
        incoming = Token(TokenType.OPERATOR, "+", operator=DEFAULT_OPERATORS.binary("+"))
        holding = [Token(TokenType.NUMERIC_LITERAL, "1", value=1.0)]

        with pytest.raises(UnknownOperatorOnStackError):
            _pop_higher_precedence(incoming, holding, [])
