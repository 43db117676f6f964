"""Tests for the tinymath tokenizer.

Tests cover:
- Token classification by character class
- Greedy multi-character operator matching
- Unary sign selection
- Error reporting for bad input
"""

import operator

import pytest

from tinymath import (
    DEFAULT_OPERATORS,
    EmptyInputError,
    MalformedNumberError,
    OperatorInfo,
    Token,
    Tokenizer,
    TokenType,
    UnbalancedParenthesesError,
    UnexpectedCharacterError,
    UnexpectedParenthesisError,
    UnrecognizedOperatorError,
    tokenize,
)


@pytest.fixture
def power_table():
    return DEFAULT_OPERATORS.extended([OperatorInfo("**", 4, 2, operator.pow)])


def texts(tokens: list[Token]) -> list[str]:
    return [t.text for t in tokens]


def types(tokens: list[Token]) -> list[TokenType]:
    return [t.type for t in tokens]


# =============================================================================
# Classification
# =============================================================================


class TestClassification:
    """Tests for splitting text into typed tokens."""

    def test_tokenize_simple_product(self):
        tokens = tokenize("3*4")

        assert types(tokens) == [
            TokenType.NUMERIC_LITERAL,
            TokenType.OPERATOR,
            TokenType.NUMERIC_LITERAL,
        ]
        assert texts(tokens) == ["3", "*", "4"]
        assert [t.position for t in tokens] == [0, 1, 2]

    def test_tokenize_numbers(self):
        tokens = tokenize("42 3.14 0")

        assert [t.value for t in tokens] == [42.0, 3.14, 0.0]
        assert texts(tokens) == ["42", "3.14", "0"]

    def test_operator_token_carries_table_entry(self):
        tokens = tokenize("1 / 2")

        assert tokens[1].operator == DEFAULT_OPERATORS.binary("/")
        assert tokens[1].operator.precedence == 3
        assert tokens[1].operator.arity == 2

    def test_tokenize_parentheses(self):
        tokens = tokenize("(1+2)")

        assert types(tokens) == [
            TokenType.PAREN_OPEN,
            TokenType.NUMERIC_LITERAL,
            TokenType.OPERATOR,
            TokenType.NUMERIC_LITERAL,
            TokenType.PAREN_CLOSE,
        ]

    def test_single_letter_is_variable_longer_run_is_function(self):
        tokens = tokenize("x + sin(y)")

        assert types(tokens) == [
            TokenType.VARIABLE,
            TokenType.OPERATOR,
            TokenType.FUNCTION,
            TokenType.PAREN_OPEN,
            TokenType.VARIABLE,
            TokenType.PAREN_CLOSE,
        ]
        assert texts(tokens) == ["x", "+", "sin", "(", "y", ")"]

    def test_whitespace_is_skipped(self):
        tokens = tokenize(" \t1 +\n2 ")

        assert texts(tokens) == ["1", "+", "2"]

    def test_whitespace_only_gives_no_tokens(self):
        assert tokenize("   ") == []

    def test_last_token_flushed_without_trailing_space(self):
        assert texts(tokenize("12")) == ["12"]
        assert texts(tokenize("(x)")) == ["(", "x", ")"]

    def test_number_followed_by_letter(self):
        tokens = tokenize("2x")

        assert types(tokens) == [TokenType.NUMERIC_LITERAL, TokenType.VARIABLE]

    def test_describe(self):
        tokens = tokenize("sin(x) * 3")

        assert [t.describe() for t in tokens] == [
            "[Function] : sin",
            "[Parenthesis, Open] : (",
            "[Variable] : x",
            "[Parenthesis, Close] : )",
            "[Operator] : *",
            "[Literal, Numeric] : 3",
        ]
        assert str(tokens[-1]) == "[Literal, Numeric] : 3"

    def test_tokenize_is_repeatable(self):
        tokenizer = Tokenizer()
        first = tokenizer.tokenize("(1 + x) * sin(2.5)")
        second = tokenizer.tokenize("(1 + x) * sin(2.5)")

        assert first == second
        assert first is not second


# =============================================================================
# Operators
# =============================================================================


class TestOperators:
    """Tests for greedy operator matching and unary selection."""

    def test_binary_minus_after_operand(self):
        tokens = tokenize("2-3")

        assert tokens[1].operator.arity == 2

    def test_unary_minus_at_start(self):
        tokens = tokenize("-3")

        assert tokens[0].type == TokenType.OPERATOR
        assert tokens[0].operator.arity == 1
        assert tokens[0].operator.precedence == 100

    def test_unary_after_operator_and_open_paren(self):
        tokens = tokenize("2*-(+3)")

        assert texts(tokens) == ["2", "*", "-", "(", "+", "3", ")"]
        assert tokens[1].operator.arity == 2
        assert tokens[2].operator.arity == 1
        assert tokens[4].operator.arity == 1

    def test_binary_after_close_paren_and_variable(self):
        tokens = tokenize("(1)-x-2")

        assert tokens[3].operator.arity == 2
        assert tokens[5].operator.arity == 2

    def test_adjacent_operators_split_on_table_entries(self):
        tokens = tokenize("1+-2")

        assert texts(tokens) == ["1", "+", "-", "2"]

    def test_greedy_multi_character_operator(self, power_table):
        tokens = Tokenizer(power_table).tokenize("2**3")

        assert texts(tokens) == ["2", "**", "3"]
        assert tokens[1].operator.precedence == 4

    def test_single_character_still_matches_with_longer_entry(self, power_table):
        tokens = Tokenizer(power_table).tokenize("2*3")

        assert texts(tokens) == ["2", "*", "3"]

    def test_default_table_splits_double_star(self):
        tokens = tokenize("2**3")

        assert texts(tokens) == ["2", "*", "*", "3"]

    def test_binary_only_operator_in_prefix_position(self):
        tokens = tokenize("*3")

        assert tokens[0].operator.arity == 2


# =============================================================================
# Errors
# =============================================================================


class TestTokenizerErrors:
    """Tests for tokenizer error reporting."""

    def test_empty_input(self):
        with pytest.raises(EmptyInputError):
            tokenize("")

    def test_unrecognized_operator(self):
        with pytest.raises(UnrecognizedOperatorError) as exc_info:
            tokenize("2 @ 3")
        assert exc_info.value.position == 2
        assert "@" in str(exc_info.value)

    def test_unrecognized_operator_run(self):
        with pytest.raises(UnrecognizedOperatorError):
            tokenize("2 != 3")

    def test_unclosed_parenthesis(self):
        with pytest.raises(UnbalancedParenthesesError):
            tokenize("(1+2")

    def test_unexpected_closing_parenthesis(self):
        with pytest.raises(UnexpectedParenthesisError) as exc_info:
            tokenize("1+2)")
        assert exc_info.value.position == 3

    def test_close_before_open(self):
        with pytest.raises(UnexpectedParenthesisError):
            tokenize(")1+2(")

    def test_unexpected_character(self):
        with pytest.raises(UnexpectedCharacterError) as exc_info:
            tokenize("1, 2")
        assert exc_info.value.position == 1

    def test_leading_decimal_point_is_unexpected(self):
        with pytest.raises(UnexpectedCharacterError):
            tokenize(".5")

    def test_malformed_number(self):
        with pytest.raises(MalformedNumberError) as exc_info:
            tokenize("1.2.3 + 4")
        assert exc_info.value.position == 0
