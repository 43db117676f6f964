"""Tokenizer for tinymath expressions.

A finite state machine reads the source one character at a time. Each state
either consumes the current character or hands off to COMPLETE_TOKEN without
consuming it, so the character that ends a token is looked at again from
NEW_TOKEN on the next step.

Character classes (disjoint):
- whitespace: skipped between tokens
- digits: start a numeric literal, which may continue with '.'
- operator characters: matched greedily against the operator table
- '(' and ')': single-character parenthesis tokens
- letters: one letter is a variable, several letters are a function name
"""

import logging
import string
from enum import Enum, auto

from tinymath.errors import (
    EmptyInputError,
    MalformedNumberError,
    UnbalancedParenthesesError,
    UnexpectedCharacterError,
    UnexpectedParenthesisError,
    UnrecognizedOperatorError,
)
from tinymath.operators import DEFAULT_OPERATORS, OperatorTable
from tinymath.tokens import Token, TokenType

logger = logging.getLogger(__name__)

WHITESPACE = frozenset(" \t\r\n\v\f")
DIGITS = frozenset(string.digits)
NUMERIC_CHARS = frozenset("." + string.digits)
OPERATOR_CHARS = frozenset("!$%^&*+-=#@?|`/\\<>~")
LETTERS = frozenset(string.ascii_letters)

# Appended to every source so the last in-progress token is flushed
SENTINEL = " "

# A sign operator directly after one of these (or at the start) is unary
PREFIX_CONTEXT = (TokenType.OPERATOR, TokenType.PAREN_OPEN, TokenType.FUNCTION)


class TokenizerState(Enum):
    """States of the tokenizer state machine."""

    NEW_TOKEN = auto()
    NUMERIC_LITERAL = auto()
    PAREN_OPEN = auto()
    PAREN_CLOSE = auto()
    OPERATOR = auto()
    STRING_LITERAL = auto()
    COMPLETE_TOKEN = auto()


class Tokenizer:
    """Converts expression text into a list of tokens.

    The tokenizer keeps no state between calls; one instance can tokenize
    any number of expressions.

    Usage:
        tokens = Tokenizer().tokenize("3 * (x + 4)")
        for token in tokens:
            print(token.describe())
    """

    def __init__(self, operators: OperatorTable | None = None):
        self.operators = operators if operators is not None else DEFAULT_OPERATORS

    def tokenize(self, source: str) -> list[Token]:
        """Tokenize an expression.

        Raises:
            EmptyInputError: If source is empty
            UnexpectedCharacterError: On a character outside every class
            MalformedNumberError: If a numeric literal is not a valid number
            UnrecognizedOperatorError: If an operator run matches no entry
            UnexpectedParenthesisError: On ')' with no open parenthesis
            UnbalancedParenthesesError: If '(' is left open at the end
        """
        if not source:
            raise EmptyInputError("No input provided")

        text = source + SENTINEL
        tokens: list[Token] = []

        state = TokenizerState.NEW_TOKEN
        current = ""
        start = 0
        completed: Token | None = None
        balance = 0
        position = 0

        while position < len(text):
            char = text[position]

            if state is TokenizerState.NEW_TOKEN:
                current = ""
                start = position
                completed = None

                if char in WHITESPACE:
                    position += 1
                elif char in DIGITS:
                    current = char
                    position += 1
                    state = TokenizerState.NUMERIC_LITERAL
                elif char in OPERATOR_CHARS:
                    state = TokenizerState.OPERATOR
                elif char == "(":
                    state = TokenizerState.PAREN_OPEN
                elif char == ")":
                    state = TokenizerState.PAREN_CLOSE
                elif char in LETTERS:
                    current = char
                    position += 1
                    state = TokenizerState.STRING_LITERAL
                else:
                    raise UnexpectedCharacterError(
                        f"Unexpected character '{char}'", position
                    )

            elif state is TokenizerState.NUMERIC_LITERAL:
                if char in NUMERIC_CHARS:
                    current += char
                    position += 1
                else:
                    completed = self._numeric_token(current, start)
                    state = TokenizerState.COMPLETE_TOKEN

            elif state is TokenizerState.OPERATOR:
                if char in OPERATOR_CHARS:
                    if self.operators.is_known(current + char):
                        current += char
                        position += 1
                    elif self.operators.is_known(current):
                        completed = self._operator_token(current, start, tokens)
                        state = TokenizerState.COMPLETE_TOKEN
                    else:
                        # Unknown so far; a longer run may still match
                        current += char
                        position += 1
                elif self.operators.is_known(current):
                    completed = self._operator_token(current, start, tokens)
                    state = TokenizerState.COMPLETE_TOKEN
                else:
                    raise UnrecognizedOperatorError(
                        f"Unrecognized operator '{current}'", start
                    )

            elif state is TokenizerState.PAREN_OPEN:
                position += 1
                balance += 1
                completed = Token(TokenType.PAREN_OPEN, char, position=start)
                state = TokenizerState.COMPLETE_TOKEN

            elif state is TokenizerState.PAREN_CLOSE:
                balance -= 1
                if balance < 0:
                    raise UnexpectedParenthesisError(
                        "Closing parenthesis without matching '('", start
                    )
                position += 1
                completed = Token(TokenType.PAREN_CLOSE, char, position=start)
                state = TokenizerState.COMPLETE_TOKEN

            elif state is TokenizerState.STRING_LITERAL:
                if char in LETTERS:
                    current += char
                    position += 1
                else:
                    token_type = (
                        TokenType.VARIABLE if len(current) == 1 else TokenType.FUNCTION
                    )
                    completed = Token(token_type, current, position=start)
                    state = TokenizerState.COMPLETE_TOKEN

            elif state is TokenizerState.COMPLETE_TOKEN:
                if completed is None:
                    raise AssertionError("No token to complete")
                tokens.append(completed)
                state = TokenizerState.NEW_TOKEN

            else:
                raise AssertionError(f"Unhandled tokenizer state: {state}")

        if balance != 0:
            raise UnbalancedParenthesesError(
                f"Unbalanced parentheses: {balance} left open", len(source)
            )

        logger.debug("Tokenized %r into %d tokens", source, len(tokens))
        return tokens

    def _numeric_token(self, text: str, start: int) -> Token:
        try:
            value = float(text)
        except ValueError:
            raise MalformedNumberError(f"Malformed number '{text}'", start) from None
        return Token(TokenType.NUMERIC_LITERAL, text, value=value, position=start)

    def _operator_token(self, symbol: str, start: int, preceding: list[Token]) -> Token:
        """Build an operator token, choosing the unary entry in prefix position."""
        binary = self.operators.binary(symbol)
        unary = self.operators.unary(symbol)

        previous = preceding[-1] if preceding else None
        prefix = previous is None or previous.type in PREFIX_CONTEXT

        if unary is not None and (prefix or binary is None):
            info = unary
        else:
            info = binary

        return Token(TokenType.OPERATOR, symbol, operator=info, position=start)


def tokenize(source: str, operators: OperatorTable | None = None) -> list[Token]:
    """Convenience function to tokenize an expression string."""
    return Tokenizer(operators).tokenize(source)
