"""Shunting-yard conversion from infix tokens to postfix (RPN) order.

Operators are left-associative: an incoming binary operator first moves
every stacked operator of greater or equal precedence to the output.
Prefix (unary) operators and functions are pushed without popping anything
and leave the holding stack once their operand is complete.

The output list holds the same Token objects as the input, so binding a
variable in either list affects both.
"""

import logging

from tinymath.errors import (
    UnbalancedParenthesesError,
    UnexpectedParenthesisError,
    UnexpectedTokenError,
    UnknownOperatorOnStackError,
)
from tinymath.tokens import Token, TokenType

logger = logging.getLogger(__name__)


def to_postfix(tokens: list[Token]) -> list[Token]:
    """Reorder an infix token list into postfix order.

    Args:
        tokens: Tokens as produced by the tokenizer

    Returns:
        A new list in evaluation order

    Raises:
        UnexpectedParenthesisError: If ')' has no matching '(' on the stack
        UnbalancedParenthesesError: If '(' is still open at the end
        UnknownOperatorOnStackError: If a non-operator blocks the stack
        UnexpectedTokenError: On an UNKNOWN token
    """
    holding: list[Token] = []
    output: list[Token] = []

    for token in tokens:
        if token.type in (TokenType.NUMERIC_LITERAL, TokenType.VARIABLE):
            output.append(token)

        elif token.type == TokenType.OPERATOR:
            if token.operator is None:
                raise UnexpectedTokenError(
                    f"Operator '{token.text}' has no table entry", token.position
                )
            if not token.operator.is_unary:
                _pop_higher_precedence(token, holding, output)
            holding.append(token)

        elif token.type in (TokenType.PAREN_OPEN, TokenType.FUNCTION):
            holding.append(token)

        elif token.type == TokenType.PAREN_CLOSE:
            while holding and holding[-1].type != TokenType.PAREN_OPEN:
                output.append(holding.pop())
            if not holding:
                raise UnexpectedParenthesisError(
                    "Closing parenthesis without matching '('", token.position
                )
            holding.pop()
            # A function directly before '(' owns the group just closed
            if holding and holding[-1].type == TokenType.FUNCTION:
                output.append(holding.pop())

        elif token.type == TokenType.UNKNOWN:
            raise UnexpectedTokenError(f"Bad symbol '{token.text}'", token.position)

        else:
            raise AssertionError(f"Unhandled token type: {token.type}")

    while holding:
        top = holding.pop()
        if top.type == TokenType.PAREN_OPEN:
            raise UnbalancedParenthesesError(
                "Opening parenthesis is never closed", top.position
            )
        output.append(top)

    logger.debug("Postfix: %s", " ".join(t.text for t in output))
    return output


def _pop_higher_precedence(
    incoming: Token, holding: list[Token], output: list[Token]
) -> None:
    """Move stacked operators that bind at least as tightly to the output."""
    if incoming.operator is None:
        raise UnexpectedTokenError(
            f"Operator '{incoming.text}' has no table entry", incoming.position
        )
    precedence = incoming.operator.precedence

    while holding and holding[-1].type != TokenType.PAREN_OPEN:
        top = holding[-1]
        if top.type == TokenType.FUNCTION:
            output.append(holding.pop())
        elif top.type == TokenType.OPERATOR and top.operator is not None:
            if top.operator.precedence >= precedence:
                output.append(holding.pop())
            else:
                break
        else:
            raise UnknownOperatorOnStackError(
                f"Unexpected '{top.text}' on the operator stack", top.position
            )
