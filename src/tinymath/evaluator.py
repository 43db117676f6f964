"""Evaluator for postfix (RPN) token lists.

Walks the postfix list once with a value stack. Literals push their value;
operators and functions pop their operands and push the result. A well
formed expression leaves exactly one value on the stack.

Variables must be bound before evaluation. Binding turns a VARIABLE token
into a NUMERIC_LITERAL in place, keeping its text for diagnostics.
"""

import logging
from typing import Mapping

from tinymath.errors import (
    DivisionByZeroError,
    DomainError,
    MalformedExpressionError,
    NoSuchVariableError,
    NotAVariableError,
    StackUnderflowError,
    UnboundVariableError,
    UnexpectedTokenError,
    UnknownFunctionError,
)
from tinymath.functions import FunctionRegistry
from tinymath.tokens import Token, TokenType

logger = logging.getLogger(__name__)


class Evaluator:
    """Evaluates postfix token lists.

    The value stack is created per call, so one evaluator can be reused
    for any number of expressions.

    Usage:
        postfix = to_postfix(tokenize("(1 + 2) * 3"))
        result = Evaluator().evaluate(postfix)  # 9.0
    """

    def evaluate(self, postfix: list[Token]) -> float:
        """Evaluate a postfix token list and return the result."""
        stack: list[float] = []

        for token in postfix:
            method_name = f"_eval_{token.type.name.lower()}"
            method = getattr(self, method_name, None)

            if method is None:
                raise UnexpectedTokenError(
                    f"Cannot evaluate {token.type.name} token '{token.text}'",
                    token.position,
                )

            method(token, stack)

        if len(stack) != 1:
            raise MalformedExpressionError(
                f"Expression left {len(stack)} values on the stack, expected 1"
            )

        logger.debug("Evaluated %d instructions to %r", len(postfix), stack[0])
        return stack[0]

    # -------------------------------------------------------------------------
    # Token type evaluators
    # -------------------------------------------------------------------------

    def _eval_numeric_literal(self, token: Token, stack: list[float]) -> None:
        stack.append(token.value)

    def _eval_variable(self, token: Token, stack: list[float]) -> None:
        raise UnboundVariableError(
            f"Variable '{token.text}' has no value", token.position
        )

    def _eval_operator(self, token: Token, stack: list[float]) -> None:
        info = token.operator
        if info is None:
            raise UnexpectedTokenError(
                f"Operator '{token.text}' has no table entry", token.position
            )

        operands = self._pop_operands(token, info.arity, stack)

        try:
            result = info.implementation(*operands)
        except ZeroDivisionError:
            raise DivisionByZeroError("Division by zero", token.position) from None
        except (OverflowError, ValueError) as e:
            raise DomainError(
                f"Error applying '{token.text}': {e}", token.position
            ) from None

        stack.append(self._check_real(result, token))

    def _eval_function(self, token: Token, stack: list[float]) -> None:
        if not FunctionRegistry.is_registered(token.text):
            raise UnknownFunctionError(
                f"Unknown function: {token.text}", token.position
            )

        func_def = FunctionRegistry.get(token.text)
        (argument,) = self._pop_operands(token, 1, stack)

        try:
            result = func_def.implementation(argument)
        except ZeroDivisionError:
            raise DivisionByZeroError(
                f"Division by zero in {token.text}", token.position
            ) from None
        except (OverflowError, ValueError) as e:
            raise DomainError(
                f"Error calling {token.text}({argument!r}): {e}", token.position
            ) from None

        stack.append(self._check_real(result, token))

    # -------------------------------------------------------------------------
    # Helper methods
    # -------------------------------------------------------------------------

    def _pop_operands(self, token: Token, count: int, stack: list[float]) -> list[float]:
        """Pop `count` values, returned left-hand side first."""
        if len(stack) < count:
            raise StackUnderflowError(
                f"'{token.text}' needs {count} operand(s) but {len(stack)} available",
                token.position,
            )
        operands = stack[-count:]
        del stack[-count:]
        return operands

    def _check_real(self, result: object, token: Token) -> float:
        # operator.pow returns complex for fractional powers of negatives
        if isinstance(result, complex):
            raise DomainError(
                f"'{token.text}' produced a complex result", token.position
            )
        return float(result)  # type: ignore[arg-type]


# -----------------------------------------------------------------------------
# Variable binding
# -----------------------------------------------------------------------------


def bind(tokens: list[Token], name: str, value: float) -> Token:
    """Bind the first unbound variable called `name` to `value`.

    The token is changed in place from VARIABLE to NUMERIC_LITERAL.

    Returns:
        The bound token

    Raises:
        NotAVariableError: If tokens named `name` exist but none is an
            unbound variable
        NoSuchVariableError: If no token is named `name`
    """
    found = False
    for token in tokens:
        if token.text != name:
            continue
        found = True
        if token.type == TokenType.VARIABLE:
            _set_value(token, value)
            return token

    if found:
        raise NotAVariableError(f"'{name}' is not an unbound variable")
    raise NoSuchVariableError(f"No variable named '{name}'")


def bind_all(tokens: list[Token], variables: Mapping[str, float]) -> int:
    """Bind every unbound occurrence of each named variable.

    Returns:
        Number of tokens bound

    Raises:
        NotAVariableError: If a name only matches non-variable tokens
        NoSuchVariableError: If a name matches no token at all
    """
    total = 0
    for name, value in variables.items():
        matched = [t for t in tokens if t.text == name]
        if not matched:
            raise NoSuchVariableError(f"No variable named '{name}'")

        unbound = [t for t in matched if t.type == TokenType.VARIABLE]
        if not unbound and not any(t.type == TokenType.NUMERIC_LITERAL for t in matched):
            raise NotAVariableError(f"'{name}' is not a variable")

        for token in unbound:
            _set_value(token, value)
        total += len(unbound)

    return total


def unbound_variables(tokens: list[Token]) -> list[str]:
    """Names of variables that still need a value, sorted."""
    return sorted({t.text for t in tokens if t.type == TokenType.VARIABLE})


def _set_value(token: Token, value: float) -> None:
    token.type = TokenType.NUMERIC_LITERAL
    token.value = float(value)
    logger.debug("Bound %s = %r", token.text, token.value)


def evaluate(postfix: list[Token]) -> float:
    """Convenience function to evaluate a postfix token list."""
    return Evaluator().evaluate(postfix)
