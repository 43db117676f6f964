"""Error types for the tinymath compiler.

Every failure raised by the tokenizer, converter, evaluator or binder is a
CompileError. Each subclass fixes an ErrorKind so callers can branch on
`error.kind` or catch the specific class.
"""

from enum import Enum


class ErrorKind(Enum):
    """Distinguishable failure kinds."""

    # Tokenizer
    EMPTY_INPUT = "empty_input"
    UNEXPECTED_CHARACTER = "unexpected_character"
    MALFORMED_NUMBER = "malformed_number"
    UNRECOGNIZED_OPERATOR = "unrecognized_operator"
    UNBALANCED_PARENTHESES = "unbalanced_parentheses"

    # Converter
    UNEXPECTED_PARENTHESIS = "unexpected_parenthesis"
    UNKNOWN_OPERATOR_ON_STACK = "unknown_operator_on_stack"
    UNEXPECTED_TOKEN = "unexpected_token"

    # Evaluator
    STACK_UNDERFLOW = "stack_underflow"
    UNBOUND_VARIABLE = "unbound_variable"
    UNKNOWN_FUNCTION = "unknown_function"
    DOMAIN_ERROR = "domain_error"
    DIVISION_BY_ZERO = "division_by_zero"
    MALFORMED_EXPRESSION = "malformed_expression"

    # Binding
    NOT_A_VARIABLE = "not_a_variable"
    NO_SUCH_VARIABLE = "no_such_variable"

    # Configuration
    INVALID_CONFIG = "invalid_config"


class CompileError(Exception):
    """Base error for all tinymath failures.

    Attributes:
        kind: The failure kind
        message: Human-readable description without position info
        position: 0-based character offset in the source, if known
    """

    kind: ErrorKind = ErrorKind.MALFORMED_EXPRESSION

    def __init__(self, message: str, position: int | None = None):
        self.message = message
        self.position = position
        if position is None:
            super().__init__(message)
        else:
            super().__init__(f"{message} at position {position}")


class EmptyInputError(CompileError):
    kind = ErrorKind.EMPTY_INPUT


class UnexpectedCharacterError(CompileError):
    kind = ErrorKind.UNEXPECTED_CHARACTER


class MalformedNumberError(CompileError):
    kind = ErrorKind.MALFORMED_NUMBER


class UnrecognizedOperatorError(CompileError):
    kind = ErrorKind.UNRECOGNIZED_OPERATOR


class UnbalancedParenthesesError(CompileError):
    kind = ErrorKind.UNBALANCED_PARENTHESES


class UnexpectedParenthesisError(CompileError):
    kind = ErrorKind.UNEXPECTED_PARENTHESIS


class UnknownOperatorOnStackError(CompileError):
    kind = ErrorKind.UNKNOWN_OPERATOR_ON_STACK


class UnexpectedTokenError(CompileError):
    kind = ErrorKind.UNEXPECTED_TOKEN


class StackUnderflowError(CompileError):
    kind = ErrorKind.STACK_UNDERFLOW


class UnboundVariableError(CompileError):
    kind = ErrorKind.UNBOUND_VARIABLE


class UnknownFunctionError(CompileError):
    kind = ErrorKind.UNKNOWN_FUNCTION


class DomainError(CompileError):
    kind = ErrorKind.DOMAIN_ERROR


class DivisionByZeroError(CompileError):
    kind = ErrorKind.DIVISION_BY_ZERO


class MalformedExpressionError(CompileError):
    kind = ErrorKind.MALFORMED_EXPRESSION


class NotAVariableError(CompileError):
    kind = ErrorKind.NOT_A_VARIABLE


class NoSuchVariableError(CompileError):
    kind = ErrorKind.NO_SUCH_VARIABLE


class ConfigError(CompileError):
    kind = ErrorKind.INVALID_CONFIG
