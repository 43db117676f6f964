"""tinymath: arithmetic expression compiler.

This package provides:
- Tokenizer: Converts expression text into tokens (finite state machine)
- to_postfix: Reorders tokens into RPN with the shunting-yard algorithm
- Evaluator: Evaluates RPN token lists with a value stack
- Compiler: Runs the whole pipeline with variable binding
- FunctionRegistry: Registry for unary functions such as sin
"""

from tinymath.builtins import register_all_builtins
from tinymath.compiler import Compiler, calculate, format_result
from tinymath.config import CompilerConfig, load_operator_file
from tinymath.converter import to_postfix
from tinymath.errors import (
    CompileError,
    ConfigError,
    DivisionByZeroError,
    DomainError,
    EmptyInputError,
    ErrorKind,
    MalformedExpressionError,
    MalformedNumberError,
    NoSuchVariableError,
    NotAVariableError,
    StackUnderflowError,
    UnbalancedParenthesesError,
    UnboundVariableError,
    UnexpectedCharacterError,
    UnexpectedParenthesisError,
    UnexpectedTokenError,
    UnknownFunctionError,
    UnknownOperatorOnStackError,
    UnrecognizedOperatorError,
)
from tinymath.evaluator import Evaluator, bind, bind_all, evaluate, unbound_variables
from tinymath.functions import FunctionCategory, FunctionDefinition, FunctionRegistry
from tinymath.operators import DEFAULT_OPERATORS, OperatorTable
from tinymath.tokenizer import Tokenizer, tokenize
from tinymath.tokens import OperatorInfo, Token, TokenType

__all__ = [
    # Compiler
    "Compiler",
    "calculate",
    "format_result",
    # Configuration
    "CompilerConfig",
    "load_operator_file",
    # Tokenizer
    "Tokenizer",
    "tokenize",
    "Token",
    "TokenType",
    # Operators
    "DEFAULT_OPERATORS",
    "OperatorInfo",
    "OperatorTable",
    # Converter
    "to_postfix",
    # Evaluator
    "Evaluator",
    "bind",
    "bind_all",
    "evaluate",
    "unbound_variables",
    # Functions
    "FunctionCategory",
    "FunctionDefinition",
    "FunctionRegistry",
    "register_all_builtins",
    # Errors
    "CompileError",
    "ConfigError",
    "DivisionByZeroError",
    "DomainError",
    "EmptyInputError",
    "ErrorKind",
    "MalformedExpressionError",
    "MalformedNumberError",
    "NoSuchVariableError",
    "NotAVariableError",
    "StackUnderflowError",
    "UnbalancedParenthesesError",
    "UnboundVariableError",
    "UnexpectedCharacterError",
    "UnexpectedParenthesisError",
    "UnexpectedTokenError",
    "UnknownFunctionError",
    "UnknownOperatorOnStackError",
    "UnrecognizedOperatorError",
]
