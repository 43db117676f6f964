"""Compiler facade for the tinymath pipeline.

Ties the three stages together:

    text --tokenize--> tokens --to_postfix--> postfix --evaluate--> float

Every stage keeps its working stacks local to the call, so a Compiler holds
nothing but its operator table and can be reused or shared freely.
"""

import logging
from typing import Mapping

from tinymath.builtins import ensure_builtins
from tinymath.converter import to_postfix
from tinymath.evaluator import Evaluator, bind, bind_all
from tinymath.operators import DEFAULT_OPERATORS, OperatorTable
from tinymath.tokenizer import Tokenizer
from tinymath.tokens import Token

logger = logging.getLogger(__name__)


class Compiler:
    """Compiles and evaluates arithmetic expressions.

    Usage:
        compiler = Compiler()
        compiler.calculate("(1 + 2) * 3")          # 9.0
        compiler.calculate("x * x", {"x": 4})      # 16.0

        postfix = compiler.compile("x + 1")
        compiler.bind(postfix, "x", 10)
        compiler.evaluate(postfix)                 # 11.0
    """

    def __init__(self, operators: OperatorTable | None = None):
        self.operators = operators if operators is not None else DEFAULT_OPERATORS
        self._tokenizer = Tokenizer(self.operators)
        self._evaluator = Evaluator()
        ensure_builtins()

    def tokenize(self, source: str) -> list[Token]:
        return self._tokenizer.tokenize(source)

    def to_postfix(self, tokens: list[Token]) -> list[Token]:
        return to_postfix(tokens)

    def evaluate(self, postfix: list[Token]) -> float:
        return self._evaluator.evaluate(postfix)

    def bind(self, tokens: list[Token], name: str, value: float) -> Token:
        return bind(tokens, name, value)

    def compile(self, source: str) -> list[Token]:
        """Tokenize and convert an expression to postfix order."""
        return to_postfix(self.tokenize(source))

    def calculate(
        self, source: str, variables: Mapping[str, float] | None = None
    ) -> float:
        """Compile an expression, bind its variables and evaluate it.

        Args:
            source: The expression text
            variables: Values for single-letter variables in the expression

        Returns:
            The numeric result
        """
        postfix = self.compile(source)
        if variables:
            bind_all(postfix, variables)
        result = self.evaluate(postfix)
        logger.debug("%s = %r", source, result)
        return result


def format_result(value: float) -> str:
    """Format a result with six decimal places, e.g. ``12.000000``."""
    return f"{value:f}"


_default_compiler: Compiler | None = None


def calculate(source: str, variables: Mapping[str, float] | None = None) -> float:
    """Evaluate an expression string with the default operator table.

    This is the main entry point for one-off evaluation.

    Example:
        result = calculate("8 - 3 - 2")
        # result = 3.0
    """
    global _default_compiler
    if _default_compiler is None:
        _default_compiler = Compiler()
    return _default_compiler.calculate(source, variables)
