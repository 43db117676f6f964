"""Token types for the tinymath compiler.

A token is one lexical unit of an arithmetic expression. Its `type` decides
which of the other fields mean anything:

- NUMERIC_LITERAL: `value` holds the parsed number
- OPERATOR: `operator` holds precedence, arity and implementation
- VARIABLE: `value` is unset until the variable is bound, at which point the
  token turns into a NUMERIC_LITERAL in place
- FUNCTION: `text` is the function name
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable


class TokenType(Enum):
    """Kinds of lexical unit."""

    UNKNOWN = auto()
    NUMERIC_LITERAL = auto()
    OPERATOR = auto()
    PAREN_OPEN = auto()
    PAREN_CLOSE = auto()
    VARIABLE = auto()
    FUNCTION = auto()


TYPE_LABELS = {
    TokenType.UNKNOWN: "[UNKNOWN]",
    TokenType.NUMERIC_LITERAL: "[Literal, Numeric]",
    TokenType.OPERATOR: "[Operator]",
    TokenType.PAREN_OPEN: "[Parenthesis, Open]",
    TokenType.PAREN_CLOSE: "[Parenthesis, Close]",
    TokenType.VARIABLE: "[Variable]",
    TokenType.FUNCTION: "[Function]",
}


@dataclass(frozen=True)
class OperatorInfo:
    """Operator table entry.

    Attributes:
        symbol: Operator text as written in expressions
        precedence: Higher binds tighter
        arity: 1 for prefix operators, 2 for infix operators
        implementation: Applied to the operands, left-hand side first
    """

    symbol: str
    precedence: int
    arity: int
    implementation: Callable[..., float] = field(repr=False)

    @property
    def is_unary(self) -> bool:
        return self.arity == 1


@dataclass
class Token:
    """A single token produced by the tokenizer.

    Attributes:
        type: The token type
        text: Source text (operator symbol, name, or numeric text)
        value: Numeric payload for literals and bound variables
        operator: Operator entry, only for OPERATOR tokens
        position: Character offset in the source string
    """

    type: TokenType
    text: str
    value: float = 0.0
    operator: OperatorInfo | None = None
    position: int = 0

    def describe(self) -> str:
        """Human-readable description, e.g. ``[Operator] : *``."""
        return f"{TYPE_LABELS[self.type]} : {self.text}"

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.text!r}, pos={self.position})"
