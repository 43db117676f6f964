"""Operator table for the tinymath compiler.

The table maps operator symbols to their precedence, arity and
implementation. Binary (infix) and unary (prefix) entries live in separate
maps so the same symbol can be both, as `+` and `-` are.

The tokenizer matches symbols greedily against the table, so adding a
multi-character operator such as `**` only needs a new entry here.
"""

import operator
from types import MappingProxyType
from typing import Iterable, Mapping

from tinymath.tokens import OperatorInfo

# Implementations that configuration files may refer to by name
IMPLEMENTATIONS = MappingProxyType(
    {
        "add": operator.add,
        "sub": operator.sub,
        "mul": operator.mul,
        "truediv": operator.truediv,
        "floordiv": operator.floordiv,
        "mod": operator.mod,
        "pow": operator.pow,
        "pos": operator.pos,
        "neg": operator.neg,
    }
)

UNARY_PRECEDENCE = 100


class OperatorTable:
    """Immutable symbol → OperatorInfo lookup.

    Usage:
        table = OperatorTable.default()
        table.binary("*")   # OperatorInfo(symbol='*', precedence=3, arity=2)
        table.unary("-")    # OperatorInfo(symbol='-', precedence=100, arity=1)

        power = table.extended([OperatorInfo("**", 4, 2, operator.pow)])
    """

    def __init__(self, entries: Iterable[OperatorInfo] = ()):
        binary: dict[str, OperatorInfo] = {}
        unary: dict[str, OperatorInfo] = {}
        for info in entries:
            if info.arity == 1:
                unary[info.symbol] = info
            elif info.arity == 2:
                binary[info.symbol] = info
            else:
                raise ValueError(
                    f"Operator '{info.symbol}' has unsupported arity {info.arity}"
                )
        self._binary: Mapping[str, OperatorInfo] = MappingProxyType(binary)
        self._unary: Mapping[str, OperatorInfo] = MappingProxyType(unary)

    @classmethod
    def default(cls) -> "OperatorTable":
        """The four arithmetic operators plus unary sign operators."""
        return cls(
            [
                OperatorInfo("*", 3, 2, operator.mul),
                OperatorInfo("/", 3, 2, operator.truediv),
                OperatorInfo("+", 1, 2, operator.add),
                OperatorInfo("-", 1, 2, operator.sub),
                OperatorInfo("+", UNARY_PRECEDENCE, 1, operator.pos),
                OperatorInfo("-", UNARY_PRECEDENCE, 1, operator.neg),
            ]
        )

    def extended(self, entries: Iterable[OperatorInfo]) -> "OperatorTable":
        """Return a new table with extra entries; later entries win."""
        return OperatorTable([*self, *entries])

    def binary(self, symbol: str) -> OperatorInfo | None:
        return self._binary.get(symbol)

    def unary(self, symbol: str) -> OperatorInfo | None:
        return self._unary.get(symbol)

    def is_known(self, symbol: str) -> bool:
        """Check if a symbol has a binary or unary entry."""
        return symbol in self._binary or symbol in self._unary

    def __contains__(self, symbol: object) -> bool:
        return isinstance(symbol, str) and self.is_known(symbol)

    def __iter__(self):
        yield from self._binary.values()
        yield from self._unary.values()

    def __len__(self) -> int:
        return len(self._binary) + len(self._unary)

    def to_dict(self) -> list[dict[str, object]]:
        """Export entries for display, ordered by descending precedence."""
        return [
            {
                "symbol": info.symbol,
                "precedence": info.precedence,
                "arity": info.arity,
                "implementation": getattr(info.implementation, "__name__", "?"),
            }
            for info in sorted(self, key=lambda i: (-i.precedence, i.arity, i.symbol))
        ]


DEFAULT_OPERATORS = OperatorTable.default()
