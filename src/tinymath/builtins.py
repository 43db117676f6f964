"""Built-in functions for tinymath expressions.

This module registers the built-in functions with the FunctionRegistry.
Call register_all_builtins() before evaluating; Compiler does this itself.

Categories:
- Trigonometric: sin, cos, tan, asin, acos, atan
- Hyperbolic: sinh, cosh, tanh
- Exponential: sqrt, exp, log, ln
- Rounding: abs, floor, ceil
"""

import math

from tinymath.functions import (
    FunctionCategory,
    FunctionDefinition,
    FunctionRegistry,
)


def register_all_builtins() -> None:
    """Register all built-in functions with the FunctionRegistry."""
    _register_trigonometric_functions()
    _register_hyperbolic_functions()
    _register_exponential_functions()
    _register_rounding_functions()


def ensure_builtins() -> None:
    """Register any missing built-ins, keeping functions already registered.

    A caller's own definition of a built-in name (say a degree-based sin)
    wins over the built-in.
    """
    existing = FunctionRegistry.list_all()
    register_all_builtins()
    for func_def in existing:
        FunctionRegistry.register(func_def)


def _register(
    name: str,
    description: str,
    category: FunctionCategory,
    implementation,
    examples: list[str],
) -> None:
    FunctionRegistry.register(
        FunctionDefinition(
            name=name,
            description=description,
            category=category,
            implementation=implementation,
            examples=examples,
        )
    )


# -----------------------------------------------------------------------------
# Trigonometric Functions
# -----------------------------------------------------------------------------


def _register_trigonometric_functions() -> None:
    _register(
        "sin",
        "Sine of an angle in radians",
        FunctionCategory.TRIGONOMETRIC,
        math.sin,
        ["sin(0)", "sin(x) * 2"],
    )
    _register(
        "cos",
        "Cosine of an angle in radians",
        FunctionCategory.TRIGONOMETRIC,
        math.cos,
        ["cos(0)"],
    )
    _register(
        "tan",
        "Tangent of an angle in radians",
        FunctionCategory.TRIGONOMETRIC,
        math.tan,
        ["tan(x) / 2"],
    )
    _register(
        "asin",
        "Arc sine in radians; argument in [-1, 1]",
        FunctionCategory.TRIGONOMETRIC,
        math.asin,
        ["asin(1)"],
    )
    _register(
        "acos",
        "Arc cosine in radians; argument in [-1, 1]",
        FunctionCategory.TRIGONOMETRIC,
        math.acos,
        ["acos(0)"],
    )
    _register(
        "atan",
        "Arc tangent in radians",
        FunctionCategory.TRIGONOMETRIC,
        math.atan,
        ["atan(1) * 4"],
    )


# -----------------------------------------------------------------------------
# Hyperbolic Functions
# -----------------------------------------------------------------------------


def _register_hyperbolic_functions() -> None:
    _register("sinh", "Hyperbolic sine", FunctionCategory.HYPERBOLIC, math.sinh, ["sinh(1)"])
    _register("cosh", "Hyperbolic cosine", FunctionCategory.HYPERBOLIC, math.cosh, ["cosh(0)"])
    _register("tanh", "Hyperbolic tangent", FunctionCategory.HYPERBOLIC, math.tanh, ["tanh(x)"])


# -----------------------------------------------------------------------------
# Exponential Functions
# -----------------------------------------------------------------------------


def _register_exponential_functions() -> None:
    _register(
        "sqrt",
        "Square root; argument must not be negative",
        FunctionCategory.EXPONENTIAL,
        math.sqrt,
        ["sqrt(16)", "sqrt(x * x + y * y)"],
    )
    _register(
        "exp",
        "e raised to the argument",
        FunctionCategory.EXPONENTIAL,
        math.exp,
        ["exp(1)"],
    )
    _register(
        "log",
        "Base-10 logarithm; argument must be positive",
        FunctionCategory.EXPONENTIAL,
        math.log10,
        ["log(1000)"],
    )
    _register(
        "ln",
        "Natural logarithm; argument must be positive",
        FunctionCategory.EXPONENTIAL,
        math.log,
        ["ln(exp(2))"],
    )


# -----------------------------------------------------------------------------
# Rounding Functions
# -----------------------------------------------------------------------------


def _floor(value: float) -> float:
    return float(math.floor(value))


def _ceil(value: float) -> float:
    return float(math.ceil(value))


def _register_rounding_functions() -> None:
    _register(
        "abs",
        "Absolute value",
        FunctionCategory.ROUNDING,
        math.fabs,
        ["abs(0 - 5)"],
    )
    _register(
        "floor",
        "Largest whole number not greater than the argument",
        FunctionCategory.ROUNDING,
        _floor,
        ["floor(2.7)"],
    )
    _register(
        "ceil",
        "Smallest whole number not less than the argument",
        FunctionCategory.ROUNDING,
        _ceil,
        ["ceil(2.1)"],
    )
