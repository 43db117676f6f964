"""Function registry for tinymath expressions.

Functions are written as a multi-letter name followed by their single
argument, e.g. `sin(x)` or `sqrt(2)`. Every function takes exactly one
number and returns one number.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable


class FunctionCategory(Enum):
    """Categories for organizing functions in listings."""

    TRIGONOMETRIC = "trigonometric"
    HYPERBOLIC = "hyperbolic"
    EXPONENTIAL = "exponential"
    ROUNDING = "rounding"


@dataclass
class FunctionDefinition:
    """Definition of a unary expression function.

    Attributes:
        name: Function name as used in expressions
        description: Human-readable description
        category: Category for listings
        implementation: Callable taking one float and returning a float
        examples: Example expressions using this function
    """

    name: str
    description: str
    category: FunctionCategory
    implementation: Callable[[float], float]
    examples: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "category": self.category.value,
            "examples": self.examples,
        }


class FunctionRegistry:
    """Registry for expression functions.

    Example:
        FunctionRegistry.register(FunctionDefinition(
            name="sin",
            description="Sine of an angle in radians",
            category=FunctionCategory.TRIGONOMETRIC,
            implementation=math.sin,
        ))

        FunctionRegistry.call("sin", 0.0)  # Returns 0.0
    """

    _functions: dict[str, FunctionDefinition] = {}

    @classmethod
    def register(cls, func_def: FunctionDefinition) -> None:
        """Register a function definition, replacing any with the same name."""
        cls._functions[func_def.name] = func_def

    @classmethod
    def get(cls, name: str) -> FunctionDefinition:
        """Get a function definition by name.

        Raises:
            ValueError: If function is not registered
        """
        if name not in cls._functions:
            raise ValueError(f"Unknown function: {name}")
        return cls._functions[name]

    @classmethod
    def is_registered(cls, name: str) -> bool:
        return name in cls._functions

    @classmethod
    def call(cls, name: str, argument: float) -> float:
        """Call a registered function with its single argument."""
        return cls.get(name).implementation(argument)

    @classmethod
    def list_all(cls) -> list[FunctionDefinition]:
        return list(cls._functions.values())

    @classmethod
    def list_by_category(cls, category: FunctionCategory) -> list[FunctionDefinition]:
        return [f for f in cls._functions.values() if f.category == category]

    @classmethod
    def clear(cls) -> None:
        """Clear all registrations. Primarily for testing."""
        cls._functions.clear()
