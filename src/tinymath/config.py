"""Compiler configuration and operator file loading."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from tinymath.errors import ConfigError
from tinymath.operators import DEFAULT_OPERATORS, IMPLEMENTATIONS, OperatorTable
from tinymath.tokenizer import OPERATOR_CHARS
from tinymath.tokens import OperatorInfo

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class CompilerConfig:
    """Compiler configuration.

    Attributes:
        operators_file: Optional YAML file with extra operator entries
        log_level: Logging level name for the CLI
    """

    operators_file: Path | None = None
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> CompilerConfig:
        """Create config from environment variables.

        Reads:
        1. TINYMATH_OPERATORS_FILE: path to a YAML operator file
        2. TINYMATH_LOG_LEVEL: logging level name (default WARNING)
        """
        operators_file = os.environ.get("TINYMATH_OPERATORS_FILE")
        return cls(
            operators_file=Path(operators_file) if operators_file else None,
            log_level=os.environ.get("TINYMATH_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )

    def operator_table(self) -> OperatorTable:
        """Default operators extended with the entries from operators_file."""
        if self.operators_file is None:
            return DEFAULT_OPERATORS
        return DEFAULT_OPERATORS.extended(load_operator_file(self.operators_file))


def load_operator_file(path: Path) -> list[OperatorInfo]:
    """Load operator entries from a YAML file.

    Expected format:

        operators:
          - symbol: "**"
            precedence: 4
            arity: 2
            function: pow

    Raises:
        ConfigError: If the file is missing, unreadable or malformed
    """
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read operator file {path}: {e}") from None
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in operator file {path}: {e}") from None

    if data is None:
        logger.warning("Operator file %s is empty", path)
        return []

    if not isinstance(data, dict) or not isinstance(data.get("operators"), list):
        raise ConfigError(f"Operator file {path} must contain an 'operators' list")

    entries = [_parse_entry(raw, path, index) for index, raw in enumerate(data["operators"])]
    logger.info("Loaded %d operator(s) from %s", len(entries), path)
    return entries


def _parse_entry(raw: Any, path: Path, index: int) -> OperatorInfo:
    where = f"{path} entry {index}"

    if not isinstance(raw, dict):
        raise ConfigError(f"{where}: expected a mapping")

    symbol = raw.get("symbol")
    if not isinstance(symbol, str) or not symbol:
        raise ConfigError(f"{where}: 'symbol' must be a non-empty string")
    bad = [c for c in symbol if c not in OPERATOR_CHARS]
    if bad:
        raise ConfigError(f"{where}: '{symbol}' contains non-operator characters {bad}")

    precedence = raw.get("precedence")
    if not isinstance(precedence, int) or isinstance(precedence, bool):
        raise ConfigError(f"{where}: 'precedence' must be an integer")

    arity = raw.get("arity", 2)
    if not isinstance(arity, int) or isinstance(arity, bool) or arity not in (1, 2):
        raise ConfigError(f"{where}: 'arity' must be 1 or 2")

    function = raw.get("function")
    if function not in IMPLEMENTATIONS:
        raise ConfigError(
            f"{where}: unknown function '{function}'; "
            f"expected one of {', '.join(sorted(IMPLEMENTATIONS))}"
        )

    return OperatorInfo(symbol, precedence, arity, IMPLEMENTATIONS[function])
