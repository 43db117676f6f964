"""Tests for compiler configuration and operator files."""

import textwrap
from pathlib import Path

import pytest

from tinymath import Compiler, CompilerConfig, ConfigError, DEFAULT_OPERATORS, load_operator_file


def write_yaml(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "operators.yaml"
    path.write_text(textwrap.dedent(content))
    return path


@pytest.fixture
def power_file(tmp_path):
    return write_yaml(
        tmp_path,
        """
        operators:
          - symbol: "**"
            precedence: 4
            arity: 2
            function: pow
          - symbol: "%"
            precedence: 3
            function: mod
        """,
    )


class TestLoadOperatorFile:
    def test_load_entries(self, power_file):
        entries = load_operator_file(power_file)

        assert [e.symbol for e in entries] == ["**", "%"]
        assert entries[0].precedence == 4
        assert entries[0].arity == 2
        assert entries[1].arity == 2  # default
        assert entries[0].implementation(2, 3) == 8

    def test_empty_file(self, tmp_path):
        assert load_operator_file(write_yaml(tmp_path, "")) == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            load_operator_file(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        with pytest.raises(ConfigError):
            load_operator_file(write_yaml(tmp_path, "operators: [unclosed"))

    def test_missing_operators_list(self, tmp_path):
        with pytest.raises(ConfigError) as exc_info:
            load_operator_file(write_yaml(tmp_path, "symbols: []"))
        assert "'operators'" in str(exc_info.value)

    def test_unknown_function(self, tmp_path):
        path = write_yaml(
            tmp_path,
            """
            operators:
              - symbol: "^"
                precedence: 4
                function: power
            """,
        )
        with pytest.raises(ConfigError) as exc_info:
            load_operator_file(path)
        assert "power" in str(exc_info.value)

    def test_symbol_with_letters(self, tmp_path):
        path = write_yaml(
            tmp_path,
            """
            operators:
              - symbol: "mod"
                precedence: 3
                function: mod
            """,
        )
        with pytest.raises(ConfigError):
            load_operator_file(path)

    def test_bad_precedence(self, tmp_path):
        path = write_yaml(
            tmp_path,
            """
            operators:
              - symbol: "^"
                precedence: high
                function: pow
            """,
        )
        with pytest.raises(ConfigError):
            load_operator_file(path)

    def test_bad_arity(self, tmp_path):
        path = write_yaml(
            tmp_path,
            """
            operators:
              - symbol: "^"
                precedence: 4
                arity: 3
                function: pow
            """,
        )
        with pytest.raises(ConfigError):
            load_operator_file(path)

    def test_boolean_arity(self, tmp_path):
        path = write_yaml(
            tmp_path,
            """
            operators:
              - symbol: "~"
                precedence: 100
                arity: true
                function: neg
            """,
        )
        with pytest.raises(ConfigError):
            load_operator_file(path)


class TestCompilerConfig:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("TINYMATH_OPERATORS_FILE", raising=False)
        monkeypatch.delenv("TINYMATH_LOG_LEVEL", raising=False)

        config = CompilerConfig.from_env()

        assert config.operators_file is None
        assert config.log_level == "WARNING"
        assert config.operator_table() is DEFAULT_OPERATORS

    def test_from_env(self, monkeypatch, power_file):
        monkeypatch.setenv("TINYMATH_OPERATORS_FILE", str(power_file))
        monkeypatch.setenv("TINYMATH_LOG_LEVEL", "debug")

        config = CompilerConfig.from_env()

        assert config.operators_file == power_file
        assert config.log_level == "DEBUG"

    def test_operator_table_from_file(self, power_file):
        table = CompilerConfig(operators_file=power_file).operator_table()

        assert "**" in table
        assert Compiler(table).calculate("2**3*2") == 16.0
