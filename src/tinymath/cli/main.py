"""tinymath CLI entry point."""

import logging
from pathlib import Path

import click

from tinymath.config import CompilerConfig


@click.group()
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (default: TINYMATH_LOG_LEVEL or WARNING).",
)
@click.option(
    "--operators",
    "operators_file",
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML file with extra operators (default: TINYMATH_OPERATORS_FILE).",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None, operators_file: Path | None):
    """tinymath: compile arithmetic expressions to RPN and evaluate them."""
    config = CompilerConfig.from_env()
    if log_level:
        config.log_level = log_level.upper()
    if operators_file:
        config.operators_file = operators_file

    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


# Register subcommands
from tinymath.cli.eval_cmd import eval_cmd, rpn, tokens  # noqa: E402
from tinymath.cli.info_cmd import functions, operators  # noqa: E402

cli.add_command(eval_cmd)
cli.add_command(tokens)
cli.add_command(rpn)
cli.add_command(operators)
cli.add_command(functions)
