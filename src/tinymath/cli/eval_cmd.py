"""Expression CLI commands: eval, tokens, rpn."""

import click

from tinymath.compiler import Compiler, format_result
from tinymath.config import CompilerConfig
from tinymath.errors import CompileError


def _compiler(ctx: click.Context) -> Compiler:
    """Build a compiler from the group's configuration."""
    config: CompilerConfig = ctx.obj or CompilerConfig.from_env()
    try:
        return Compiler(config.operator_table())
    except CompileError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)


def _parse_variables(ctx, param, values: tuple[str, ...]) -> dict[str, float]:
    variables: dict[str, float] = {}
    for item in values:
        name, sep, raw = item.partition("=")
        if not sep or not name:
            raise click.BadParameter(f"expected NAME=VALUE, got '{item}'")
        try:
            variables[name.strip()] = float(raw)
        except ValueError:
            raise click.BadParameter(f"'{raw}' is not a number") from None
    return variables


@click.command("eval")
@click.argument("expression")
@click.option(
    "--var",
    "-v",
    "variables",
    multiple=True,
    callback=_parse_variables,
    help="Variable value as NAME=VALUE (repeatable).",
)
@click.pass_context
def eval_cmd(ctx: click.Context, expression: str, variables: dict[str, float]):
    """Evaluate EXPRESSION and print the result.

        tinymath eval "(1 + 2) * 3"
        tinymath eval "x * 2" -v x=21
    """
    compiler = _compiler(ctx)
    try:
        result = compiler.calculate(expression, variables)
    except CompileError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    click.echo(f"Result = {format_result(result)}")


@click.command()
@click.argument("expression")
@click.pass_context
def tokens(ctx: click.Context, expression: str):
    """Print the tokens of EXPRESSION, one per line."""
    compiler = _compiler(ctx)
    try:
        token_list = compiler.tokenize(expression)
    except CompileError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    for token in token_list:
        click.echo(token.describe())


@click.command()
@click.argument("expression")
@click.pass_context
def rpn(ctx: click.Context, expression: str):
    """Print EXPRESSION in reverse Polish notation."""
    compiler = _compiler(ctx)
    try:
        postfix = compiler.compile(expression)
    except CompileError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    click.echo(" ".join(token.text for token in postfix))
