"""Reference CLI commands: operators, functions."""

import click

from tinymath.builtins import ensure_builtins
from tinymath.config import CompilerConfig
from tinymath.errors import CompileError
from tinymath.functions import FunctionCategory, FunctionRegistry


@click.command()
@click.pass_context
def operators(ctx: click.Context):
    """List the operator table, tightest binding first."""
    config: CompilerConfig = ctx.obj or CompilerConfig.from_env()
    try:
        table = config.operator_table()
    except CompileError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    click.echo(f"{'symbol':<8}{'precedence':>12}{'arity':>7}  implementation")
    for entry in table.to_dict():
        click.echo(
            f"{entry['symbol']:<8}{entry['precedence']:>12}{entry['arity']:>7}"
            f"  {entry['implementation']}"
        )


@click.command()
def functions():
    """List registered functions by category."""
    ensure_builtins()

    for category in FunctionCategory:
        defs = FunctionRegistry.list_by_category(category)
        if not defs:
            continue
        click.echo(click.style(category.value.capitalize(), bold=True))
        for func_def in sorted(defs, key=lambda f: f.name):
            click.echo(f"  {func_def.name:<6} {func_def.description}")
