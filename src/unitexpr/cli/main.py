from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from .._version import __version__
from ..config import get_settings
from ..errors import UnitStringError
from ..expressions import build_product, build_quotient
from ..units import Unit
from ..unit_string import UnitString
from ..utils.logging import configure_from_settings, flush_handlers, log_event
from .config import app as config_app

__all__ = ["app", "run"]


app = typer.Typer(help="Parse and compose unit expressions", add_completion=False)
app.add_typer(config_app, name="config")


@app.callback(invoke_without_command=True)
def version_callback(
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", help="Show unitexpr version and exit", is_eager=True),
) -> None:
    """Handle global options before any sub-command executes."""

    if version:
        typer.echo(f"unitexpr {__version__}")
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _describe(expression: str, value: float | Unit) -> dict:
    if isinstance(value, Unit):
        return {"expression": expression, "kind": "unit", **value.to_dict()}
    return {"expression": expression, "kind": "number", "magnitude": value, "dim": {}}


@app.command("parse")
def parse_command(
    expression: str = typer.Argument(..., help="Unit expression, e.g. 'kg.m/s2'"),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", dir_okay=False, help="Write JSON-lines diagnostics to this file"
    ),
) -> None:
    """Resolve EXPRESSION and print its magnitude and dimension as JSON."""

    logger = configure_from_settings(get_settings(), log_file)
    try:
        value = UnitString().parse(expression)
    except UnitStringError as exc:
        log_event(logger, "cli.parse_failed", expression=expression, token=exc.token, error=str(exc))
        flush_handlers(logger)
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)
    log_event(logger, "cli.parsed", expression=expression)
    flush_handlers(logger)
    typer.echo(json.dumps(_describe(expression, value), indent=2, ensure_ascii=False))


@app.command("product")
def product_command(
    first: str = typer.Argument(..., help="First unit code"),
    second: str = typer.Argument(..., help="Second unit code"),
) -> None:
    """Print the code of FIRST multiplied by SECOND."""

    typer.echo(build_product(first, second))


@app.command("quotient")
def quotient_command(
    first: str = typer.Argument(..., help="Dividend unit code"),
    second: str = typer.Argument("", help="Divisor unit code (empty for identity)"),
) -> None:
    """Print the code of FIRST divided by SECOND."""

    typer.echo(build_quotient(first, second))


def run() -> None:
    """Entry point compatible with ``python -m unitexpr.cli.main`` and console scripts."""

    from typer.main import get_command

    cli = get_command(app)
    cli()


if __name__ == "__main__":  # pragma: no cover
    run()
