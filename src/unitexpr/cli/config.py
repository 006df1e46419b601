"""Commands to inspect the resolved unitexpr configuration."""
from __future__ import annotations

import json
from pathlib import Path

import typer

from ..config import get_settings
from ..registry import load_prefix_table, load_unit_table

__all__ = ["app"]

app = typer.Typer(help="Inspect catalog locations and logging settings.", add_completion=False)


@app.command("paths")
def show_paths(
    config_file: Path = typer.Option(
        None,
        "--config-file",
        exists=True,
        dir_okay=False,
        readable=True,
        help="TOML/YAML configuration to use instead of environment variables.",
    ),
    refresh: bool = typer.Option(
        False,
        "--refresh",
        help="Ignore the cache and rebuild settings from the environment or file.",
    ),
    check_catalogs: bool = typer.Option(
        True,
        "--check-catalogs/--no-check-catalogs",
        help="Load both catalogs and report how many entries they hold.",
    ),
) -> None:
    """Print the resolved settings as JSON."""

    settings = get_settings(refresh=refresh, config_file=config_file)
    payload = {
        "config_source": str(config_file) if config_file else "environment",
        "settings": settings.as_dict(),
    }
    if check_catalogs:
        payload["catalogs"] = {
            "units": len(load_unit_table(settings.units_path)),
            "prefixes": len(load_prefix_table(settings.prefixes_path)),
        }
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
