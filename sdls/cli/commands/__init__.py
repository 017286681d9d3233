"""CLI command modules."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape

from sdls.config import Config, load_config
from sdls.exceptions import ConfigError

_err_console = Console(stderr=True)


def get_config(ctx: typer.Context) -> Config:
    """Load the configuration selected on the command line, or exit with an error message."""
    config_path = (ctx.obj or {}).get("config_path")
    try:
        return load_config(config_path)
    except ConfigError as e:
        _err_console.print(f"[red]{escape(str(e))}[/red]", highlight=False)
        raise typer.Exit(1)


def get_client(config: Config):
    """Build a DownloadStationClient for ``config``."""
    from sdls.client import DownloadStationClient

    return DownloadStationClient(config)
