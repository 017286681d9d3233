"""Main entry point for the sdls CLI."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from .commands import add, config, connect

app = typer.Typer(
    name="sdls",
    help="sdls - Add magnet links to Synology Download Station",
    no_args_is_help=True,
)

app.command("config", help="Display the current configuration")(config.show_config)
app.command("connect", help="Verify connectivity and authentication with the server")(connect.connect)
app.command("add", help="Add a magnet link to Synology Download Station")(add.add)


def _version_callback(value: bool) -> None:
    """Handle --version and exit early."""
    if value:
        from sdls import __version__

        typer.echo(f"sdls {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to the configuration file (default: $SDLS_CONFIG_PATH or ~/.config/sdls.yml).",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the CLI version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """sdls CLI root callback."""
    _ = version
    _configure_logging(verbose)
    ctx.obj = {"config_path": config_path}


@app.command()
def version() -> None:
    """Display the sdls version."""
    from sdls import __version__

    typer.echo(f"sdls {__version__}")


if __name__ == "__main__":
    app()
