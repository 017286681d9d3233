"""Connect command for the sdls CLI."""

from __future__ import annotations

import typer
from rich.console import Console

from sdls.cli.commands import get_client, get_config
from sdls.client import mask_session_id

console = Console()


def connect(ctx: typer.Context) -> None:
    """Verify connectivity and authentication with the server."""
    client = get_client(get_config(ctx))

    try:
        sid = client.authenticate()
    finally:
        client.close()

    if not sid:
        console.print("[red]Connection failed. Please check your credentials or server status.[/red]")
        raise typer.Exit(1)

    console.print(f"[green]Connection successful.[/green] Session ID: {mask_session_id(sid)}", highlight=False)
