"""Add command for the sdls CLI."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console

from sdls.auth.prompt import TerminalPrompt
from sdls.cli.commands import get_client, get_config
from sdls.config import Config
from sdls.magnet import display_name, is_magnet

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)

DESTINATION_PROMPT = "Choose download directory"


def _read_clipboard() -> str | None:
    """Return the clipboard text, or None if it cannot be read."""
    try:
        import pyperclip

        return pyperclip.paste()
    except Exception:
        logger.debug("Could not read clipboard", exc_info=True)
        return None


def _choose_destination(config: Config, prompt: TerminalPrompt) -> str:
    directories = list(config.directories)
    if not directories:
        return prompt.ask_plain("Destination directory:")
    if len(directories) == 1:
        return directories[0]
    return prompt.choose(DESTINATION_PROMPT, directories, default=directories[0])


def add(
    ctx: typer.Context,
    magnet: Optional[str] = typer.Argument(None, help="Magnet link (read from the clipboard if omitted)"),
) -> None:
    """Add a magnet link to Synology Download Station."""
    if magnet is None:
        magnet = _read_clipboard()

    if not is_magnet(magnet):
        err_console.print("[red]Invalid or missing magnet link.[/red]")
        raise typer.Exit(1)
    magnet = magnet.strip()

    config = get_config(ctx)

    name = display_name(magnet)
    if name:
        console.print(f"Adding torrent: {name}", markup=False, highlight=False)

    destination = _choose_destination(config, TerminalPrompt())

    client = get_client(config)
    try:
        sid = client.authenticate()
        if not sid:
            raise typer.Exit(1)
        if not client.create_download(sid, magnet, destination):
            raise typer.Exit(1)
    finally:
        client.close()
