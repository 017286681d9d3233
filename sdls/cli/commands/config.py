"""Config command for the sdls CLI."""

from __future__ import annotations

import typer
from rich.console import Console

from sdls.cli.commands import get_config

console = Console()


def show_config(ctx: typer.Context) -> None:
    """Display the current configuration."""
    config = get_config(ctx)

    lines = [
        "Current config:",
        f"  host: {config.host}",
        f"  username: {config.username or ''}",
        "  password: [REDACTED]",
    ]
    if config.op_item_name:
        lines.append(f"  op_item_name: {config.op_item_name}")
    if config.op_account:
        lines.append(f"  op_account: {config.op_account}")
    if config.directories:
        lines.append(f"  directories: {', '.join(config.directories)}")

    for line in lines:
        console.print(line, markup=False, highlight=False)
