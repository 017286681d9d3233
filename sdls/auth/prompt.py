"""Interactive terminal prompts."""

from __future__ import annotations

from typing import Sequence

import typer
from rich.prompt import Prompt


class TerminalPrompt:
    """Blocking prompts on the controlling terminal."""

    def ask_plain(self, label: str) -> str:
        return typer.prompt(label)

    def ask_masked(self, label: str) -> str:
        return typer.prompt(label, hide_input=True)

    def choose(self, label: str, choices: Sequence[str], default: str | None = None) -> str:
        """Ask the user to pick one of ``choices``."""
        if default is None:
            return Prompt.ask(label, choices=list(choices))
        return Prompt.ask(label, choices=list(choices), default=default)
