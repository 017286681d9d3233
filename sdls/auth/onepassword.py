"""1Password CLI adapter.

Wraps ``op item get`` so the rest of sdls can ask for a named field of a
named item without knowing how the CLI is invoked.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import threading

from rich.console import Console

from ..exceptions import SecretSourceError
from .constants import FORCE_OP_CLI_ENV_VAR, OP_BINARY, OP_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})

_availability: bool | None = None
_availability_lock = threading.Lock()


def _forced_availability() -> bool | None:
    value = os.environ.get(FORCE_OP_CLI_ENV_VAR)
    if value is None:
        return None
    value = value.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    return None


def cli_available() -> bool:
    """Return whether the ``op`` binary can be used, probing at most once per process."""
    global _availability
    with _availability_lock:
        if _availability is None:
            forced = _forced_availability()
            if forced is not None:
                _availability = forced
            else:
                _availability = shutil.which(OP_BINARY) is not None
            logger.debug("1Password CLI available: %s", _availability)
        return _availability


def reset_availability_cache() -> None:
    """Forget the memoized availability check."""
    global _availability
    with _availability_lock:
        _availability = None


class OnePasswordCLI:
    """Fetches fields and one-time codes from 1Password items."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def available(self) -> bool:
        return cli_available()

    def fetch_field(self, item_name: str, field_name: str, account: str | None = None) -> str | None:
        """Fetch a single field of an item.

        Returns:
            The trimmed field value, or None when the CLI printed nothing.

        Raises:
            SecretSourceError: If the CLI exits non-zero or cannot be run.
        """
        self._console.print(f"Fetching {field_name} from 1Password...")
        args = [OP_BINARY, "item", "get", item_name, "--fields", field_name, "--reveal"]
        return self._run(args, field_name, account)

    def fetch_otp(self, item_name: str, account: str | None = None) -> str | None:
        """Fetch the current one-time code of an item."""
        self._console.print("Fetching OTP from 1Password...")
        args = [OP_BINARY, "item", "get", item_name, "--otp"]
        return self._run(args, "otp", account)

    def _run(self, args: list[str], field_name: str, account: str | None) -> str | None:
        if account:
            args = [*args, "--account", account]

        try:
            result = subprocess.run(
                args,
                capture_output=True,
                text=True,
                timeout=OP_TIMEOUT_SECONDS,
            )
        except subprocess.TimeoutExpired as e:
            raise SecretSourceError(field_name, "1Password CLI timed out") from e
        except OSError as e:
            raise SecretSourceError(field_name, str(e)) from e

        if result.returncode != 0:
            message = (result.stderr or "").strip() or f"op exited with status {result.returncode}"
            raise SecretSourceError(field_name, message)

        value = (result.stdout or "").strip()
        return value or None
