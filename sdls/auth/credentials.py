"""Credential and OTP resolution.

Credentials are assembled field by field with this precedence:
configuration file > 1Password item > interactive prompt. A field supplied
by the configuration is never looked up in 1Password, and each missing field
costs at most one 1Password round-trip before falling back to a prompt.
"""

from __future__ import annotations

import logging

from rich.console import Console

from ..config import Config
from ..exceptions import AuthenticationError, SecretSourceError
from .constants import OTP_PROMPT, PASSWORD_PROMPT, USERNAME_PROMPT
from .onepassword import OnePasswordCLI
from .prompt import TerminalPrompt
from .types import Credentials

logger = logging.getLogger(__name__)

_FIELDS = ("username", "password")


def _present(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value


def _use_secret_source(config: Config, secret_source: OnePasswordCLI) -> bool:
    return bool(config.op_item_name) and secret_source.available()


def _fetch_missing(
    config: Config,
    values: dict[str, str | None],
    secret_source: OnePasswordCLI,
    console: Console,
) -> None:
    console.print("Fetching credentials from 1Password...")
    retrieved = []
    for field in _FIELDS:
        if values[field]:
            continue
        try:
            value = secret_source.fetch_field(config.op_item_name, field, config.op_account)
        except SecretSourceError as e:
            console.print(f"1Password error: {e}")
            continue
        if value:
            values[field] = value
            retrieved.append(field)

    if retrieved:
        console.print(f"Successfully retrieved {' and '.join(retrieved)} from 1Password")
    else:
        console.print("No credentials found in 1Password item")


def _prompt_field(field: str, prompt: TerminalPrompt, console: Console) -> str:
    console.print(f"No {field} available, please enter manually")
    if field == "password":
        value = prompt.ask_masked(PASSWORD_PROMPT)
    else:
        value = prompt.ask_plain(USERNAME_PROMPT)
    return value or ""


def resolve_credentials(
    config: Config,
    secret_source: OnePasswordCLI | None = None,
    prompt: TerminalPrompt | None = None,
    console: Console | None = None,
) -> Credentials:
    """Build a complete Credentials value for ``config``.

    Raises:
        AuthenticationError: If a prompted field is left empty.
    """
    console = console or Console()
    secret_source = secret_source or OnePasswordCLI(console=console)
    prompt = prompt or TerminalPrompt()

    username = _present(config.username)
    password = _present(config.password)
    if username and password:
        logger.debug("Using credentials from configuration file")
        return Credentials(username=username, password=password)

    values = {"username": username, "password": password}
    if _use_secret_source(config, secret_source):
        _fetch_missing(config, values, secret_source, console)

    for field in _FIELDS:
        if not values[field]:
            values[field] = _prompt_field(field, prompt, console)

    credentials = Credentials(username=values["username"], password=values["password"])
    if not credentials.complete:
        missing = [field for field in _FIELDS if not _present(getattr(credentials, field))]
        raise AuthenticationError(f"No {' or '.join(missing)} provided")
    return credentials


def resolve_otp(
    config: Config,
    secret_source: OnePasswordCLI | None = None,
    prompt: TerminalPrompt | None = None,
    console: Console | None = None,
) -> str | None:
    """Obtain a one-time code: 1Password first, then a masked prompt.

    Returns None when neither source produced a code.
    """
    console = console or Console()
    secret_source = secret_source or OnePasswordCLI(console=console)
    prompt = prompt or TerminalPrompt()

    if _use_secret_source(config, secret_source):
        try:
            otp = secret_source.fetch_otp(config.op_item_name, config.op_account)
        except SecretSourceError as e:
            console.print(f"1Password error: {e}")
            otp = None
        if otp:
            return otp
        console.print("No OTP found in 1Password item")

    otp = _present(prompt.ask_masked(OTP_PROMPT))
    return otp.strip() if otp else None
