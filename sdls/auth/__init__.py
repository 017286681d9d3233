"""Authentication utilities for sdls."""

from .credentials import resolve_credentials, resolve_otp
from .onepassword import OnePasswordCLI, cli_available, reset_availability_cache
from .prompt import TerminalPrompt
from .types import Credentials

__all__ = [
    "cli_available",
    "reset_availability_cache",
    "resolve_credentials",
    "resolve_otp",
    "Credentials",
    "OnePasswordCLI",
    "TerminalPrompt",
]
