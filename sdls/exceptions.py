"""Custom exceptions raised by sdls."""

from __future__ import annotations

from typing import Any, Optional


class SDLSError(Exception):
    """Base exception for all sdls specific failures."""


class ConfigError(SDLSError):
    """Raised when the configuration file is missing, unparsable or incomplete."""


class SecretSourceError(SDLSError):
    """Raised when the 1Password CLI fails to return a field."""

    def __init__(self, field: str, message: str):
        super().__init__(f"Failed to retrieve {field} from 1Password: {message}")
        self.field = field
        self.message = message


class AuthenticationError(SDLSError):
    """Raised when the NAS rejects the login or no OTP could be obtained."""


class SubmissionError(SDLSError):
    """Raised when Download Station refuses to create a task."""

    def __init__(self, message: str, status_code: int, response: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response = response
