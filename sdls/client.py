"""Synchronous HTTP client for Synology Download Station."""

from __future__ import annotations

import logging
from typing import Any

import httpx
import typer
from rich.console import Console

from ._http import build_form, error_types, parse_body
from .auth.constants import (
    AUTH_ENDPOINT,
    AUTH_PARAMS,
    ERROR_AUTH_FAILED,
    ERROR_MISSING_SID,
    ERROR_OTP_UNAVAILABLE,
    MAX_LOGIN_ATTEMPTS,
    OTP_ERROR_TYPE,
    TASK_ENDPOINT,
    TASK_PARAMS,
)
from .auth.credentials import resolve_credentials, resolve_otp
from .auth.onepassword import OnePasswordCLI
from .auth.prompt import TerminalPrompt
from .auth.types import Credentials
from .config import DEFAULT_TIMEOUT_SECONDS, Config, sanitize_host
from .exceptions import AuthenticationError, SubmissionError

logger = logging.getLogger(__name__)

SESSION_ID_DISPLAY_LENGTH = 8


def mask_session_id(sid: str) -> str:
    """Shorten a session id for display."""
    return f"{sid[:SESSION_ID_DISPLAY_LENGTH]}..."


def _is_success(response: httpx.Response) -> bool:
    return 200 <= response.status_code < 300


class DownloadStationClient:
    """Client for the Synology auth and Download Station task APIs.

    Example:
        >>> from sdls import DownloadStationClient, load_config
        >>> with DownloadStationClient(load_config()) as client:
        ...     sid = client.authenticate()
        ...     if sid:
        ...         client.create_download(sid, "magnet:?xt=urn:btih:...", "downloads")

    Credentials are resolved on the first call to ``authenticate`` from the
    configuration, 1Password, or the terminal, in that order.
    """

    def __init__(
        self,
        config: Config,
        *,
        credentials: Credentials | None = None,
        secret_source: OnePasswordCLI | None = None,
        prompt: TerminalPrompt | None = None,
        console: Console | None = None,
        err_console: Console | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._config = config
        self._host = sanitize_host(config.host)
        self._credentials = credentials
        self._console = console or Console()
        self._err_console = err_console or Console(stderr=True)
        self._secret_source = secret_source or OnePasswordCLI(console=self._console)
        self._prompt = prompt or TerminalPrompt()
        self._client = httpx.Client(timeout=timeout)

    @property
    def credentials(self) -> Credentials:
        if self._credentials is None:
            self._credentials = resolve_credentials(
                self._config,
                secret_source=self._secret_source,
                prompt=self._prompt,
                console=self._console,
            )
        return self._credentials

    def authenticate(self, otp: str | None = None) -> str | None:
        """Log in and return a session id.

        If the NAS asks for a one-time code and ``otp`` was not given, a code
        is fetched from 1Password or the terminal and the login is retried
        once.

        Returns:
            The session id, or None on any failure. Failures are reported on
            stderr and never raised.
        """
        try:
            return self._login(otp)
        except typer.Abort:
            raise
        except Exception as e:
            logger.debug("Login failed", exc_info=True)
            self._err_console.print(f"Authentication error: {e}", markup=False, highlight=False)
            return None

    def create_download(self, session_id: str, magnet_uri: str, destination: str) -> bool:
        """Create a Download Station task for ``magnet_uri``.

        Returns:
            True if the NAS accepted the task, False otherwise.
        """
        try:
            self._create_task(session_id, magnet_uri, destination)
        except SubmissionError as e:
            self._err_console.print(f"Download creation failed: {e.message}", markup=False, highlight=False)
            return False
        except (httpx.HTTPError, ValueError) as e:
            self._err_console.print(f"Download creation failed: {e}", markup=False, highlight=False)
            return False

        self._console.print(f"Download created successfully in {destination}", markup=False)
        return True

    def _login(self, otp: str | None) -> str:
        for attempt in range(1, MAX_LOGIN_ATTEMPTS + 1):
            logger.debug("Login attempt %d (otp=%s)", attempt, "yes" if otp else "no")
            body = self._post_login(otp)

            if body.get("success"):
                sid = (body.get("data") or {}).get("sid")
                if not sid:
                    raise AuthenticationError(ERROR_MISSING_SID)
                return sid

            if otp is None and OTP_ERROR_TYPE in error_types(body) and attempt < MAX_LOGIN_ATTEMPTS:
                self._console.print("OTP required for authentication.")
                otp = resolve_otp(
                    self._config,
                    secret_source=self._secret_source,
                    prompt=self._prompt,
                    console=self._console,
                )
                if not otp:
                    raise AuthenticationError(ERROR_OTP_UNAVAILABLE)
                continue

            raise AuthenticationError(f"{ERROR_AUTH_FAILED}: {body.get('error', body)}")

        raise AuthenticationError(ERROR_AUTH_FAILED)

    def _post_login(self, otp: str | None) -> dict[str, Any]:
        credentials = self.credentials
        form = build_form(
            AUTH_PARAMS,
            account=credentials.username,
            passwd=credentials.password,
            otp_code=otp,
        )
        response = self._client.post(f"{self._host}{AUTH_ENDPOINT}", data=form)
        if not _is_success(response):
            raise AuthenticationError(f"HTTP error: {response.status_code}")
        return parse_body(response)

    def _create_task(self, session_id: str, magnet_uri: str, destination: str) -> None:
        form = build_form(TASK_PARAMS, _sid=session_id, uri=magnet_uri, destination=destination)
        response = self._client.post(f"{self._host}{TASK_ENDPOINT}", data=form)
        if not _is_success(response):
            raise SubmissionError(
                message=response.text or f"HTTP error: {response.status_code}",
                status_code=response.status_code,
                response=response,
            )

        body = parse_body(response)
        if not body.get("success"):
            raise SubmissionError(message=str(body), status_code=response.status_code, response=response)

    def close(self) -> None:
        """Release the underlying HTTP client resources."""
        self._client.close()

    def __enter__(self) -> DownloadStationClient:
        return self

    def __exit__(self, exc_type: type | None, exc: BaseException | None, traceback: Any) -> None:
        self.close()
