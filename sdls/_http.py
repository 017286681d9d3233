"""Shared HTTP request utilities for the Download Station client."""

from __future__ import annotations

from typing import Any

import httpx


def build_form(base: dict[str, Any], **kwargs: Any) -> dict[str, str]:
    """Merge protocol fields with request fields, dropping None values.

    Download Station expects every form value as a string.
    """
    form = {**base, **kwargs}
    return {k: str(v) for k, v in form.items() if v is not None}


def parse_body(response: httpx.Response) -> dict[str, Any]:
    """Decode a JSON response body, treating an empty body as an empty dict."""
    if not response.content:
        return {}
    body = response.json()
    if not isinstance(body, dict):
        raise ValueError(f"Unexpected response body: {body!r}")
    return body


def error_types(body: dict[str, Any]) -> list[str]:
    """Return the error type names from a failed Synology response."""
    error = body.get("error")
    if not isinstance(error, dict):
        return []
    errors = error.get("errors")
    if not isinstance(errors, dict):
        return []
    types = errors.get("types") or []
    return [t.get("type") for t in types if isinstance(t, dict)]
