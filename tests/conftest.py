"""Test configuration for sdls tests."""

from __future__ import annotations

import io
import json
from typing import Any
from unittest.mock import MagicMock

import httpx
import pytest
import yaml
from rich.console import Console

from sdls.auth.onepassword import OnePasswordCLI, reset_availability_cache
from sdls.auth.prompt import TerminalPrompt


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch):
    """Isolate every test from the caller's environment and the availability cache."""
    monkeypatch.delenv("SDLS_CONFIG_PATH", raising=False)
    monkeypatch.delenv("SDLS_FORCE_OP_CLI", raising=False)
    reset_availability_cache()
    yield
    reset_availability_cache()


@pytest.fixture
def console():
    """A rich Console writing into a buffer; read it with ``console.file.getvalue()``."""
    return Console(file=io.StringIO(), width=200, color_system=None)


@pytest.fixture
def secret_source():
    source = MagicMock(spec=OnePasswordCLI)
    source.available.return_value = True
    return source


@pytest.fixture
def prompt():
    return MagicMock(spec=TerminalPrompt)


@pytest.fixture
def write_config(tmp_path):
    """Write a YAML config file and return its path."""

    def _write(data: Any, name: str = "sdls.yml"):
        path = tmp_path / name
        path.write_text(data if isinstance(data, str) else yaml.safe_dump(data))
        return path

    return _write


def make_response(status_code: int = 200, body: Any = None) -> MagicMock:
    """Build a mocked httpx.Response with a JSON body."""
    response = MagicMock(spec=httpx.Response)
    response.status_code = status_code
    content = json.dumps(body).encode() if body is not None else b""
    response.content = content
    response.text = content.decode()
    response.json.return_value = body
    return response


def auth_success(sid: str = "test_session_id_12345") -> MagicMock:
    return make_response(200, {"success": True, "data": {"sid": sid}})


def auth_failure(code: int = 400) -> MagicMock:
    return make_response(200, {"success": False, "error": {"code": code}})


def otp_required() -> MagicMock:
    return make_response(
        200,
        {"success": False, "error": {"code": 403, "errors": {"types": [{"type": "otp"}]}}},
    )
