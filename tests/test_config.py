"""Tests for the sdls.config module."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from sdls.config import DEFAULT_CONFIG_PATH, Config, get_config_path, load_config, sanitize_host
from sdls.exceptions import ConfigError


class TestLoadConfig:
    def test_full_config(self, write_config):
        path = write_config(
            {
                "host": "http://nas.local:5000",
                "username": "test_user",
                "password": "test_pass",
                "op_item_name": "MyItem",
                "op_account": "my.1password.com",
                "directories": ["test/dir", "another"],
            }
        )
        config = load_config(path)
        assert config.host == "http://nas.local:5000"
        assert config.username == "test_user"
        assert config.password == "test_pass"
        assert config.op_item_name == "MyItem"
        assert config.op_account == "my.1password.com"
        assert config.directories == ("test/dir", "another")

    def test_defaults_are_set(self, write_config):
        config = load_config(write_config({"host": "http://nas.local:5000"}))
        assert config.username is None
        assert config.password is None
        assert config.op_item_name is None
        assert config.op_account is None
        assert config.directories == ()

    def test_trailing_slash_stripped_from_host(self, write_config):
        config = load_config(write_config({"host": "http://nas.local:5000/"}))
        assert config.host == "http://nas.local:5000"

    def test_numeric_password_becomes_string(self, write_config):
        config = load_config(write_config("host: http://nas.local:5000\npassword: 123456\n"))
        assert config.password == "123456"

    def test_missing_host(self, write_config):
        path = write_config({"username": "test_user", "password": "test_pass"})
        with pytest.raises(ConfigError, match="missing required keys.*host"):
            load_config(path)

    def test_empty_host(self, write_config):
        path = write_config({"host": "  ", "username": "test_user"})
        with pytest.raises(ConfigError, match="missing required keys.*host"):
            load_config(path)

    def test_file_not_found(self):
        with pytest.raises(ConfigError, match="Configuration file not found"):
            load_config("/nonexistent/path/config.yml")

    def test_invalid_yaml_syntax(self, write_config):
        path = write_config("invalid: yaml: content: [")
        with pytest.raises(ConfigError, match="Error parsing configuration file"):
            load_config(path)

    def test_non_mapping_document_treated_as_empty(self, write_config):
        path = write_config("- just\n- a list\n")
        with pytest.raises(ConfigError, match="host"):
            load_config(path)

    def test_directories_must_be_a_list_of_strings(self, write_config):
        path = write_config({"host": "http://nas.local:5000", "directories": "downloads"})
        with pytest.raises(ConfigError, match="directories"):
            load_config(path)

    def test_config_is_immutable(self, write_config):
        config = load_config(write_config({"host": "http://nas.local:5000"}))
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.host = "http://other"  # type: ignore[misc]

    def test_repr_hides_password(self):
        config = Config(host="http://nas.local:5000", username="u", password="hunter2")
        assert "hunter2" not in repr(config)
        assert "[REDACTED]" in repr(config)


class TestConfigPath:
    def test_explicit_path_wins(self, monkeypatch):
        monkeypatch.setenv("SDLS_CONFIG_PATH", "/from/env.yml")
        assert get_config_path("/explicit.yml") == Path("/explicit.yml")

    def test_env_var_used_when_no_path(self, monkeypatch):
        monkeypatch.setenv("SDLS_CONFIG_PATH", "/from/env.yml")
        assert get_config_path() == Path("/from/env.yml")

    def test_default_path(self):
        assert get_config_path() == DEFAULT_CONFIG_PATH
        assert DEFAULT_CONFIG_PATH.name == "sdls.yml"

    def test_load_uses_env_var(self, monkeypatch, write_config):
        path = write_config({"host": "http://env.local:5000"})
        monkeypatch.setenv("SDLS_CONFIG_PATH", str(path))
        assert load_config().host == "http://env.local:5000"


def test_sanitize_host():
    assert sanitize_host(" http://nas.local:5000// ") == "http://nas.local:5000"
