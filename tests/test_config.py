"""Tests for configuration loading."""

from pathlib import Path

import pytest

from paperless_api.config import (
    DEFAULT_AUTH_SCHEME,
    DEFAULT_TIMEOUT,
    ConfigValidationError,
    PaperlessConfig,
    load_config,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's environment out of these tests."""
    for name in ("PAPERLESS_URL", "PAPERLESS_TOKEN", "PAPERLESS_TIMEOUT", "PAPERLESS_AUTH_SCHEME"):
        monkeypatch.delenv(name, raising=False)


class TestLoadConfig:
    """Tests for load_config."""

    def test_from_yaml(self, tmp_path: Path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "paperless:\n"
            '  base_url: "https://paperless.local/api/"\n'
            '  token: "abc123"\n'
            "  timeout_seconds: 10\n"
            '  auth_scheme: "Token"\n'
        )

        config = load_config(config_file)

        assert config.base_url == "https://paperless.local/api/"
        assert config.token == "abc123"
        assert config.timeout_seconds == 10
        assert config.auth_scheme == "Token"

    def test_missing_file_uses_defaults(self, tmp_path: Path):
        config = load_config(tmp_path / "nope.yaml")

        assert config.base_url == ""
        assert config.timeout_seconds == DEFAULT_TIMEOUT
        assert config.auth_scheme == DEFAULT_AUTH_SCHEME

    def test_env_overrides(self, tmp_path: Path, monkeypatch):
        config_file = tmp_path / "config.yaml"
        config_file.write_text('paperless:\n  base_url: "https://file/api/"\n  token: "file"\n')
        monkeypatch.setenv("PAPERLESS_URL", "https://env/api/")
        monkeypatch.setenv("PAPERLESS_TOKEN", "env-token")
        monkeypatch.setenv("PAPERLESS_TIMEOUT", "2.5")

        config = load_config(config_file)

        assert config.base_url == "https://env/api/"
        assert config.token == "env-token"
        assert config.timeout_seconds == 2.5

    def test_bad_timeout_env(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("PAPERLESS_TIMEOUT", "soon")
        with pytest.raises(ConfigValidationError):
            load_config(tmp_path / "config.yaml")

    def test_empty_yaml(self, tmp_path: Path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")
        assert load_config(config_file).token == ""


class TestValidate:
    """Tests for PaperlessConfig.validate."""

    def test_valid(self):
        config = PaperlessConfig(base_url="https://x/api/", token="T")
        assert config.validate() == []

    def test_missing_fields(self):
        errors = PaperlessConfig(base_url="", token="").validate()
        assert "paperless.base_url is required" in errors
        assert "paperless.token is required" in errors

    def test_bad_values(self):
        errors = PaperlessConfig(
            base_url="paperless.local", token="T", timeout_seconds=0, auth_scheme="Bearer X"
        ).validate()
        assert len(errors) == 3
