"""
Configuration loading.

The client itself only needs a base URL and a token. This module lets
applications keep those in a YAML file and override them from the
environment:

- PAPERLESS_URL
- PAPERLESS_TOKEN
- PAPERLESS_TIMEOUT (seconds)
- PAPERLESS_AUTH_SCHEME ("Bearer" or "Token")
"""

import os
from dataclasses import dataclass
from pathlib import Path

import yaml

DEFAULT_TIMEOUT = 30
DEFAULT_AUTH_SCHEME = "Bearer"


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""

    pass


@dataclass
class PaperlessConfig:
    """Paperless-ngx connection settings."""

    # API root, e.g. "https://paperless.example.com/api/"
    base_url: str
    token: str
    timeout_seconds: float = DEFAULT_TIMEOUT
    auth_scheme: str = DEFAULT_AUTH_SCHEME

    def validate(self) -> list[str]:
        """Validate configuration completeness.

        Returns:
            List of validation errors (empty if valid)
        """
        errors: list[str] = []

        if not self.base_url:
            errors.append("paperless.base_url is required")
        elif not self.base_url.lower().startswith(("http://", "https://")):
            errors.append("paperless.base_url must start with http:// or https://")
        if not self.token:
            errors.append("paperless.token is required")
        if self.timeout_seconds <= 0:
            errors.append("paperless.timeout_seconds must be positive")
        if not self.auth_scheme or " " in self.auth_scheme:
            errors.append("paperless.auth_scheme must be a single word")

        return errors


def load_config(config_path: Path) -> PaperlessConfig:
    """
    Load configuration from a YAML file.

    A missing file is treated as empty, so the environment alone can
    configure the client.
    """
    if config_path.exists():
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
    else:
        data = {}

    paperless_data = data.get("paperless", {}) or {}

    timeout = paperless_data.get("timeout_seconds", DEFAULT_TIMEOUT)
    timeout_env = os.environ.get("PAPERLESS_TIMEOUT", "")
    if timeout_env:
        try:
            timeout = float(timeout_env)
        except ValueError:
            raise ConfigValidationError(f"PAPERLESS_TIMEOUT is not a number: {timeout_env!r}")

    return PaperlessConfig(
        base_url=os.environ.get("PAPERLESS_URL", paperless_data.get("base_url", "")),
        token=os.environ.get("PAPERLESS_TOKEN", paperless_data.get("token", "")),
        timeout_seconds=timeout,
        auth_scheme=os.environ.get(
            "PAPERLESS_AUTH_SCHEME", paperless_data.get("auth_scheme", DEFAULT_AUTH_SCHEME)
        ),
    )
