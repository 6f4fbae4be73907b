"""Configuration sources for the lwctest CLI."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from lwctest.core.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping

CONFIG_ENV_VAR = "LWCTEST_CLI_CONFIG"
LOGLEVEL_ENV_VAR = "LWCTEST_LOGLEVEL"
PROJECT_ROOT_ENV_VAR = "LWCTEST_PROJECT_ROOT"

DEFAULT_LOGLEVEL = "warn"

# Level names accepted by --loglevel, mapped onto stdlib logging levels.
LOG_LEVELS: dict[str, int] = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "fatal": logging.CRITICAL,
}


def parse_log_level(value: str) -> str:
    """Return the normalized level name for *value* or raise ``ValueError``."""
    normalized = value.strip().lower()
    if normalized not in LOG_LEVELS:
        message = f"Unknown log level '{value}'. Expected one of: {', '.join(LOG_LEVELS)}"
        raise ValueError(message)
    return normalized


class CliSettings(BaseModel):
    """Settings merged from the environment and the optional config file."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    loglevel: str = DEFAULT_LOGLEVEL
    project_root: str | None = None

    @field_validator("loglevel")
    @classmethod
    def _validate_loglevel(cls, value: str) -> str:
        return parse_log_level(value)


def config_path(env: Mapping[str, str] | None = None) -> Path:
    """Return the configuration file location honouring ``LWCTEST_CLI_CONFIG``."""
    environment = os.environ if env is None else env
    config_env = environment.get(CONFIG_ENV_VAR)
    if config_env:
        return Path(config_env).expanduser()
    return Path.home() / ".config" / "lwctest" / "config.json"


def load_config_file(path: Path) -> Mapping[str, Any] | None:
    """Read the JSON configuration at *path*, returning ``None`` when it is absent."""
    if not path.exists():
        return None

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as error:
        message = f"Failed to read CLI configuration from {path}: {error}"
        raise ConfigurationError(message) from error

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as error:
        message = f"Failed to parse CLI configuration from {path}: {error}"
        raise ConfigurationError(message) from error

    if not isinstance(payload, dict):
        message = f"CLI configuration at {path} must be a JSON object"
        raise ConfigurationError(message)

    return cast("Mapping[str, Any]", payload)


def resolve_settings(env: Mapping[str, str] | None = None) -> CliSettings:
    """Build :class:`CliSettings` from the config file overlaid with environment values."""
    environment = os.environ if env is None else env
    raw: dict[str, Any] = dict(load_config_file(config_path(environment)) or {})

    env_loglevel = environment.get(LOGLEVEL_ENV_VAR)
    if env_loglevel:
        raw["loglevel"] = env_loglevel
    env_project_root = environment.get(PROJECT_ROOT_ENV_VAR)
    if env_project_root:
        raw["project_root"] = env_project_root

    try:
        return CliSettings.model_validate(raw)
    except ValidationError as error:
        message = f"Invalid CLI configuration: {error.errors(include_url=False)}"
        raise ConfigurationError(message) from error


__all__ = [
    "CONFIG_ENV_VAR",
    "DEFAULT_LOGLEVEL",
    "LOGLEVEL_ENV_VAR",
    "LOG_LEVELS",
    "PROJECT_ROOT_ENV_VAR",
    "CliSettings",
    "config_path",
    "load_config_file",
    "parse_log_level",
    "resolve_settings",
]
