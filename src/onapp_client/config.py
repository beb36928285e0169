"""Configuration management for the OnApp API client."""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from onapp_client.utils.http import normalize_api_url

_config_logger = logging.getLogger(__name__)


class LoggingSettings(BaseModel):
    level: str = Field(default="INFO", description="Python logging level name")
    file: str | None = Field(default=None, description="Optional log file path")


class ApiSettings(BaseModel):
    url: str = Field(default="http://127.0.0.1")
    username: str | None = Field(default=None)
    password: str | None = Field(default=None)
    timeout_seconds: float = Field(default=30.0, ge=0.1, le=600.0)
    verify_tls: bool = Field(default=True)

    @field_validator("url")
    @classmethod
    def _validate_url(cls, value: str) -> str:
        return normalize_api_url(value)


class TransactionSettings(BaseModel):
    chain_search_page_size: int = Field(
        default=100,
        ge=1,
        le=1000,
        description="per_page used when looking up the transaction of a just-submitted action.",
    )


class LimitsSettings(BaseModel):
    path: str | None = Field(
        default=None,
        description="Optional YAML file replacing the built-in access control limits table.",
    )


class Settings(BaseModel):
    api: ApiSettings = Field(default_factory=ApiSettings)
    transactions: TransactionSettings = Field(default_factory=TransactionSettings)
    limits: LimitsSettings = Field(default_factory=LimitsSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


ENV_KEYS = {
    "api_url": "ONAPP_API_URL",
    "username": "ONAPP_USERNAME",
    "password": "ONAPP_PASSWORD",
    "timeout_seconds": "ONAPP_TIMEOUT_SECONDS",
    "verify_tls": "ONAPP_VERIFY_TLS",
    "chain_search_page_size": "ONAPP_CHAIN_SEARCH_PAGE_SIZE",
    "limits_path": "ONAPP_LIMITS_PATH",
    "log_level": "LOG_LEVEL",
    "log_file": "LOG_FILE",
}

_TRUE_VALUES = frozenset({"1", "true", "yes"})


def _resolve_path(path: str) -> str:
    return str(Path(path).expanduser().resolve())


def _env_bool(key: str, default: bool) -> bool:
    value = os.getenv(key)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


def _env_int(key: str, default: int) -> int:
    value = os.getenv(key)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        _config_logger.warning(
            "Invalid integer value for %s: %r, using default %d", key, value, default
        )
        return default


def _env_float(key: str, default: float) -> float:
    value = os.getenv(key)
    if value is None or value.strip() == "":
        return default
    try:
        return float(value)
    except ValueError:
        _config_logger.warning(
            "Invalid float value for %s: %r, using default %s", key, value, default
        )
        return default


def load_settings() -> Settings:
    """Load configuration and cache the result."""

    return _load_settings_cached()


@lru_cache(maxsize=1)
def _load_settings_cached() -> Settings:
    load_dotenv(dotenv_path=Path.cwd() / ".env")
    log_file_env = os.getenv(ENV_KEYS["log_file"])
    limits_path_env = os.getenv(ENV_KEYS["limits_path"])

    settings_data: dict[str, object] = {
        "api": {
            "url": os.getenv(ENV_KEYS["api_url"], ApiSettings().url),
            "username": os.getenv(ENV_KEYS["username"]) or None,
            "password": os.getenv(ENV_KEYS["password"]) or None,
            "timeout_seconds": _env_float(
                ENV_KEYS["timeout_seconds"],
                ApiSettings().timeout_seconds,
            ),
            "verify_tls": _env_bool(ENV_KEYS["verify_tls"], ApiSettings().verify_tls),
        },
        "transactions": {
            "chain_search_page_size": _env_int(
                ENV_KEYS["chain_search_page_size"],
                TransactionSettings().chain_search_page_size,
            ),
        },
        "limits": {
            "path": _resolve_path(limits_path_env) if limits_path_env else None,
        },
        "logging": {
            "level": os.getenv(ENV_KEYS["log_level"], LoggingSettings().level),
            "file": _resolve_path(log_file_env) if log_file_env else None,
        },
    }

    try:
        return Settings.model_validate(settings_data)
    except ValidationError as exc:
        raise RuntimeError(f"Invalid configuration: {exc}") from exc
