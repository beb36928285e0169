"""Limits loader for access control limit tables in YAML."""

from __future__ import annotations

from pathlib import Path

import yaml

from onapp_client.config import Settings
from onapp_client.limits.defaults import build_default_limits
from onapp_client.limits.models import AccessControlLimits, LimitsConfig


def load_limits(path: str) -> AccessControlLimits:
    limits_path = Path(path)
    if not limits_path.exists():
        raise FileNotFoundError(f"Limits file not found: {limits_path}")
    with limits_path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    return AccessControlLimits.from_config(LimitsConfig.from_yaml(data))


def limits_from_settings(settings: Settings) -> AccessControlLimits:
    if settings.limits.path:
        return load_limits(settings.limits.path)
    return build_default_limits()
