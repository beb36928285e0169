from __future__ import annotations

import pytest

from onapp_client import config


def test_defaults() -> None:
    settings = config.load_settings()

    assert settings.api.url == "http://127.0.0.1"
    assert settings.api.username is None
    assert settings.api.verify_tls is True
    assert settings.transactions.chain_search_page_size == 100
    assert settings.limits.path is None
    assert settings.logging.level == "INFO"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.setenv("ONAPP_API_URL", "HTTPS://cp.example.com/api/")
    monkeypatch.setenv("ONAPP_USERNAME", "admin")
    monkeypatch.setenv("ONAPP_PASSWORD", "changeme")
    monkeypatch.setenv("ONAPP_TIMEOUT_SECONDS", "12.5")
    monkeypatch.setenv("ONAPP_VERIFY_TLS", "no")
    monkeypatch.setenv("ONAPP_CHAIN_SEARCH_PAGE_SIZE", "40")
    monkeypatch.setenv("ONAPP_LIMITS_PATH", str(tmp_path / "limits.yaml"))
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = config.load_settings()

    assert settings.api.url == "https://cp.example.com/api"
    assert settings.api.username == "admin"
    assert settings.api.password == "changeme"
    assert settings.api.timeout_seconds == 12.5
    assert settings.api.verify_tls is False
    assert settings.transactions.chain_search_page_size == 40
    assert settings.limits.path == str((tmp_path / "limits.yaml").resolve())
    assert settings.logging.level == "DEBUG"


def test_settings_are_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    first = config.load_settings()
    monkeypatch.setenv("ONAPP_CHAIN_SEARCH_PAGE_SIZE", "7")

    assert config.load_settings() is first


def test_env_int_invalid_value_returns_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TEST_INT_INVALID", "not_a_number")
    assert config._env_int("TEST_INT_INVALID", 42) == 42


def test_env_int_uses_default_for_blank(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TEST_INT_VALUE", "")
    assert config._env_int("TEST_INT_VALUE", 7) == 7


def test_env_float_invalid_value_returns_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TEST_FLOAT_INVALID", "not_a_float")
    assert config._env_float("TEST_FLOAT_INVALID", 2.5) == 2.5


def test_env_bool(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TEST_BOOL", " Yes ")
    assert config._env_bool("TEST_BOOL", False) is True
    assert config._env_bool("TEST_BOOL_MISSING", True) is True


def test_invalid_page_size_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ONAPP_CHAIN_SEARCH_PAGE_SIZE", "0")

    with pytest.raises(RuntimeError, match="Invalid configuration"):
        config.load_settings()


@pytest.mark.parametrize(
    "url",
    ["ftp://cp.example.com", "https://cp.example.com/?x=1", "https://user:pw@cp.example.com"],
)
def test_invalid_api_url_raises(monkeypatch: pytest.MonkeyPatch, url: str) -> None:
    monkeypatch.setenv("ONAPP_API_URL", url)

    with pytest.raises(RuntimeError, match="Invalid configuration"):
        config.load_settings()
