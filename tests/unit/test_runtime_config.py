from __future__ import annotations

from pathlib import Path

import pytest

from gsapforge.config.runtime_config import (
    API_KEYS_ENV,
    DEFAULT_CONTEXT_ENV,
    LOG_LEVEL_ENV,
    MAX_REQUEST_CHARS_ENV,
    PORT_ENV,
    load_settings,
    masked_state,
    parse_env,
    validate_settings,
)

ALL_KEYS = (
    "GSAPFORGE_LOG_LEVEL",
    "GSAPFORGE_DEFAULT_CONTEXT",
    "GSAPFORGE_DEFAULT_COMPLEXITY",
    "GSAPFORGE_MAX_REQUEST_CHARS",
    "GSAPFORGE_API_KEYS",
    "GSAPFORGE_HOST",
    "GSAPFORGE_PORT",
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path: Path) -> Path:
    for key in ALL_KEYS:
        monkeypatch.delenv(key, raising=False)
    return tmp_path / ".env"


def test_defaults_without_env(clean_env: Path) -> None:
    settings = load_settings(clean_env)
    assert settings.log_level == "INFO"
    assert settings.default_context == "react"
    assert settings.default_complexity == "intermediate"
    assert settings.max_request_chars == 4000
    assert settings.api_keys == frozenset()
    assert settings.host == "127.0.0.1"
    assert settings.port == 8010


def test_env_file_is_read_and_process_env_wins(clean_env: Path, monkeypatch) -> None:
    clean_env.write_text(
        "# comment\nGSAPFORGE_DEFAULT_CONTEXT=vue\nGSAPFORGE_PORT=9100\nnot a pair\n",
        encoding="utf-8",
    )
    assert parse_env(clean_env) == {"GSAPFORGE_DEFAULT_CONTEXT": "vue", "GSAPFORGE_PORT": "9100"}
    monkeypatch.setenv(PORT_ENV, "9200")
    settings = load_settings(clean_env)
    assert settings.default_context == "vue"
    assert settings.port == 9200


@pytest.mark.parametrize(("raw", "expected"), [("50", 200), ("999999", 20000), ("abc", 4000), ("1500", 1500)])
def test_max_request_chars_is_clamped(clean_env: Path, monkeypatch, raw: str, expected: int) -> None:
    monkeypatch.setenv(MAX_REQUEST_CHARS_ENV, raw)
    assert load_settings(clean_env).max_request_chars == expected


def test_api_keys_and_log_level_parsing(clean_env: Path, monkeypatch) -> None:
    monkeypatch.setenv(API_KEYS_ENV, "alpha, beta,,")
    monkeypatch.setenv(LOG_LEVEL_ENV, "verbose")
    settings = load_settings(clean_env)
    assert settings.api_keys == frozenset({"alpha", "beta"})
    assert settings.log_level == "INFO"


def test_validate_settings_reports_errors_and_warnings() -> None:
    report = validate_settings(
        {
            LOG_LEVEL_ENV: "loud",
            DEFAULT_CONTEXT_ENV: "svelte",
            MAX_REQUEST_CHARS_ENV: "10",
            PORT_ENV: "abc",
        }
    )
    assert report["ok"] is False
    assert "Unsupported log level: LOUD" in report["errors"]
    assert f"{PORT_ENV} must be an integer" in report["errors"]
    assert any("svelte" in row for row in report["warnings"])
    assert any("clamped" in row for row in report["warnings"])
    assert any(API_KEYS_ENV in row for row in report["warnings"])


def test_validate_settings_accepts_defaults() -> None:
    report = validate_settings({API_KEYS_ENV: "k1"})
    assert report == {"ok": True, "errors": [], "warnings": []}


def test_masked_state_hides_api_keys() -> None:
    masked = masked_state({API_KEYS_ENV: "secret", LOG_LEVEL_ENV: "DEBUG"})
    assert masked[API_KEYS_ENV] == "********"
    assert masked[LOG_LEVEL_ENV] == "DEBUG"
