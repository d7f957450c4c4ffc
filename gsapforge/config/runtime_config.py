from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

PROJECT_ROOT = Path(__file__).resolve().parents[2]
ENV_PATH = PROJECT_ROOT / ".env"

LOG_LEVEL_ENV = "GSAPFORGE_LOG_LEVEL"
DEFAULT_CONTEXT_ENV = "GSAPFORGE_DEFAULT_CONTEXT"
DEFAULT_COMPLEXITY_ENV = "GSAPFORGE_DEFAULT_COMPLEXITY"
MAX_REQUEST_CHARS_ENV = "GSAPFORGE_MAX_REQUEST_CHARS"
API_KEYS_ENV = "GSAPFORGE_API_KEYS"
HOST_ENV = "GSAPFORGE_HOST"
PORT_ENV = "GSAPFORGE_PORT"

SECRET_KEYS = {API_KEYS_ENV}

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
VALID_CONTEXTS = ("react", "vanilla", "nextjs", "vue", "performance-critical", "mobile-optimized")
VALID_COMPLEXITIES = ("simple", "intermediate", "advanced", "expert")


@dataclass(frozen=True)
class Settings:
    log_level: str
    default_context: str
    default_complexity: str
    max_request_chars: int
    api_keys: frozenset[str]
    host: str
    port: int


def parse_env(path: Path) -> dict[str, str]:
    if not path.exists():
        return {}
    values: dict[str, str] = {}
    for raw in path.read_text(encoding="utf-8").splitlines():
        line = raw.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        values[key.strip()] = value.strip()
    return values


def _lookup(name: str, file_values: dict[str, str]) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        raw = file_values.get(name, "")
    return str(raw).strip()


def _int_value(raw: str, fallback: int, min_value: int, max_value: int) -> int:
    if not raw:
        return fallback
    try:
        value = int(raw)
    except ValueError:
        return fallback
    return max(min_value, min(max_value, value))


def load_settings(env_path: Path | None = None) -> Settings:
    """Resolve settings from the process environment, falling back to the ``.env`` file."""
    file_values = parse_env(env_path or ENV_PATH)

    log_level = _lookup(LOG_LEVEL_ENV, file_values).upper() or "INFO"
    if log_level not in VALID_LOG_LEVELS:
        log_level = "INFO"

    keys_raw = _lookup(API_KEYS_ENV, file_values)
    return Settings(
        log_level=log_level,
        default_context=_lookup(DEFAULT_CONTEXT_ENV, file_values).lower() or "react",
        default_complexity=_lookup(DEFAULT_COMPLEXITY_ENV, file_values).lower() or "intermediate",
        max_request_chars=_int_value(_lookup(MAX_REQUEST_CHARS_ENV, file_values), 4000, 200, 20000),
        api_keys=frozenset(row.strip() for row in keys_raw.split(",") if row.strip()),
        host=_lookup(HOST_ENV, file_values) or "127.0.0.1",
        port=_int_value(_lookup(PORT_ENV, file_values), 8010, 1, 65535),
    )


def configure_logging(settings: Settings | None = None) -> None:
    resolved = settings or load_settings()
    logging.basicConfig(
        level=getattr(logging, resolved.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def masked_state(values: dict[str, str]) -> dict[str, str]:
    masked: dict[str, str] = {}
    for key, value in values.items():
        if key in SECRET_KEYS and value:
            masked[key] = "********"
        else:
            masked[key] = value
    return masked


def validate_settings(values: dict[str, Any]) -> dict[str, Any]:
    errors: list[str] = []
    warnings: list[str] = []

    level = str(values.get(LOG_LEVEL_ENV, "")).strip().upper() or "INFO"
    if level not in VALID_LOG_LEVELS:
        errors.append(f"Unsupported log level: {level}")

    context = str(values.get(DEFAULT_CONTEXT_ENV, "")).strip().lower() or "react"
    if context not in VALID_CONTEXTS:
        warnings.append(f"{DEFAULT_CONTEXT_ENV}={context} is not a known context; generated code uses the module variant")

    complexity = str(values.get(DEFAULT_COMPLEXITY_ENV, "")).strip().lower() or "intermediate"
    if complexity not in VALID_COMPLEXITIES:
        warnings.append(f"{DEFAULT_COMPLEXITY_ENV}={complexity} is not a known complexity level")

    raw_chars = str(values.get(MAX_REQUEST_CHARS_ENV, "")).strip()
    if raw_chars:
        try:
            chars = int(raw_chars)
        except ValueError:
            errors.append(f"{MAX_REQUEST_CHARS_ENV} must be an integer")
        else:
            if chars < 200 or chars > 20000:
                warnings.append(f"{MAX_REQUEST_CHARS_ENV} will be clamped to 200..20000")

    raw_port = str(values.get(PORT_ENV, "")).strip()
    if raw_port:
        try:
            port = int(raw_port)
        except ValueError:
            errors.append(f"{PORT_ENV} must be an integer")
        else:
            if port < 1 or port > 65535:
                errors.append(f"{PORT_ENV} must be between 1 and 65535")

    if not str(values.get(API_KEYS_ENV, "")).strip():
        warnings.append(f"{API_KEYS_ENV} is empty; gateway requests will be unauthenticated")

    return {"ok": len(errors) == 0, "errors": errors, "warnings": warnings}


def current_values(env_path: Path | None = None) -> dict[str, str]:
    values = parse_env(env_path or ENV_PATH)
    for key in (
        LOG_LEVEL_ENV,
        DEFAULT_CONTEXT_ENV,
        DEFAULT_COMPLEXITY_ENV,
        MAX_REQUEST_CHARS_ENV,
        API_KEYS_ENV,
        HOST_ENV,
        PORT_ENV,
    ):
        raw = os.getenv(key)
        if raw is not None and raw.strip():
            values[key] = raw.strip()
    return values


__all__ = [
    "ENV_PATH",
    "Settings",
    "configure_logging",
    "current_values",
    "load_settings",
    "masked_state",
    "parse_env",
    "validate_settings",
]
