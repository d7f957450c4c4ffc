from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from fastapi import HTTPException, Request

from gsapforge.config.runtime_config import load_settings

EXEMPT_PATH_EXACT = {
    "/health",
    "/metrics",
    "/docs",
    "/docs/oauth2-redirect",
    "/openapi.json",
    "/redoc",
}


@dataclass
class SecurityState:
    api_keys: set[str]

    @property
    def enforcement_active(self) -> bool:
        return bool(self.api_keys)


def get_security_state() -> SecurityState:
    return SecurityState(api_keys=set(load_settings().api_keys))


def path_is_exempt(path: str) -> bool:
    return path in EXEMPT_PATH_EXACT


def _extract_api_key(header_values: Iterable[str], auth_header: str | None) -> str:
    for value in header_values:
        if value.strip():
            return value.strip()
    if auth_header and auth_header.lower().startswith("bearer "):
        return auth_header[7:].strip()
    return ""


def enforce_http_auth(request: Request) -> None:
    if path_is_exempt(request.url.path):
        return
    state = get_security_state()
    if not state.enforcement_active:
        return
    provided = _extract_api_key(request.headers.getlist("x-api-key"), request.headers.get("authorization"))
    if provided in state.api_keys:
        return
    raise HTTPException(status_code=401, detail={"error": "invalid_api_key"})


__all__ = ["SecurityState", "enforce_http_auth", "get_security_state", "path_is_exempt"]
