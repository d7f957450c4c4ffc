from gsapforge.gateway.app.security import get_security_state, path_is_exempt


def test_probe_and_docs_paths_are_exempt_from_auth() -> None:
    assert path_is_exempt("/health")
    assert path_is_exempt("/metrics")
    assert path_is_exempt("/docs")
    assert path_is_exempt("/openapi.json")


def test_tool_endpoints_are_not_implicitly_exempt() -> None:
    assert not path_is_exempt("/v1/tools")
    assert not path_is_exempt("/v1/tools/classify_and_generate")
    assert not path_is_exempt("/health/extra")


def test_enforcement_follows_configured_keys(monkeypatch) -> None:
    monkeypatch.setenv("GSAPFORGE_API_KEYS", "")
    assert not get_security_state().enforcement_active
    monkeypatch.setenv("GSAPFORGE_API_KEYS", "k1,k2")
    state = get_security_state()
    assert state.enforcement_active
    assert state.api_keys == {"k1", "k2"}
