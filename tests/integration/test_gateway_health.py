from fastapi.testclient import TestClient

from gsapforge.gateway.app.main import app


def test_gateway_health() -> None:
    c = TestClient(app)
    res = c.get("/health")
    assert res.status_code == 200
    payload = res.json()
    assert payload["service"] == "gsapforge"
    assert payload["status"] == "ok"
    assert payload["version"]


def test_gateway_metrics_exposition() -> None:
    c = TestClient(app)
    c.get("/health")
    res = c.get("/metrics")
    assert res.status_code == 200
    assert "gsapforge_gateway_http_requests_total" in res.text


def test_probes_skip_api_key(monkeypatch) -> None:
    monkeypatch.setenv("GSAPFORGE_API_KEYS", "dev-gsapforge-key")
    c = TestClient(app)
    assert c.get("/health").status_code == 200
    assert c.get("/metrics").status_code == 200
