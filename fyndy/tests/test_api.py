from __future__ import annotations

from unittest.mock import patch

from fastapi.testclient import TestClient

from fyndy.app import create_app
from fyndy.config import ServiceConfig

client = TestClient(create_app(ServiceConfig(api_key="")))


def test_health():
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"ok": True, "status": "ok", "service": "fyndy-api", "port": 3333}


def test_decision_precise_query():
    resp = client.get("/api/decision", params={"q": "Grohe S240"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["ok"] is True
    assert body["query"] == "Grohe S240"
    assert body["precision"] == "precise"
    assert body["decision_status"] == "Strong"
    assert body["confidence_score"] == body["trust"]["reliability_score"]
    assert body["price_positioning"] == "Best price detected"
    assert body["manipulation_risk"] == "Low"
    assert body["trusted_environment"] == "Trusted"
    assert body["decision"]["label"] == "Meilleur prix trouvé"
    assert body["decision"]["merchant"] == "Marchand certifié"
    assert body["decision"]["currency"] == "€"
    assert 49 <= body["decision"]["price"] <= 499
    assert body["trust"]["colors"] == {"reviews": "green", "risk": "green"}


def test_decision_generic_query():
    resp = client.get("/api/decision", params={"q": "chaise"})
    body = resp.json()
    assert body["precision"] == "generic"
    assert body["decision"]["type"] == "best_value"
    assert body["decision"]["price"] == 444
    assert body["trust"]["review_signal"] == "Medium"


def test_decision_trims_query():
    resp = client.get("/api/decision", params={"q": "   chaise  "})
    assert resp.json()["query"] == "chaise"


def test_decision_is_deterministic():
    first = client.get("/api/decision", params={"q": "table basse bois"}).json()
    second = client.get("/api/decision", params={"q": "table basse bois"}).json()
    assert first == second


def test_short_query_is_high_risk():
    body = client.get("/api/decision", params={"q": "ab"}).json()
    assert body["manipulation_risk"] == "High"
    assert body["trust"]["colors"]["risk"] == "red"


def test_missing_query_is_400():
    resp = client.get("/api/decision")
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Requête manquante"


def test_blank_query_is_400():
    resp = client.get("/api/decision", params={"q": "   "})
    assert resp.status_code == 400


def test_very_long_query_still_scores():
    resp = client.get("/api/decision", params={"q": "canapé " * 300})
    assert resp.status_code == 200
    assert resp.json()["trust"]["reliability_score"] == 95


def test_cors_headers_present():
    resp = client.get(
        "/api/decision",
        params={"q": "chaise"},
        headers={"Origin": "chrome-extension://abc"},
    )
    assert resp.headers.get("access-control-allow-origin") == "*"


@patch("fyndy.app.load_config")
def test_explicit_config_skips_environment(mock_load):
    app = create_app(ServiceConfig(api_key="", port=8080))
    mock_load.assert_not_called()
    assert TestClient(app).get("/health").json()["port"] == 8080


def test_importing_app_module_builds_nothing():
    import fyndy.app as app_module

    assert not hasattr(app_module, "app")
