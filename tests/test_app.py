def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.get_json() == {"status": "ok", "message": "TCG Backend Server is running"}


def test_request_id_is_echoed_or_generated(client):
    echoed = client.get("/api/health", headers={"X-Request-ID": "abc123"})
    assert echoed.headers["X-Request-ID"] == "abc123"

    generated = client.get("/api/health")
    assert len(generated.headers["X-Request-ID"]) == 32


def test_unknown_api_route_is_json_404(client):
    resp = client.get("/api/nope")
    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Resource not found"}


def test_wrong_method_is_json_405(client):
    resp = client.put("/api/cards")
    assert resp.status_code == 405
    assert resp.get_json() == {"error": "Method not allowed"}


def test_cors_preflight_on_api(client):
    resp = client.options(
        "/api/decks/mine",
        headers={"Origin": "http://localhost:5173", "Access-Control-Request-Method": "GET"},
    )
    assert resp.status_code == 200
    assert resp.headers.get("Access-Control-Allow-Origin") == "http://localhost:5173"


def test_register_error_handlers_returns_nothing():
    from flask import Flask

    from shared.error_handlers import register_error_handlers

    assert register_error_handlers(Flask(__name__)) is None


def test_security_headers_are_attached(client):
    resp = client.get("/api/health")
    assert resp.headers["X-Content-Type-Options"] == "nosniff"
    assert resp.headers["Referrer-Policy"] == "no-referrer"
    assert resp.headers["X-Frame-Options"] == "DENY"
