"""Tests for /ping and /health endpoints."""


def test_ping_returns_200(client):
    rv = client.get("/ping")
    assert rv.status_code == 200
    data = rv.get_json()
    assert data["status"] == "ok"


def test_ping_content_type_is_json(client):
    rv = client.get("/ping")
    assert rv.content_type.startswith("application/json")


def test_health_calendar_ok(client):
    rv = client.get("/health")
    assert rv.status_code == 200
    data = rv.get_json()
    assert data["status"] == "ok"
    assert data["calendar"]["status"] == "ok"
    assert not data["calendar"]["tempora_key"].startswith("unknown-")


def test_health_calendar_error_is_sanitized(client, monkeypatch):
    import lectionary.resolver as resolver

    def _raise(*args, **kwargs):
        raise RuntimeError("ZoneInfo lookup failed for /usr/share/zoneinfo/Bad/Zone")

    monkeypatch.setattr(resolver, "resolve_day", _raise)

    rv = client.get("/health")
    data = rv.get_json()
    assert rv.status_code == 503
    assert data["status"] == "degraded"
    assert data["calendar"] == {"status": "error", "error": "unavailable"}


def test_health_unknown_key_marks_degraded(client, monkeypatch):
    import lectionary.tempora as tempora

    monkeypatch.setattr(tempora, "SEASON_RULES", ())

    rv = client.get("/health")
    data = rv.get_json()
    assert rv.status_code == 503
    assert data["calendar"]["status"] == "error"
    assert data["calendar"]["tempora_key"].startswith("unknown-")
