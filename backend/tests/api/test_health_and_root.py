"""Health probe and root metadata document."""

import pokedex_api.infrastructure.database as db_module
from pokedex_api.infrastructure.database import DatabaseSessionManager


async def test_health_ok(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "healthy"
    assert body["database"] == "connected"
    assert body["version"] == "1.0.0"
    assert body["environment"] == "test"
    assert isinstance(body["uptime"], int)
    assert "timestamp" in body


async def test_health_reports_db_failure(client, monkeypatch):
    async def failing_check(timeout):
        return False, "connection refused"

    monkeypatch.setattr(db_module.db_manager, "health_check", failing_check)
    resp = await client.get("/health")
    assert resp.status_code == 503
    body = resp.json()
    assert body["status"] == "unhealthy"
    assert body["database"] == "disconnected"
    assert body["error"] == "connection refused"


async def test_health_without_manager(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    resp = await client.get("/health")
    assert resp.status_code == 503
    assert resp.json()["error"] == "Database not initialized"


async def test_health_is_not_rate_limited(client):
    resp = await client.get("/health")
    assert "RateLimit-Limit" not in resp.headers


async def test_root_document(client):
    resp = await client.get("/")
    assert resp.status_code == 200
    body = resp.json()
    assert body["name"] == "Pokémon Database API"
    assert body["version"] == "1.0.0"
    assert body["server"]["environment"] == "test"
    assert "GET /api/v1/pokemon" in body["endpoints"]["pokemon"]
    assert "GET /api/v1/types/:name" in body["endpoints"]["types"]
    assert body["documentation"] == "http://test/docs"


async def test_health_unhealthy_when_store_unreachable(client, monkeypatch, tmp_path):
    unreachable = DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'dir' / 'pokedex.db'}",
    )
    monkeypatch.setattr(db_module, "db_manager", unreachable)
    try:
        resp = await client.get("/health")
    finally:
        await unreachable.close()
    assert resp.status_code == 503
    body = resp.json()
    assert body["status"] == "unhealthy"
    assert body["database"] == "disconnected"
    assert "unable to open database file" in body["error"]
    assert "uptime" not in body
