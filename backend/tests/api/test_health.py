"""Health & Readiness Probes."""

from tasklist.infrastructure import database


class StubManager:
    def __init__(self, healthy: bool):
        self.healthy = healthy

    async def health_check(self) -> bool:
        return self.healthy


async def test_liveness(client):
    resp = await client.get("/api/v1/health/")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"


async def test_ready_without_database(client, monkeypatch):
    monkeypatch.setattr(database, "db_manager", None)
    resp = await client.get("/api/v1/health/ready")
    assert resp.status_code == 503
    assert resp.json()["reason"] == "database_unavailable"


async def test_ready_with_unreachable_database(client, monkeypatch):
    monkeypatch.setattr(database, "db_manager", StubManager(False))
    resp = await client.get("/api/v1/health/ready")
    assert resp.status_code == 503


async def test_ready_with_healthy_database(client, monkeypatch):
    monkeypatch.setattr(database, "db_manager", StubManager(True))
    resp = await client.get("/api/v1/health/ready")
    assert resp.status_code == 200
    assert resp.json()["checks"]["database"] == "healthy"
