"""API test fixtures: registered users with bearer headers."""

import pytest


async def _register(client, username: str, password: str) -> dict:
    resp = await client.post(
        "/auth/sign-up",
        json={"name": username.title(), "username": username, "password": password},
    )
    assert resp.status_code == 201
    resp = await client.post(
        "/auth/sign-in", json={"username": username, "password": password},
    )
    assert resp.status_code == 200
    return {"Authorization": f"Bearer {resp.json()['token']}"}


@pytest.fixture
async def alice_headers(client):
    return await _register(client, "alice", "secret1")


@pytest.fixture
async def bob_headers(client):
    return await _register(client, "bob", "hunter2")
