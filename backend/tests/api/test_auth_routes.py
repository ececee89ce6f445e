"""Auth Routes: sign-up and sign-in over HTTP."""


async def test_sign_up_returns_id(client):
    resp = await client.post(
        "/auth/sign-up",
        json={"name": "Alice", "username": "alice", "password": "secret1"},
    )
    assert resp.status_code == 201
    assert resp.json() == {"id": 1}


async def test_sign_up_name_is_optional(client):
    resp = await client.post(
        "/auth/sign-up", json={"username": "alice", "password": "secret1"},
    )
    assert resp.status_code == 201


async def test_duplicate_sign_up_is_conflict(client):
    body = {"username": "alice", "password": "secret1"}
    await client.post("/auth/sign-up", json=body)
    resp = await client.post("/auth/sign-up", json=body)
    assert resp.status_code == 409
    assert resp.json()["error"]["code"] == "DUPLICATE_USERNAME"


async def test_sign_up_rejects_blank_username(client):
    resp = await client.post(
        "/auth/sign-up", json={"username": "   ", "password": "secret1"},
    )
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_sign_up_rejects_missing_password(client):
    resp = await client.post("/auth/sign-up", json={"username": "alice"})
    assert resp.status_code == 400
    fields = [d["field"] for d in resp.json()["error"]["details"]]
    assert "body.password" in fields


async def test_sign_in_returns_bearer_token(client):
    await client.post(
        "/auth/sign-up", json={"username": "alice", "password": "secret1"},
    )
    resp = await client.post(
        "/auth/sign-in", json={"username": "alice", "password": "secret1"},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["token_type"] == "bearer"
    assert data["expires_in"] == 12 * 3600
    assert data["token"].count(".") == 2


async def test_sign_in_failures_look_identical(client):
    await client.post(
        "/auth/sign-up", json={"username": "alice", "password": "secret1"},
    )
    wrong = await client.post(
        "/auth/sign-in", json={"username": "alice", "password": "nope"},
    )
    unknown = await client.post(
        "/auth/sign-in", json={"username": "mallory", "password": "secret1"},
    )
    assert wrong.status_code == unknown.status_code == 401
    assert wrong.headers["www-authenticate"] == "Bearer"
    assert wrong.json()["error"]["code"] == unknown.json()["error"]["code"]
    assert wrong.json()["error"]["message"] == unknown.json()["error"]["message"]


async def test_protected_route_requires_token(client):
    resp = await client.get("/api/lists")
    assert resp.status_code == 401
    assert resp.json()["error"]["code"] == "INVALID_TOKEN"
    assert resp.headers["www-authenticate"] == "Bearer"


async def test_protected_route_rejects_garbage_token(client):
    resp = await client.get(
        "/api/lists", headers={"Authorization": "Bearer not.a.token"},
    )
    assert resp.status_code == 401
    assert resp.json()["error"]["code"] == "INVALID_TOKEN"


async def test_protected_route_rejects_tampered_token(client, alice_headers):
    token = alice_headers["Authorization"].removeprefix("Bearer ")
    head, payload, signature = token.split(".")
    flipped = "A" if signature[0] != "A" else "B"
    tampered = f"{head}.{payload}.{flipped}{signature[1:]}"
    resp = await client.get(
        "/api/lists", headers={"Authorization": f"Bearer {tampered}"},
    )
    assert resp.status_code == 401
