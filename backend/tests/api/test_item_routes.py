"""Item Routes: items reachable only through lists the caller owns."""

import pytest


@pytest.fixture
async def groceries(client, alice_headers):
    resp = await client.post(
        "/api/lists", json={"title": "Groceries"}, headers=alice_headers,
    )
    return resp.json()["id"]


async def _add_item(client, headers, list_id, title="Milk"):
    return await client.post(
        f"/api/lists/{list_id}/items", json={"title": title}, headers=headers,
    )


async def test_groceries_flow(client, alice_headers, groceries):
    resp = await _add_item(client, alice_headers, groceries)
    assert resp.status_code == 201
    item_id = resp.json()["id"]

    resp = await client.get(
        f"/api/lists/{groceries}/items", headers=alice_headers,
    )
    assert resp.status_code == 200
    assert resp.json() == [{
        "id": item_id, "list_id": groceries, "title": "Milk",
        "description": "", "done": False,
    }]

    resp = await client.put(
        f"/api/items/{item_id}", json={"done": True}, headers=alice_headers,
    )
    assert resp.status_code == 200

    resp = await client.get(f"/api/items/{item_id}", headers=alice_headers)
    assert resp.json()["done"] is True


async def test_foreign_items_are_not_found(
    client, alice_headers, bob_headers, groceries,
):
    item_id = (await _add_item(client, alice_headers, groceries)).json()["id"]

    assert (await _add_item(client, bob_headers, groceries)).status_code == 404
    resp = await client.get(f"/api/lists/{groceries}/items", headers=bob_headers)
    assert resp.status_code == 404
    resp = await client.get(f"/api/items/{item_id}", headers=bob_headers)
    assert resp.status_code == 404
    resp = await client.put(
        f"/api/items/{item_id}", json={"done": True}, headers=bob_headers,
    )
    assert resp.status_code == 404
    resp = await client.delete(f"/api/items/{item_id}", headers=bob_headers)
    assert resp.status_code == 404

    resp = await client.get(f"/api/items/{item_id}", headers=alice_headers)
    assert resp.json()["done"] is False


async def test_empty_item_update_is_bad_request(client, alice_headers, groceries):
    item_id = (await _add_item(client, alice_headers, groceries)).json()["id"]
    resp = await client.put(
        f"/api/items/{item_id}", json={}, headers=alice_headers,
    )
    assert resp.status_code == 400


async def test_delete_item(client, alice_headers, groceries):
    item_id = (await _add_item(client, alice_headers, groceries)).json()["id"]
    resp = await client.delete(f"/api/items/{item_id}", headers=alice_headers)
    assert resp.status_code == 200
    resp = await client.get(f"/api/items/{item_id}", headers=alice_headers)
    assert resp.status_code == 404


async def test_items_require_token(client, groceries):
    resp = await client.get(f"/api/lists/{groceries}/items")
    assert resp.status_code == 401


async def test_out_of_range_item_id_is_not_found(client, alice_headers):
    huge = 2**63
    resp = await client.get(f"/api/items/{huge}", headers=alice_headers)
    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "RESOURCE_NOT_FOUND"

    resp = await client.put(
        f"/api/items/{huge}", json={"done": True}, headers=alice_headers,
    )
    assert resp.status_code == 404
    resp = await client.delete(f"/api/items/{huge}", headers=alice_headers)
    assert resp.status_code == 404


async def test_update_strips_item_title(client, alice_headers, groceries):
    item_id = (await _add_item(client, alice_headers, groceries)).json()["id"]
    resp = await client.put(
        f"/api/items/{item_id}", json={"title": "  Oat milk "},
        headers=alice_headers,
    )
    assert resp.status_code == 200
    resp = await client.get(f"/api/items/{item_id}", headers=alice_headers)
    assert resp.json()["title"] == "Oat milk"
