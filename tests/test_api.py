"""
HTTP-level tests — the full request path through routers, dependencies
and the exception handler, against SQLite and fake collaborators.
"""

import pytest

WALLET = "0xABC0000000000000000000000000000000000001"


async def _register(client, auth_headers, push_token="ExponentPushToken[abc123]") -> str:
    resp = await client.post(
        "/api/screens", json={"push_notification_token": push_token}, headers=auth_headers,
    )
    assert resp.status_code == 201
    return resp.json()["id"]


async def _start_session(client, auth_headers, screen_id) -> str:
    resp = await client.post("/api/sessions", params={"screen_id": screen_id}, headers=auth_headers)
    assert resp.status_code == 201
    return resp.json()["session_token"]


async def test_health(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


@pytest.mark.parametrize("headers", [{}, {"Authorization": "Bearer wrong"}])
async def test_shared_token_required(client, headers):
    resp = await client.post("/api/screens", headers=headers)
    assert resp.status_code == 403
    assert resp.json()["detail"] == "Wrong authorization token provided"

    resp = await client.post("/api/sessions", params={"screen_id": "x"}, headers=headers)
    assert resp.status_code == 403


async def test_register_and_read_screen(client, auth_headers):
    resp = await client.post("/api/screens", headers=auth_headers)
    assert resp.status_code == 201
    screen = resp.json()
    assert screen["wallet_address"] is None

    resp = await client.get(f"/api/screens/{screen['id']}", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["id"] == screen["id"]


async def test_unknown_screen(client, auth_headers):
    resp = await client.get("/api/screens/nope", headers=auth_headers)
    assert resp.status_code == 404

    resp = await client.post("/api/sessions", params={"screen_id": "nope"}, headers=auth_headers)
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Invalid device code"


async def test_session_requires_screen_id(client, auth_headers):
    resp = await client.post("/api/sessions", headers=auth_headers)
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Invalid screen ID"


async def test_link_wallet_end_to_end(client, auth_headers, validator, notifier):
    screen_id = await _register(client, auth_headers)
    token = await _start_session(client, auth_headers, screen_id)

    resp = await client.post(
        "/api/wallets",
        json={"screen_id": screen_id, "session_token": token, "wallet_address": WALLET},
    )
    assert resp.status_code == 200
    assert resp.json() == {"screen_id": screen_id, "wallet_address": WALLET, "notified": True}
    assert notifier.sent[0]["token"] == "ExponentPushToken[abc123]"

    resp = await client.get(f"/api/screens/{screen_id}", headers=auth_headers)
    assert resp.json()["wallet_address"] == WALLET


async def test_superseded_token_is_denied(client, auth_headers, validator):
    screen_id = await _register(client, auth_headers)
    first = await _start_session(client, auth_headers, screen_id)
    await _start_session(client, auth_headers, screen_id)

    resp = await client.post(
        "/api/wallets",
        json={"screen_id": screen_id, "session_token": first, "wallet_address": WALLET},
    )
    assert resp.status_code == 403
    assert resp.json()["detail"] == "Session token is invalid or expired"
    assert validator.calls == []


async def test_tampered_token_is_denied(client, auth_headers, validator, tamper):
    screen_id = await _register(client, auth_headers)
    token = await _start_session(client, auth_headers, screen_id)

    resp = await client.post(
        "/api/wallets",
        json={"screen_id": screen_id, "session_token": tamper(token), "wallet_address": WALLET},
    )
    assert resp.status_code == 403
    assert token not in resp.text
    assert validator.calls == []


async def test_link_wallet_blank_fields(client):
    resp = await client.post("/api/wallets", json={"screen_id": "s", "session_token": "t"})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Invalid wallet address"


async def test_invalid_wallet(client, auth_headers, validator):
    validator.valid = False
    screen_id = await _register(client, auth_headers)
    token = await _start_session(client, auth_headers, screen_id)

    resp = await client.post(
        "/api/wallets",
        json={"screen_id": screen_id, "session_token": token, "wallet_address": "0xBAD"},
    )
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Invalid wallet address"

    resp = await client.get(f"/api/screens/{screen_id}", headers=auth_headers)
    assert resp.json()["wallet_address"] is None


async def test_update_push_token(client, auth_headers, notifier):
    screen_id = await _register(client, auth_headers, push_token=None)
    resp = await client.put(
        f"/api/screens/{screen_id}/push-token",
        json={"push_notification_token": "ExponentPushToken[new]"},
        headers=auth_headers,
    )
    assert resp.status_code == 200

    token = await _start_session(client, auth_headers, screen_id)
    await client.post(
        "/api/wallets",
        json={"screen_id": screen_id, "session_token": token, "wallet_address": WALLET},
    )
    assert notifier.sent[0]["token"] == "ExponentPushToken[new]"


async def test_upload_artwork(client, auth_headers, object_store):
    screen_id = await _register(client, auth_headers)
    token = await _start_session(client, auth_headers, screen_id)

    resp = await client.post(
        "/api/artworks",
        headers={**auth_headers, "screen-session-token": token},
        files={"file": ("dawn.png", b"\x89PNG-fake", "image/png")},
        data={"title": "Dawn", "artist": "M. Ito", "price": "12.5", "currency": "ETH"},
    )
    assert resp.status_code == 201
    artwork = resp.json()
    assert artwork["screen_id"] == screen_id
    assert artwork["title"] == "Dawn"
    assert artwork["price"] == 12.5
    assert artwork["object_key"].endswith("_dawn.png")
    assert object_store.objects[artwork["object_key"]] == b"\x89PNG-fake"


async def test_upload_artwork_requires_session(client, auth_headers, object_store):
    files = {"file": ("dawn.png", b"data", "image/png")}

    resp = await client.post("/api/artworks", headers=auth_headers, files=files)
    assert resp.status_code == 401

    screen_id = await _register(client, auth_headers)
    first = await _start_session(client, auth_headers, screen_id)
    await _start_session(client, auth_headers, screen_id)

    resp = await client.post(
        "/api/artworks",
        headers={**auth_headers, "screen-session-token": first},
        files=files,
    )
    assert resp.status_code == 403
    assert object_store.objects == {}


async def test_upload_empty_artwork(client, auth_headers):
    screen_id = await _register(client, auth_headers)
    token = await _start_session(client, auth_headers, screen_id)

    resp = await client.post(
        "/api/artworks",
        headers={**auth_headers, "screen-session-token": token},
        files={"file": ("empty.png", b"", "image/png")},
    )
    assert resp.status_code == 400


async def test_push_token_for_unknown_screen(client, auth_headers):
    resp = await client.put(
        "/api/screens/nope/push-token",
        json={"push_notification_token": "ExponentPushToken[new]"},
        headers=auth_headers,
    )
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Invalid device code"


async def test_upload_artwork_store_failure(client, auth_headers, object_store):
    async def broken_put(key, content):
        raise OSError("disk full")

    object_store.put = broken_put
    screen_id = await _register(client, auth_headers)
    token = await _start_session(client, auth_headers, screen_id)

    resp = await client.post(
        "/api/artworks",
        headers={**auth_headers, "screen-session-token": token},
        files={"file": ("dawn.png", b"\x89PNG-fake", "image/png")},
    )
    assert resp.status_code == 500
    assert resp.json() == {"detail": "Unexpected error"}
    assert "disk full" not in resp.text
