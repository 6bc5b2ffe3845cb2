from __future__ import annotations

import uuid


def test_me(api_client, consumer, auth_for):
    body = api_client.get("/api/users/me", headers=auth_for(consumer)).json()
    assert body["_id"] == str(consumer.id)
    assert body["username"] == "dev"
    assert body["role"] == "consumer"


def test_user_lookup(api_client, creator, consumer, auth_for):
    headers = auth_for(consumer)
    r = api_client.get(f"/api/users/{creator.id}", headers=headers)
    assert r.status_code == 200
    assert r.json()["username"] == "carla"

    r = api_client.get(f"/api/users/{uuid.uuid4()}", headers=headers)
    assert r.status_code == 404
    assert r.json()["detail"] == "User not found"


def test_token_for_deleted_user(api_client, auth_for):
    class Ghost:
        id = uuid.uuid4()

    r = api_client.get("/api/users/me", headers=auth_for(Ghost))
    assert r.status_code == 401
    assert r.json()["detail"] == "User not found"


def test_healthz(api_client):
    r = api_client.get("/healthz")
    assert r.status_code == 200
    assert r.json() == {"ok": True, "app": "photoshare", "env": "development", "cache": "enabled"}
