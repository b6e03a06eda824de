from fastapi.testclient import TestClient

from .utils import propose_swap, register_and_token


def _seed_notifications(client: TestClient, recipient_id: str, count: int) -> list[dict]:
    """Each proposal notifies the recipient once."""
    senders = []
    for i in range(count):
        _, headers = register_and_token(client, f"sender{i}@example.com")
        propose_swap(client, headers, recipient_id, offered=f"skill-{i}", requested="piano")
        senders.append(headers)
    return senders


def test_unread_count_and_mark_read(client: TestClient):
    b_id, b_headers = register_and_token(client, "b@example.com")
    _seed_notifications(client, b_id, 2)

    assert client.get("/api/notifications/unread-count", headers=b_headers).json() == {"count": 2}

    items = client.get("/api/notifications", headers=b_headers).json()["items"]
    first_id = items[0]["id"]
    resp = client.patch(f"/api/notifications/{first_id}/read", headers=b_headers)
    assert resp.status_code == 200
    assert resp.json() == {"ok": True, "updated": 1}
    assert client.get("/api/notifications/unread-count", headers=b_headers).json() == {"count": 1}

    # already read: still a success, nothing changes
    again = client.patch(f"/api/notifications/{first_id}/read", headers=b_headers)
    assert again.status_code == 200
    assert again.json()["updated"] == 0


def test_mark_read_of_foreign_or_missing_notification_is_silent(client: TestClient):
    b_id, b_headers = register_and_token(client, "b@example.com")
    _, other_headers = register_and_token(client, "other@example.com")
    _seed_notifications(client, b_id, 1)
    notification_id = client.get("/api/notifications", headers=b_headers).json()["items"][0]["id"]

    foreign = client.patch(f"/api/notifications/{notification_id}/read", headers=other_headers)
    assert foreign.status_code == 200
    assert foreign.json()["updated"] == 0

    missing = client.patch("/api/notifications/123456/read", headers=other_headers)
    assert missing.status_code == 200

    assert client.get("/api/notifications/unread-count", headers=b_headers).json() == {"count": 1}


def test_mark_all_read(client: TestClient):
    b_id, b_headers = register_and_token(client, "b@example.com")
    _seed_notifications(client, b_id, 3)

    resp = client.post("/api/notifications/mark-all-read", headers=b_headers)
    assert resp.status_code == 200
    assert resp.json()["updated"] == 3
    assert client.get("/api/notifications/unread-count", headers=b_headers).json() == {"count": 0}
    assert all(n["is_read"] for n in client.get("/api/notifications", headers=b_headers).json()["items"])


def test_notifications_are_paginated_newest_first(client: TestClient):
    b_id, b_headers = register_and_token(client, "b@example.com")
    _seed_notifications(client, b_id, 3)

    page = client.get("/api/notifications?skip=0&limit=2", headers=b_headers).json()
    assert page["total"] == 3
    assert len(page["items"]) == 2
    ids = [n["id"] for n in page["items"]]
    assert ids == sorted(ids, reverse=True)

    rest = client.get("/api/notifications?skip=2&limit=2", headers=b_headers).json()
    assert len(rest["items"]) == 1


def test_notifications_require_auth(client: TestClient):
    assert client.get("/api/notifications").status_code == 401
    assert client.get("/api/notifications/unread-count").status_code == 401
    assert client.post("/api/notifications/mark-all-read").status_code == 401
