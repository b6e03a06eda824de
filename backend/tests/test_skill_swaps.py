from fastapi.testclient import TestClient

from .utils import propose_swap, register_and_token


def test_decline_swap_records_history_and_keeps_thread_open(client: TestClient):
    a_id, a_headers = register_and_token(client, "a@example.com")
    b_id, b_headers = register_and_token(client, "b@example.com")

    swap_id = propose_swap(client, a_headers, b_id, offered="guitar", requested="piano")

    resp = client.patch(f"/api/skill-swaps/{swap_id}/status", json={"status": "declined"}, headers=b_headers)
    assert resp.status_code == 200
    assert resp.json()["status"] == "declined"
    assert resp.json()["partial_failure"] is False

    history = client.get(f"/api/skill-swaps/{swap_id}/history", headers=a_headers).json()
    assert [h["status"] for h in history] == ["pending", "declined"]
    assert [h["changed_by"] for h in history] == [a_id, b_id]

    notifications = client.get("/api/notifications", headers=a_headers).json()["items"]
    assert [n["type"] for n in notifications] == ["swap_declined"]
    assert notifications[0]["link"] == "/skill-swaps"

    msg = client.post(f"/api/skill-swaps/{swap_id}/messages", json={"message": "Maybe later?"}, headers=a_headers)
    assert msg.status_code == 201
    assert msg.json()["sender_id"] == a_id


def test_propose_creates_pending_swap_with_users(client: TestClient):
    a_id, a_headers = register_and_token(client, "a@example.com")
    b_id, b_headers = register_and_token(client, "b@example.com")

    resp = client.post(
        "/api/skill-swaps",
        json={"to_user_id": b_id, "offered_skill": " guitar ", "requested_skill": "piano"},
        headers=a_headers,
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["status"] == "pending"
    assert body["offered_skill"] == "guitar"
    assert body["message"] == ""
    assert body["from_user"]["id"] == a_id
    assert body["to_user"]["id"] == b_id

    history = client.get(f"/api/skill-swaps/{body['id']}/history", headers=b_headers).json()
    assert len(history) == 1
    assert history[0]["status"] == "pending"

    proposed = client.get("/api/notifications", headers=b_headers).json()["items"]
    assert [n["type"] for n in proposed] == ["swap_proposed"]

    for headers in (a_headers, b_headers):
        mine = client.get("/api/skill-swaps", headers=headers).json()
        assert [s["id"] for s in mine] == [body["id"]]


def test_propose_validation(client: TestClient):
    a_id, a_headers = register_and_token(client, "a@example.com")
    b_id, _ = register_and_token(client, "b@example.com")

    blank = client.post(
        "/api/skill-swaps",
        json={"to_user_id": b_id, "offered_skill": "  ", "requested_skill": "piano"},
        headers=a_headers,
    )
    assert blank.status_code == 400
    assert blank.json()["code"] == "invalid"

    to_self = client.post(
        "/api/skill-swaps",
        json={"to_user_id": a_id, "offered_skill": "guitar", "requested_skill": "piano"},
        headers=a_headers,
    )
    assert to_self.status_code == 400

    unknown = client.post(
        "/api/skill-swaps",
        json={"to_user_id": "00000000-0000-0000-0000-000000000001", "offered_skill": "a", "requested_skill": "b"},
        headers=a_headers,
    )
    assert unknown.status_code == 404

    assert client.get("/api/skill-swaps", headers=a_headers).json() == []


def test_missing_fields_are_domain_errors(client: TestClient):
    _, a_headers = register_and_token(client, "a@example.com")
    b_id, _ = register_and_token(client, "b@example.com")

    no_offer = client.post(
        "/api/skill-swaps",
        json={"to_user_id": b_id, "requested_skill": "piano"},
        headers=a_headers,
    )
    assert no_offer.status_code == 400
    assert no_offer.json()["code"] == "invalid"

    null_request = client.post(
        "/api/skill-swaps",
        json={"to_user_id": b_id, "offered_skill": "guitar", "requested_skill": None},
        headers=a_headers,
    )
    assert null_request.status_code == 400
    assert null_request.json()["code"] == "invalid"

    swap_id = propose_swap(client, a_headers, b_id)
    null_message = client.post(f"/api/skill-swaps/{swap_id}/messages", json={"message": None}, headers=a_headers)
    assert null_message.status_code == 400
    assert null_message.json()["code"] == "invalid"

    no_message = client.post(f"/api/skill-swaps/{swap_id}/messages", json={}, headers=a_headers)
    assert no_message.status_code == 400
    assert client.get(f"/api/skill-swaps/{swap_id}/messages", headers=a_headers).json() == []


def test_only_recipient_can_change_status(client: TestClient):
    _, a_headers = register_and_token(client, "a@example.com")
    b_id, b_headers = register_and_token(client, "b@example.com")
    _, c_headers = register_and_token(client, "c@example.com")
    swap_id = propose_swap(client, a_headers, b_id)

    for headers in (a_headers, c_headers):
        resp = client.patch(f"/api/skill-swaps/{swap_id}/status", json={"status": "accepted"}, headers=headers)
        assert resp.status_code == 403

    swap = client.get(f"/api/skill-swaps/{swap_id}", headers=b_headers).json()
    assert swap["status"] == "pending"
    history = client.get(f"/api/skill-swaps/{swap_id}/history", headers=b_headers).json()
    assert len(history) == 1


def test_change_status_errors(client: TestClient):
    _, a_headers = register_and_token(client, "a@example.com")
    b_id, b_headers = register_and_token(client, "b@example.com")
    swap_id = propose_swap(client, a_headers, b_id)

    missing = client.patch("/api/skill-swaps/777/status", json={"status": "accepted"}, headers=b_headers)
    assert missing.status_code == 404

    invalid = client.patch(f"/api/skill-swaps/{swap_id}/status", json={"status": "done"}, headers=b_headers)
    assert invalid.status_code == 400

    accepted = client.patch(f"/api/skill-swaps/{swap_id}/status", json={"status": "accepted"}, headers=b_headers)
    assert accepted.status_code == 200

    again = client.patch(f"/api/skill-swaps/{swap_id}/status", json={"status": "declined"}, headers=b_headers)
    assert again.status_code == 409
    assert again.json()["code"] == "invalid_state"

    history = client.get(f"/api/skill-swaps/{swap_id}/history", headers=b_headers).json()
    assert [h["status"] for h in history] == ["pending", "accepted"]


def test_messages_are_ordered_and_participant_only(client: TestClient):
    a_id, a_headers = register_and_token(client, "a@example.com")
    b_id, b_headers = register_and_token(client, "b@example.com")
    _, c_headers = register_and_token(client, "c@example.com")
    swap_id = propose_swap(client, a_headers, b_id)

    for headers, text in ((a_headers, "first"), (b_headers, "second"), (a_headers, "third")):
        resp = client.post(f"/api/skill-swaps/{swap_id}/messages", json={"message": text}, headers=headers)
        assert resp.status_code == 201

    messages = client.get(f"/api/skill-swaps/{swap_id}/messages", headers=b_headers).json()
    assert [m["message"] for m in messages] == ["first", "second", "third"]
    assert [m["sender_id"] for m in messages] == [a_id, b_id, a_id]
    assert messages[0]["sender"]["email"] == "a@example.com"

    outsider_post = client.post(f"/api/skill-swaps/{swap_id}/messages", json={"message": "hey"}, headers=c_headers)
    assert outsider_post.status_code == 403
    assert client.get(f"/api/skill-swaps/{swap_id}/messages", headers=c_headers).status_code == 403
    assert client.get(f"/api/skill-swaps/{swap_id}/history", headers=c_headers).status_code == 403
    assert client.get(f"/api/skill-swaps/{swap_id}", headers=c_headers).status_code == 403

    empty = client.post(f"/api/skill-swaps/{swap_id}/messages", json={"message": "   "}, headers=a_headers)
    assert empty.status_code == 400

    missing = client.post("/api/skill-swaps/999/messages", json={"message": "hello"}, headers=a_headers)
    assert missing.status_code == 404
