import uuid

from fastapi.testclient import TestClient

from collabmate import models
from collabmate.core.security import hash_password


def register_and_token(client: TestClient, email: str, password: str = "secret123") -> tuple[str, dict]:
    reg_resp = client.post(
        "/api/auth/register", json={"email": email, "full_name": email.split("@")[0], "password": password}
    )
    assert reg_resp.status_code == 201
    user_id = reg_resp.json()["id"]
    token_resp = client.post(
        "/api/auth/token",
        data={"username": email, "password": password},
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )
    assert token_resp.status_code == 200
    return user_id, {"Authorization": f"Bearer {token_resp.json()['access_token']}"}


def create_project(client: TestClient, headers: dict, title: str = "Test Project") -> int:
    resp = client.post("/api/projects", json={"title": title, "description": "desc"}, headers=headers)
    assert resp.status_code == 201
    return resp.json()["id"]


def propose_swap(client: TestClient, headers: dict, to_user_id: str, offered: str = "guitar", requested: str = "piano") -> int:
    resp = client.post(
        "/api/skill-swaps",
        json={"to_user_id": to_user_id, "offered_skill": offered, "requested_skill": requested, "message": "hi"},
        headers=headers,
    )
    assert resp.status_code == 201
    return resp.json()["id"]


def make_user(db, email: str) -> models.User:
    user = models.User(
        id=uuid.uuid4(),
        email=email,
        full_name=email.split("@")[0],
        hashed_password=hash_password("secret123"),
        is_active=True,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user
