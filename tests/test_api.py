"""Integration tests covering the HTTP surface end to end."""
from __future__ import annotations

import os
from typing import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import delete

os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///./test_social.db")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")

from app.database import Base, create_session, engine  # noqa: E402
from app.main import app  # noqa: E402
from app.models import Comment, Follow, Post, User  # noqa: E402


@pytest.fixture(scope="module", autouse=True)
def _create_schema() -> Iterator[None]:
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def _clean_database() -> Iterator[None]:
    with create_session() as session:
        for model in (Follow, Comment, Post, User):
            session.execute(delete(model))
        session.commit()
    yield


@pytest.fixture()
def client() -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client


def _register(client: TestClient, username: str, password: str = "password123") -> dict:
    response = client.post("/auth/register", json={"username": username, "password": password})
    assert response.status_code == 201, response.text
    return response.json()


def _auth(registration: dict) -> dict[str, str]:
    return {"Authorization": f"Bearer {registration['access_token']}"}


def test_login_issues_working_token(client: TestClient) -> None:
    reg = _register(client, "alice")

    login = client.post("/auth/login", json={"username": "alice", "password": "password123"})
    assert login.status_code == 200, login.text
    token = login.json()["access_token"]

    me = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["id"] == reg["user_id"]
    assert "hashed_password" not in me.json()


def test_bad_credentials_and_missing_token_are_unauthorized(client: TestClient) -> None:
    _register(client, "alice")

    login = client.post("/auth/login", json={"username": "alice", "password": "nope-nope"})
    assert login.status_code == 401

    assert client.get("/feed").status_code == 401
    assert client.get("/posts").status_code == 401
    bogus = client.get("/feed", headers={"Authorization": "Bearer not-a-token"})
    assert bogus.status_code == 401
    assert bogus.headers["www-authenticate"] == "Bearer"


def test_user_creation_and_lookup(client: TestClient) -> None:
    viewer = _register(client, "viewer")

    created = client.post("/users", json={"username": "bob", "password": "password123", "bio": "hey"})
    assert created.status_code == 201, created.text
    bob_id = created.json()["id"]

    fetched = client.get(f"/users/{bob_id}", headers=_auth(viewer))
    assert fetched.status_code == 200
    assert fetched.json()["username"] == "bob"
    assert fetched.json()["bio"] == "hey"

    duplicate = client.post("/users", json={"username": "bob", "password": "password123"})
    assert duplicate.status_code == 409

    missing = client.get("/users/99999", headers=_auth(viewer))
    assert missing.status_code == 404


def test_follow_flow_drives_home_feed(client: TestClient) -> None:
    alice = _register(client, "alice")
    bob = _register(client, "bob")
    carol = _register(client, "carol")

    for text in ("bob one", "bob two"):
        response = client.post("/posts", json={"content": text}, headers=_auth(bob))
        assert response.status_code == 201, response.text
    client.post("/posts", json={"content": "carol only"}, headers=_auth(carol))

    empty = client.get("/feed", headers=_auth(alice))
    assert empty.status_code == 200
    assert empty.json()["items"] == []

    followed = client.post(f"/follows/{bob['user_id']}", headers=_auth(alice))
    assert followed.status_code == 201, followed.text
    body = followed.json()
    assert body["status"] == "followed"
    assert body["followers_count"] == 1
    assert body["is_following"] is True
    assert body["following_ids"] == [bob["user_id"]]

    feed = client.get("/feed", headers=_auth(alice)).json()["items"]
    assert [item["content"] for item in feed] == ["bob two", "bob one"]
    assert {item["author"]["username"] for item in feed} == {"bob"}

    again = client.post(f"/follows/{bob['user_id']}", headers=_auth(alice))
    assert again.status_code == 409

    unfollowed = client.delete(f"/follows/{bob['user_id']}", headers=_auth(alice))
    assert unfollowed.status_code == 200
    assert unfollowed.json()["status"] == "unfollowed"
    assert client.get("/feed", headers=_auth(alice)).json()["items"] == []

    noop = client.delete(f"/follows/{bob['user_id']}", headers=_auth(alice))
    assert noop.status_code == 200
    assert noop.json()["status"] == "noop"


def test_follow_unknown_user_returns_404(client: TestClient) -> None:
    alice = _register(client, "alice")

    response = client.post("/follows/99999", headers=_auth(alice))

    assert response.status_code == 404


def test_follow_stats_is_public(client: TestClient) -> None:
    alice = _register(client, "alice")
    bob = _register(client, "bob")
    client.post(f"/follows/{bob['user_id']}", headers=_auth(alice))

    stats = client.get(f"/follows/stats/{bob['user_id']}")

    assert stats.status_code == 200
    assert stats.json() == {
        "user_id": bob["user_id"],
        "followers_count": 1,
        "following_count": 0,
        "is_following": False,
    }


def test_post_detail_includes_comments(client: TestClient) -> None:
    alice = _register(client, "alice")
    bob = _register(client, "bob")
    post = client.post("/posts", json={"content": "hello world"}, headers=_auth(alice)).json()

    for who, text in ((bob, "nice"), (alice, "thanks")):
        response = client.post(f"/posts/{post['id']}/comments", json={"content": text}, headers=_auth(who))
        assert response.status_code == 201, response.text

    detail = client.get(f"/posts/{post['id']}", headers=_auth(bob))
    assert detail.status_code == 200
    payload = detail.json()
    assert payload["author"] == {"id": alice["user_id"], "username": "alice"}
    assert [c["content"] for c in payload["comments"]] == ["nice", "thanks"]
    assert [c["author"]["username"] for c in payload["comments"]] == ["bob", "alice"]

    assert client.get("/posts/99999", headers=_auth(bob)).status_code == 404
    assert client.post("/posts/99999/comments", json={"content": "x"}, headers=_auth(bob)).status_code == 404


def test_blank_post_content_is_rejected(client: TestClient) -> None:
    alice = _register(client, "alice")

    assert client.post("/posts", json={"content": ""}, headers=_auth(alice)).status_code == 422
    assert client.post("/posts", json={"content": "   "}, headers=_auth(alice)).status_code == 422


def test_deleting_account_removes_it_from_followers(client: TestClient) -> None:
    alice = _register(client, "alice")
    bob = _register(client, "bob")
    client.post("/posts", json={"content": "bob post"}, headers=_auth(bob))
    client.post(f"/follows/{bob['user_id']}", headers=_auth(alice))

    deleted = client.delete("/users/me", headers=_auth(bob))
    assert deleted.status_code == 204

    assert client.get("/feed", headers=_auth(alice)).json()["items"] == []
    assert client.get("/auth/me", headers=_auth(bob)).status_code == 401
    stats = client.get(f"/follows/stats/{alice['user_id']}").json()
    assert stats["following_count"] == 0
