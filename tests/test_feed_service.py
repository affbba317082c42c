"""Tests for home feed composition."""
from __future__ import annotations

import os
from datetime import datetime, timedelta, timezone
from typing import Iterator

import pytest
from sqlalchemy import delete
from sqlalchemy.orm import Session

os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///./test_social.db")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")

from app.database import Base, create_session, engine  # noqa: E402
from app.models import Comment, Follow, Post, User  # noqa: E402
from app.repositories import UserRepository  # noqa: E402
from app.services import compose_feed, create_post, follow_user, unfollow_user  # noqa: E402

T0 = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(scope="module", autouse=True)
def _create_schema() -> Iterator[None]:
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def db() -> Iterator[Session]:
    with create_session() as session:
        for model in (Follow, Comment, Post, User):
            session.execute(delete(model))
        session.commit()
        yield session


def _user(db: Session, username: str) -> User:
    return UserRepository(db).create(username=username, hashed_password="not-a-real-hash")


def _post(db: Session, author: User, content: str, minutes: int) -> Post:
    return create_post(db, author_id=author.id, content=content, created_at=T0 + timedelta(minutes=minutes))


def test_feed_is_empty_without_follows(db: Session) -> None:
    reader = _user(db, "reader")
    author = _user(db, "author")
    _post(db, author, "hello", 1)
    _post(db, reader, "my own post", 2)

    assert compose_feed(db, reader.id) == []


def test_feed_orders_followed_posts_newest_first(db: Session) -> None:
    reader = _user(db, "reader")
    author = _user(db, "author")
    p1 = _post(db, author, "first", 1)
    p3 = _post(db, author, "third", 3)
    p2 = _post(db, author, "second", 2)
    follow_user(db, follower_id=reader.id, target_id=author.id)

    feed = compose_feed(db, reader.id)

    assert [entry.post.id for entry in feed] == [p3.id, p2.id, p1.id]


def test_feed_excludes_authors_not_followed(db: Session) -> None:
    reader = _user(db, "reader")
    followed = _user(db, "followed")
    stranger = _user(db, "stranger")
    kept = _post(db, followed, "visible", 1)
    _post(db, stranger, "hidden", 2)
    _post(db, stranger, "also hidden", 3)
    follow_user(db, follower_id=reader.id, target_id=followed.id)

    feed = compose_feed(db, reader.id)

    assert [entry.post.id for entry in feed] == [kept.id]
    assert all(entry.author.id == followed.id for entry in feed)


def test_feed_merges_multiple_authors_with_identity(db: Session) -> None:
    reader = _user(db, "reader")
    ann = _user(db, "ann")
    ben = _user(db, "ben")
    a1 = _post(db, ann, "ann one", 1)
    b1 = _post(db, ben, "ben one", 2)
    a2 = _post(db, ann, "ann two", 3)
    follow_user(db, follower_id=reader.id, target_id=ann.id)
    follow_user(db, follower_id=reader.id, target_id=ben.id)

    feed = compose_feed(db, reader.id)

    assert [entry.post.id for entry in feed] == [a2.id, b1.id, a1.id]
    assert [entry.author.username for entry in feed] == ["ann", "ben", "ann"]


def test_feed_keeps_insertion_order_for_equal_timestamps(db: Session) -> None:
    reader = _user(db, "reader")
    author = _user(db, "author")
    first = _post(db, author, "same time A", 5)
    second = _post(db, author, "same time B", 5)
    newest = _post(db, author, "later", 6)
    follow_user(db, follower_id=reader.id, target_id=author.id)

    feed = compose_feed(db, reader.id)

    assert [entry.post.id for entry in feed] == [newest.id, first.id, second.id]


def test_feed_drops_author_after_unfollow(db: Session) -> None:
    reader = _user(db, "reader")
    author = _user(db, "author")
    _post(db, author, "hello", 1)
    follow_user(db, follower_id=reader.id, target_id=author.id)
    assert len(compose_feed(db, reader.id)) == 1

    unfollow_user(db, follower_id=reader.id, target_id=author.id)

    assert compose_feed(db, reader.id) == []
