from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

from bson import ObjectId
from fastapi.testclient import TestClient

import mongo_demo.main as main_module
from mongo_demo.main import app
from mongo_demo.utils import seed_data
from mongo_demo.utils.seed_data import SAMPLE_POSTS, build_seed_posts, seed_posts
from tests.conftest import make_user


def test_build_seed_posts_assigns_by_position():
    users = [{"_id": ObjectId()} for _ in range(5)]

    posts = build_seed_posts(users)

    assert [p["title"] for p in posts] == [p["title"] for p in SAMPLE_POSTS]
    assert [p["userId"] for p in posts] == [u["_id"] for u in users[:4]]


def test_build_seed_posts_with_fewer_users_leaves_author_empty():
    users = [{"_id": ObjectId()}, {"_id": ObjectId()}]

    posts = build_seed_posts(users)

    assert len(posts) == 4
    assert posts[0]["userId"] == users[0]["_id"]
    assert posts[1]["userId"] == users[1]["_id"]
    assert posts[2]["userId"] is None
    assert posts[3]["userId"] is None


async def test_seed_posts_skips_without_users(store, user_repo, post_repo):
    assert await seed_posts(None, user_repo, post_repo) == 0
    assert store.posts == []


async def test_seed_posts_skips_when_posts_exist(store, user_repo, post_repo, four_users):
    store.posts.append({"_id": ObjectId(), "title": "Existing", "body": "x", "userId": None})

    assert await seed_posts(None, user_repo, post_repo) == 0
    assert len(store.posts) == 1


async def test_seed_posts_inserts_four_posts(store, user_repo, post_repo, four_users):
    assert await seed_posts(None, user_repo, post_repo) == 4
    assert [p["userId"] for p in store.posts] == [u["_id"] for u in four_users]


def test_server_startup_seeds_posts(client, store, user_repo, post_repo, four_users, monkeypatch):
    mongo = SimpleNamespace(close=AsyncMock())
    monkeypatch.setattr(main_module, "connect_mongo", AsyncMock(return_value=mongo))
    monkeypatch.setattr(main_module, "ensure_indexes", AsyncMock())
    monkeypatch.setattr(seed_data, "UserRepository", lambda: user_repo)
    monkeypatch.setattr(seed_data, "PostRepository", lambda: post_repo)

    with TestClient(app) as started:
        res = started.get("/api/posts")

    assert res.status_code == 200
    posts = res.json()
    assert len(posts) == 4
    for post, user in zip(posts, four_users):
        assert post["userId"] == str(user["_id"])
        assert post["user"]["email"] == user["email"]
    mongo.close.assert_awaited_once()


def test_server_startup_survives_seed_failure(client, store, user_repo, monkeypatch):
    store.users.append(make_user("Emma", "emma@example.com"))
    mongo = SimpleNamespace(close=AsyncMock())
    monkeypatch.setattr(main_module, "connect_mongo", AsyncMock(return_value=mongo))
    monkeypatch.setattr(main_module, "ensure_indexes", AsyncMock())
    monkeypatch.setattr(main_module, "init_seed_data", AsyncMock(side_effect=RuntimeError("boom")))

    with TestClient(app) as started:
        res = started.get("/api/users")

    assert res.status_code == 200
    assert res.json()[0]["email"] == "emma@example.com"


def test_seed_failure_is_logged_once(client, store, post_repo, monkeypatch):
    mongo = SimpleNamespace(close=AsyncMock())
    main_logger, seed_logger = MagicMock(), MagicMock()
    monkeypatch.setattr(main_module, "connect_mongo", AsyncMock(return_value=mongo))
    monkeypatch.setattr(main_module, "ensure_indexes", AsyncMock())
    monkeypatch.setattr(main_module, "logger", main_logger)
    monkeypatch.setattr(seed_data, "logger", seed_logger)
    monkeypatch.setattr(post_repo, "count", AsyncMock(side_effect=RuntimeError("count failed")))
    monkeypatch.setattr(seed_data, "PostRepository", lambda: post_repo)

    with TestClient(app):
        pass

    main_logger.error.assert_called_once()
    assert "count failed" in main_logger.error.call_args.args[0]
    seed_logger.error.assert_not_called()
    mongo.close.assert_awaited_once()
