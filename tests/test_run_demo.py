from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo.errors import OperationFailure, ServerSelectionTimeoutError

from mongo_demo.cli import run_demo as run_demo_module
from mongo_demo.cli.run_demo import MongoDemo, main
from mongo_demo.core.config import Settings


def cursor(docs):
    return SimpleNamespace(to_list=AsyncMock(return_value=docs))


def make_collection():
    users = [
        {"_id": ObjectId(), "name": "John Doe", "email": "john@example.com", "age": 30,
         "address": {"city": "New York"}},
        {"_id": ObjectId(), "name": "Jane Smith", "email": "jane@example.com", "age": 25,
         "address": {"city": "Los Angeles"}},
    ]
    collection = MagicMock()
    collection.delete_many = AsyncMock(return_value=SimpleNamespace(deleted_count=1))
    collection.delete_one = AsyncMock(return_value=SimpleNamespace(deleted_count=1))
    collection.create_index = AsyncMock()
    collection.insert_one = AsyncMock(return_value=SimpleNamespace(inserted_id=ObjectId()))
    collection.insert_many = AsyncMock(
        return_value=SimpleNamespace(inserted_ids=[ObjectId(), ObjectId(), ObjectId()])
    )
    collection.find = MagicMock(return_value=cursor(users))
    collection.find_one = AsyncMock(return_value=users[0])
    collection.count_documents = AsyncMock(return_value=4)
    collection.update_one = AsyncMock(
        return_value=SimpleNamespace(modified_count=1, upserted_id=ObjectId())
    )
    collection.update_many = AsyncMock(return_value=SimpleNamespace(modified_count=2))
    collection.aggregate = AsyncMock(side_effect=[
        cursor([{"_id": "New York", "count": 1, "avgAge": 31.0, "users": ["John Doe"]}]),
        cursor([{"_id": users[0]["_id"], "name": "John Doe", "city": "New York", "distanceFromNYC": 0.0}]),
    ])
    return collection


def make_client(collection):
    db = MagicMock()
    db.__getitem__.return_value = collection
    client = MagicMock()
    client.__getitem__.return_value = db
    client.admin.command = AsyncMock(return_value={"ok": 1})
    client.close = AsyncMock()
    return client


@pytest.fixture
def settings():
    return Settings(MONGODB_URI="mongodb://example:27017", DB_NAME="demo_db", COLLECTION_NAME="people")


@pytest.fixture
def collection():
    return make_collection()


@pytest.fixture
def client(collection):
    return make_client(collection)


@pytest.fixture
def demo(settings, client):
    return MongoDemo(settings, client_factory=lambda s: client)


async def test_run_demo_executes_full_sequence(demo, client, collection):
    assert await demo.run_demo() is True

    client.admin.command.assert_awaited_once_with("ping")
    client.__getitem__.assert_called_with("demo_db")
    # 첫 delete_many 는 컬렉션 초기화
    assert collection.delete_many.await_args_list[0].args == ({},)
    assert collection.create_index.await_count == 4
    collection.insert_one.assert_awaited_once()
    assert len(collection.insert_many.await_args.args[0]) == 3
    assert collection.aggregate.await_count == 2
    collection.delete_one.assert_awaited_once_with({"email": "newuser@example.com"})
    assert collection.delete_many.await_args_list[-1].args == ({"category": "young"},)
    client.close.assert_awaited_once()


async def test_upsert_uses_email_filter(demo, collection):
    await demo.run_demo()

    upsert_call = collection.update_one.await_args_list[-1]
    assert upsert_call.args[0] == {"email": "newuser@example.com"}
    assert upsert_call.kwargs == {"upsert": True}
    assert upsert_call.args[1]["$set"]["address"]["city"] == "Miami"
    assert "email" not in upsert_call.args[1]["$set"]


async def test_connection_failure_aborts(settings, client, collection):
    client.admin.command = AsyncMock(side_effect=ServerSelectionTimeoutError("no servers"))
    demo = MongoDemo(settings, client_factory=lambda s: client)

    assert await demo.run_demo() is False
    collection.insert_one.assert_not_awaited()
    client.close.assert_awaited_once()


async def test_insert_failure_aborts_remaining_steps(demo, client, collection):
    collection.insert_one = AsyncMock(side_effect=OperationFailure("insert denied"))

    assert await demo.run_demo() is False
    collection.find.assert_not_called()
    collection.aggregate.assert_not_awaited()
    client.close.assert_awaited_once()


async def test_non_critical_failures_continue(demo, collection):
    collection.create_index = AsyncMock(side_effect=OperationFailure("index conflict"))
    collection.aggregate = AsyncMock(side_effect=OperationFailure("no 2dsphere index"))
    collection.delete_one = AsyncMock(side_effect=OperationFailure("delete denied"))

    assert await demo.run_demo() is True
    collection.update_many.assert_awaited_once()
    assert collection.count_documents.await_count == 2


async def test_disconnect_without_connect_is_noop(settings):
    demo = MongoDemo(settings, client_factory=lambda s: pytest.fail("should not connect"))

    await demo.disconnect()

    assert demo.client is None


def test_main_applies_cli_overrides(monkeypatch):
    captured = {}

    class FakeDemo:
        def __init__(self, settings):
            captured["settings"] = settings

        async def run_demo(self):
            return False

    monkeypatch.setattr(run_demo_module, "MongoDemo", FakeDemo)

    exit_code = main(["--uri", "mongodb://cli:27017", "--collection", "members"])

    assert exit_code == 1
    assert captured["settings"].MONGODB_URI == "mongodb://cli:27017"
    assert captured["settings"].COLLECTION_NAME == "members"
