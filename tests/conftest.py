import copy
from types import SimpleNamespace

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import DuplicateKeyError

from mongo_demo.database import get_mongo
from mongo_demo.main import app
from mongo_demo.repositories.post_repository import PostRepository
from mongo_demo.repositories.user_repository import UserRepository
from mongo_demo.services import PostService, UserService
from mongo_demo.utils.dependencies import get_post_service, get_user_service


class InMemoryUserRepository(UserRepository):
    def __init__(self, store):
        self.store = store

    async def get_all(self, mongo):
        return copy.deepcopy(self.store.users)

    async def get_by_id(self, mongo, user_id):
        return next((copy.deepcopy(u) for u in self.store.users if u["_id"] == user_id), None)

    async def get_by_email(self, mongo, email):
        return next((copy.deepcopy(u) for u in self.store.users if u["email"] == email), None)

    async def create(self, mongo, user_data):
        # 유니크 인덱스 동작 흉내
        if any(u["email"] == user_data["email"] for u in self.store.users):
            raise DuplicateKeyError("E11000 duplicate key error", code=11000)
        doc = {"_id": ObjectId(), **user_data}
        self.store.users.append(doc)
        return doc["_id"]


class InMemoryPostRepository(PostRepository):
    def __init__(self, store):
        self.store = store

    async def get_all(self, mongo):
        return copy.deepcopy(self.store.posts)

    async def count(self, mongo):
        return len(self.store.posts)

    async def create(self, mongo, post_data):
        doc = {"_id": ObjectId(), **post_data}
        self.store.posts.append(doc)
        return doc["_id"]

    async def create_many(self, mongo, posts):
        return [await self.create(mongo, post) for post in posts]

    async def delete(self, mongo, post_id):
        before = len(self.store.posts)
        self.store.posts = [p for p in self.store.posts if p["_id"] != post_id]
        return len(self.store.posts) == before - 1

    async def assign_user(self, mongo, post_id, user_id):
        for post in self.store.posts:
            if post["_id"] == post_id:
                post["userId"] = user_id
                return True
        return False


def make_user(name, email, age=30, city="New York"):
    return {
        "_id": ObjectId(),
        "name": name,
        "email": email,
        "age": age,
        "address": {"street": "1 Test St", "city": city, "zipCode": "10001"},
        "location": {"type": "Point", "coordinates": [-74.006, 40.7128]},
        "hobbies": ["reading"],
    }


@pytest.fixture
def store():
    return SimpleNamespace(users=[], posts=[])


@pytest.fixture
def user_repo(store):
    return InMemoryUserRepository(store)


@pytest.fixture
def post_repo(store):
    return InMemoryPostRepository(store)


@pytest.fixture
def user_service(user_repo, post_repo):
    return UserService(user_repository=user_repo, post_repository=post_repo)


@pytest.fixture
def post_service(user_repo, post_repo):
    return PostService(post_repository=post_repo, user_repository=user_repo)


@pytest.fixture
def client(user_service, post_service):
    app.dependency_overrides[get_mongo] = lambda: None
    app.dependency_overrides[get_user_service] = lambda: user_service
    app.dependency_overrides[get_post_service] = lambda: post_service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def four_users(store):
    store.users.extend([
        make_user("Emma", "emma@example.com", 27, "Seattle"),
        make_user("Liam", "liam@example.com", 33, "San Diego"),
        make_user("Sophia", "sophia@example.com", 24, "Rome"),
        make_user("Noah", "noah@example.com", 41, "Denver"),
    ])
    return store.users
