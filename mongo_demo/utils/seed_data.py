# mongo_demo/utils/seed_data.py
"""
초기 데이터 시딩 유틸리티
- 데모 러너가 넣는 샘플 사용자 문서
- 서버 시작 시 posts 컬렉션이 비어 있으면 넣는 샘플 게시글
"""
import logging
from typing import Any, Dict, List, Optional

from mongo_demo.database import MongoContext
from mongo_demo.repositories.post_repository import PostRepository
from mongo_demo.repositories.user_repository import UserRepository
from mongo_demo.utils.datetime import utc_now

logger = logging.getLogger(__name__)

NYC_COORDINATES = [-74.006, 40.7128]

SAMPLE_POSTS = [
    {"title": "Hello from Emma", "body": "Emma post content"},
    {"title": "Liam on the Beach", "body": "Surfing diary"},
    {"title": "Sophia’s Cooking", "body": "Today I made pasta"},
    {"title": "Noah’s Hike", "body": "Reached mountain top!"},
]


def _user(name: str, email: str, age: int, street: str, city: str, zip_code: str,
          coordinates: List[float], hobbies: List[str]) -> Dict[str, Any]:
    return {
        "name": name,
        "email": email,
        "age": age,
        "address": {"street": street, "city": city, "zipCode": zip_code},
        "location": {"type": "Point", "coordinates": coordinates},
        "hobbies": hobbies,
        "createdAt": utc_now(),
    }


def primary_user() -> Dict[str, Any]:
    """데모에서 insert_one 으로 넣는 첫 사용자"""
    return _user("John Doe", "john@example.com", 30, "123 Main St", "New York", "10001",
                 NYC_COORDINATES, ["reading", "swimming"])


def bulk_users() -> List[Dict[str, Any]]:
    """데모에서 insert_many 로 넣는 사용자들"""
    return [
        _user("Jane Smith", "jane@example.com", 25, "456 Oak Ave", "Los Angeles", "90210",
              [-118.2437, 34.0522], ["painting", "hiking"]),
        _user("Bob Johnson", "bob@example.com", 35, "789 Pine Rd", "Chicago", "60601",
              [-87.6298, 41.8781], ["cooking", "traveling"]),
        _user("Alice Brown", "alice@example.com", 28, "321 Elm St", "Boston", "02101",
              [-71.0589, 42.3601], ["photography", "yoga"]),
    ]


def upsert_user_fields() -> Dict[str, Any]:
    """upsert 데모용 사용자 (email 은 필터로 사용되므로 제외)"""
    fields = _user("New User", "newuser@example.com", 22, "999 New St", "Miami", "33101",
                   [-80.1918, 25.7617], ["surfing"])
    fields.pop("email")
    return fields


def build_seed_posts(users: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    샘플 게시글을 앞에서부터 사용자에게 위치 기준으로 배정합니다.
    사용자가 4명보다 적으면 남는 게시글의 userId 는 None.
    """
    posts = []
    for index, sample in enumerate(SAMPLE_POSTS):
        user_id: Optional[Any] = users[index]["_id"] if index < len(users) else None
        posts.append({**sample, "userId": user_id})
    return posts


async def seed_posts(
    mongo: MongoContext,
    user_repository: Optional[UserRepository] = None,
    post_repository: Optional[PostRepository] = None,
) -> int:
    """
    posts 컬렉션이 비어 있고 사용자가 한 명 이상 있으면 샘플 게시글을 넣습니다.

    Returns:
        새로 넣은 게시글 수
    """
    user_repository = user_repository or UserRepository()
    post_repository = post_repository or PostRepository()

    if await post_repository.count(mongo) > 0:
        return 0

    users = await user_repository.get_all(mongo)
    if not users:
        logger.warning("사용자가 없어 게시글 시딩을 건너뜁니다.")
        return 0

    inserted = await post_repository.create_many(mongo, build_seed_posts(users))
    logger.info(f"게시글 시딩 완료: {len(inserted)}개 추가")
    return len(inserted)


async def init_seed_data(mongo: MongoContext) -> None:
    """앱 시작 시 자동으로 호출되어 전체 초기 데이터 시딩 수행"""
    await seed_posts(mongo)
