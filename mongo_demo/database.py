import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Request
from pymongo import ASCENDING, AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from mongo_demo.core.config import Settings

logger = logging.getLogger(__name__)


@dataclass
class MongoContext:
    """
    프로세스 단위로 공유되는 MongoDB 접근 컨텍스트
    - lifespan 에서 생성/종료되며 핸들러에는 Depends 로 주입됨
    """

    client: Optional[AsyncMongoClient]
    db: AsyncDatabase
    users: AsyncCollection
    posts: AsyncCollection

    async def close(self) -> None:
        if self.client is not None:
            await self.client.close()
            self.client = None
            logger.info("MongoDB 연결 종료")


def create_client(settings: Settings) -> AsyncMongoClient:
    return AsyncMongoClient(
        settings.MONGODB_URI,
        serverSelectionTimeoutMS=settings.SERVER_SELECTION_TIMEOUT_MS,
    )


async def connect_mongo(settings: Settings) -> MongoContext:
    """
    MongoDB 에 연결하고 users/posts 컬렉션 핸들을 묶어 반환합니다.
    연결 실패는 치명적 오류이므로 그대로 전파합니다.
    """
    client = create_client(settings)
    try:
        await client.admin.command("ping")
    except PyMongoError as e:
        logger.error(f"MongoDB 연결 실패 ({settings.MONGODB_URI}): {e}")
        await client.close()
        raise

    db = client[settings.DB_NAME]
    logger.info(f"MongoDB 연결 완료: db={settings.DB_NAME}")
    return MongoContext(
        client=client,
        db=db,
        users=db[settings.COLLECTION_NAME],
        posts=db[settings.POSTS_COLLECTION],
    )


async def ensure_indexes(mongo: MongoContext) -> None:
    """이메일 유니크 인덱스와 게시글 작성자 인덱스를 생성합니다 (실패 시 경고만 남김)."""
    try:
        await mongo.users.create_index([("email", ASCENDING)], unique=True)
        await mongo.posts.create_index([("userId", ASCENDING)])
    except PyMongoError as e:
        logger.warning(f"인덱스 생성 실패 (계속 진행): {e}")


def get_mongo(request: Request) -> MongoContext:
    """FastAPI Dependency Injection 용 MongoContext 조회"""
    return request.app.state.mongo
