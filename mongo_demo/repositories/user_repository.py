import logging
from typing import Any, Dict, List, Optional

from bson import ObjectId
from pymongo.errors import DuplicateKeyError, PyMongoError

from mongo_demo.database import MongoContext

logger = logging.getLogger(__name__)


class UserRepository:
    """
    users 컬렉션 접근을 담당하는 Repository 클래스
    DB 오류는 로그를 남긴 뒤 서비스 계층으로 그대로 전파합니다.
    """

    async def get_all(self, mongo: MongoContext) -> List[Dict[str, Any]]:
        """
        모든 사용자를 조회합니다 (페이징 없음).
        """
        try:
            users = await mongo.users.find({}).to_list()
            logger.info(f"사용자 목록 조회 완료: {len(users)}명")
            return users
        except PyMongoError as e:
            logger.error(f"사용자 목록 조회 오류: {e}")
            raise

    async def get_by_id(self, mongo: MongoContext, user_id: ObjectId) -> Optional[Dict[str, Any]]:
        try:
            user = await mongo.users.find_one({"_id": user_id})
            if not user:
                logger.warning(f"사용자 ID를 찾을 수 없음: {user_id}")
            return user
        except PyMongoError as e:
            logger.error(f"사용자 ID 조회 오류 (user_id={user_id}): {e}")
            raise

    async def get_by_email(self, mongo: MongoContext, email: str) -> Optional[Dict[str, Any]]:
        try:
            return await mongo.users.find_one({"email": email})
        except PyMongoError as e:
            logger.error(f"사용자 이메일 조회 오류 (email={email}): {e}")
            raise

    async def exists_by_email(self, mongo: MongoContext, email: str) -> bool:
        return await self.get_by_email(mongo, email) is not None

    async def create(self, mongo: MongoContext, user_data: Dict[str, Any]) -> ObjectId:
        """
        새로운 사용자를 저장하고 생성된 _id 를 반환합니다.
        이메일 중복은 유니크 인덱스가 DuplicateKeyError 로 알려줍니다.
        """
        try:
            result = await mongo.users.insert_one(user_data)
            logger.info(f"사용자 생성 완료: {user_data.get('email')}")
            return result.inserted_id
        except DuplicateKeyError:
            logger.warning(f"이미 존재하는 이메일: {user_data.get('email')}")
            raise
        except PyMongoError as e:
            logger.error(f"사용자 생성 오류: {e}")
            raise
