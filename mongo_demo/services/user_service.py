import logging
from typing import List, Optional

from pymongo.errors import DuplicateKeyError

from mongo_demo.core.errors import EMAIL_EXISTS, LOAD_FAILED, USER_CREATE_FAILED
from mongo_demo.database import MongoContext
from mongo_demo.repositories.post_repository import PostRepository
from mongo_demo.repositories.user_repository import UserRepository
from mongo_demo.schemas import (
    ErrorResponse,
    UserCreateRequest,
    UserCreateResponse,
    UserResponse,
    UserWithPostsResponse,
)
from mongo_demo.services.join import attach_posts
from mongo_demo.utils.datetime import utc_now

logger = logging.getLogger(__name__)


class UserService:
    """
    사용자 관련 비즈니스 로직을 담당하는 Service 클래스
    """

    def __init__(
        self,
        user_repository: Optional[UserRepository] = None,
        post_repository: Optional[PostRepository] = None,
    ):
        self.user_repository = user_repository or UserRepository()
        self.post_repository = post_repository or PostRepository()

    async def get_users_with_posts(
        self, mongo: MongoContext
    ) -> tuple[Optional[List[UserWithPostsResponse]], Optional[ErrorResponse]]:
        """
        모든 사용자와 각 사용자가 작성한 게시글을 함께 조회합니다.

        Returns:
            성공 시: (List[UserWithPostsResponse], None)
            실패 시: (None, ErrorResponse)
        """
        try:
            users = await self.user_repository.get_all(mongo)
            posts = await self.post_repository.get_all(mongo)
            joined = attach_posts(users, posts)
            return [UserWithPostsResponse.model_validate(u) for u in joined], None

        except Exception as e:
            logger.error(f"사용자 목록 조회 서비스 오류: {e}")
            return None, ErrorResponse(error=LOAD_FAILED, detail=str(e))

    async def create_user(
        self, mongo: MongoContext, user_data: UserCreateRequest
    ) -> tuple[Optional[UserCreateResponse], Optional[ErrorResponse]]:
        """
        새로운 사용자를 생성합니다.

        Args:
            mongo: MongoDB 컨텍스트
            user_data: 사용자 생성 요청 데이터 (email 은 이미 소문자/공백 제거 상태)

        Returns:
            성공 시: (UserCreateResponse, None)
            실패 시: (None, ErrorResponse)
        """
        email = user_data.email
        try:
            # 이메일 중복 확인
            if await self.user_repository.exists_by_email(mongo, email):
                logger.warning(f"이메일 중복 생성 시도: {email}")
                return None, ErrorResponse(
                    error=EMAIL_EXISTS,
                    detail=f"Email '{email}' is already in use",
                )

            document = {
                "name": user_data.name,
                "email": email,
                "age": user_data.age,
                "address": user_data.build_address().model_dump(by_alias=True),
                "hobbies": list(user_data.hobbies),
                "createdAt": utc_now(),
            }
            if user_data.location is not None:
                document["location"] = user_data.location.model_dump(by_alias=True)

            inserted_id = await self.user_repository.create(mongo, document)
            document["_id"] = inserted_id

            logger.info(f"사용자 생성 서비스 완료: {email}")
            return UserCreateResponse(user=UserResponse.model_validate(document)), None

        except DuplicateKeyError:
            # 중복 체크 이후 동시에 같은 이메일이 들어온 경우
            return None, ErrorResponse(
                error=EMAIL_EXISTS,
                detail=f"Email '{email}' is already in use",
            )
        except Exception as e:
            logger.error(f"사용자 생성 서비스 오류: {e}")
            return None, ErrorResponse(error=USER_CREATE_FAILED, detail=str(e))
