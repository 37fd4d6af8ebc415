import logging
from typing import List, Optional

from mongo_demo.core.errors import (
    DATABASE_ERROR,
    INVALID_ID,
    INVALID_ID_OR_DATA,
    INVALID_USER_ID,
    LOAD_FAILED,
    NOT_FOUND,
    POST_CREATE_FAILED,
    POST_NOT_FOUND,
    USER_NOT_FOUND,
)
from mongo_demo.database import MongoContext
from mongo_demo.repositories.post_repository import PostRepository
from mongo_demo.repositories.user_repository import UserRepository
from mongo_demo.schemas import (
    ErrorResponse,
    PostAssignRequest,
    PostCreateRequest,
    PostCreateResponse,
    PostWithUserResponse,
)
from mongo_demo.services.join import attach_user
from mongo_demo.utils.object_id import to_object_id

logger = logging.getLogger(__name__)


class PostService:
    """
    게시글 관련 비즈니스 로직을 담당하는 Service 클래스
    """

    def __init__(
        self,
        post_repository: Optional[PostRepository] = None,
        user_repository: Optional[UserRepository] = None,
    ):
        self.post_repository = post_repository or PostRepository()
        self.user_repository = user_repository or UserRepository()

    async def get_posts_with_user(
        self, mongo: MongoContext
    ) -> tuple[Optional[List[PostWithUserResponse]], Optional[ErrorResponse]]:
        """
        모든 게시글을 작성자 정보와 함께 조회합니다.
        작성자가 없거나 삭제된 경우 user 는 None 입니다.
        """
        try:
            posts = await self.post_repository.get_all(mongo)
            users = await self.user_repository.get_all(mongo)
            joined = attach_user(posts, users)
            return [PostWithUserResponse.model_validate(p) for p in joined], None

        except Exception as e:
            logger.error(f"게시글 목록 조회 서비스 오류: {e}")
            return None, ErrorResponse(error=LOAD_FAILED, detail=str(e))

    async def create_post(
        self, mongo: MongoContext, post_data: PostCreateRequest
    ) -> tuple[Optional[PostCreateResponse], Optional[ErrorResponse]]:
        """
        존재하는 사용자를 작성자로 하는 게시글을 생성합니다.

        Returns:
            성공 시: (PostCreateResponse, None)
            실패 시: (None, ErrorResponse) - 잘못된 ID / 사용자 없음 / DB 오류
        """
        user_id = to_object_id(post_data.user_id)
        if user_id is None:
            return None, ErrorResponse(
                error=INVALID_USER_ID,
                detail=f"'{post_data.user_id}' is not a valid ObjectId",
            )

        try:
            user = await self.user_repository.get_by_id(mongo, user_id)
            if not user:
                return None, ErrorResponse(
                    error=USER_NOT_FOUND,
                    detail=f"No user with id {user_id}",
                )

            inserted_id = await self.post_repository.create(
                mongo,
                {"userId": user["_id"], "title": post_data.title, "body": post_data.body},
            )
            logger.info(f"게시글 생성 서비스 완료: {inserted_id}")
            return PostCreateResponse(id=inserted_id), None

        except Exception as e:
            logger.error(f"게시글 생성 서비스 오류: {e}")
            return None, ErrorResponse(error=POST_CREATE_FAILED, detail=str(e))

    async def delete_post(self, mongo: MongoContext, post_id: str) -> Optional[ErrorResponse]:
        """
        게시글을 삭제합니다.
        """
        oid = to_object_id(post_id)
        if oid is None:
            return ErrorResponse(error=INVALID_ID, detail=f"'{post_id}' is not a valid ObjectId")

        try:
            if not await self.post_repository.delete(mongo, oid):
                return ErrorResponse(error=NOT_FOUND, detail=f"No post with id {post_id}")

            logger.info(f"게시글 삭제 서비스 완료: {post_id}")
            return None

        except Exception as e:
            logger.error(f"게시글 삭제 서비스 오류: {e}")
            return ErrorResponse(error=DATABASE_ERROR, detail=str(e))

    async def assign_post(
        self, mongo: MongoContext, post_id: str, assign_data: PostAssignRequest
    ) -> Optional[ErrorResponse]:
        """
        게시글의 작성자(userId)만 다른 사용자로 변경합니다.
        이미 같은 사용자에게 배정된 경우도 성공으로 처리합니다.
        """
        post_oid = to_object_id(post_id)
        user_oid = to_object_id(assign_data.user_id)
        if post_oid is None or user_oid is None:
            return ErrorResponse(
                error=INVALID_ID_OR_DATA,
                detail=f"post id '{post_id}' / user id '{assign_data.user_id}'",
            )

        try:
            user = await self.user_repository.get_by_id(mongo, user_oid)
            if not user:
                return ErrorResponse(error=USER_NOT_FOUND, detail=f"No user with id {user_oid}")

            if not await self.post_repository.assign_user(mongo, post_oid, user["_id"]):
                return ErrorResponse(error=POST_NOT_FOUND, detail=f"No post with id {post_oid}")

            logger.info(f"게시글 작성자 변경 완료: post={post_oid}, user={user_oid}")
            return None

        except Exception as e:
            logger.error(f"게시글 작성자 변경 서비스 오류: {e}")
            return ErrorResponse(error=DATABASE_ERROR, detail=str(e))
