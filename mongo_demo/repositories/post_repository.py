import logging
from typing import Any, Dict, List

from bson import ObjectId
from pymongo.errors import PyMongoError

from mongo_demo.database import MongoContext

logger = logging.getLogger(__name__)


class PostRepository:
    """
    posts 컬렉션 접근을 담당하는 Repository 클래스
    """

    async def get_all(self, mongo: MongoContext) -> List[Dict[str, Any]]:
        try:
            posts = await mongo.posts.find({}).to_list()
            logger.info(f"게시글 목록 조회 완료: {len(posts)}개")
            return posts
        except PyMongoError as e:
            logger.error(f"게시글 목록 조회 오류: {e}")
            raise

    async def count(self, mongo: MongoContext) -> int:
        return await mongo.posts.count_documents({})

    async def create(self, mongo: MongoContext, post_data: Dict[str, Any]) -> ObjectId:
        try:
            result = await mongo.posts.insert_one(post_data)
            logger.info(f"게시글 생성 완료: {result.inserted_id}")
            return result.inserted_id
        except PyMongoError as e:
            logger.error(f"게시글 생성 오류: {e}")
            raise

    async def create_many(self, mongo: MongoContext, posts: List[Dict[str, Any]]) -> List[ObjectId]:
        try:
            result = await mongo.posts.insert_many(posts)
            logger.info(f"게시글 일괄 생성 완료: {len(result.inserted_ids)}개")
            return list(result.inserted_ids)
        except PyMongoError as e:
            logger.error(f"게시글 일괄 생성 오류: {e}")
            raise

    async def delete(self, mongo: MongoContext, post_id: ObjectId) -> bool:
        """
        게시글 하나를 삭제합니다. 삭제된 문서가 없으면 False.
        """
        try:
            result = await mongo.posts.delete_one({"_id": post_id})
            if result.deleted_count:
                logger.info(f"게시글 삭제 완료: {post_id}")
            else:
                logger.warning(f"삭제할 게시글을 찾을 수 없음: {post_id}")
            return result.deleted_count == 1
        except PyMongoError as e:
            logger.error(f"게시글 삭제 오류 (post_id={post_id}): {e}")
            raise

    async def assign_user(self, mongo: MongoContext, post_id: ObjectId, user_id: ObjectId) -> bool:
        """
        게시글의 userId 만 변경합니다. 대상 게시글이 없으면 False.
        """
        try:
            result = await mongo.posts.update_one(
                {"_id": post_id},
                {"$set": {"userId": user_id}},
            )
            if not result.matched_count:
                logger.warning(f"작성자를 변경할 게시글을 찾을 수 없음: {post_id}")
            return result.matched_count == 1
        except PyMongoError as e:
            logger.error(f"게시글 작성자 변경 오류 (post_id={post_id}): {e}")
            raise
