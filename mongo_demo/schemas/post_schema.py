from typing import Optional

from pydantic import BaseModel, Field

from mongo_demo.models.base import PyObjectId
from mongo_demo.models.post import PostDocument
from mongo_demo.models.user import UserDocument
from mongo_demo.schemas.user_schema import RequestModel


class PostCreateRequest(RequestModel):
    """
    게시글 생성 요청 스키마
    """
    user_id: str = Field(..., min_length=1, description="작성자 사용자 ID (ObjectId hex)")
    title: str = Field(..., min_length=1, max_length=200, description="제목")
    body: str = Field(..., min_length=1, description="본문")


class PostAssignRequest(RequestModel):
    """게시글 작성자 변경 요청 스키마"""

    user_id: str = Field(..., min_length=1, description="새 작성자 사용자 ID (ObjectId hex)")


class PostWithUserResponse(PostDocument):
    """작성자 정보를 포함한 게시글 응답 (작성자가 없으면 null)"""

    user: Optional[UserDocument] = None


class PostCreateResponse(BaseModel):
    success: bool = True
    id: PyObjectId


class SuccessResponse(BaseModel):
    success: bool = True
