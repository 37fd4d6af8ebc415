# routers/user.py
from typing import Annotated, List

from fastapi import Depends

from mongo_demo.database import MongoContext, get_mongo
from mongo_demo.schemas import (
    ErrorResponse,
    UserCreateRequest,
    UserCreateResponse,
    UserWithPostsResponse,
)
from mongo_demo.services import UserService
from mongo_demo.utils.dependencies import get_user_service
from mongo_demo.utils.router_utils import get_router, raise_for_error

# 라우터 생성
router = get_router("users")


@router.get(
    "",
    response_model=List[UserWithPostsResponse],
    summary="사용자 목록 조회",
    description="모든 사용자를 작성한 게시글 목록과 함께 조회합니다.",
    responses={500: {"model": ErrorResponse, "description": "조회 실패"}},
)
async def get_users(
    service: Annotated[UserService, Depends(get_user_service)],
    mongo: Annotated[MongoContext, Depends(get_mongo)],
):
    users, error = await service.get_users_with_posts(mongo)
    if error:
        raise_for_error(error)
    return users


@router.post(
    "",
    response_model=UserCreateResponse,
    summary="사용자 생성",
    description="새로운 사용자를 생성합니다. 이메일은 소문자/공백 제거 후 중복을 확인합니다.",
    responses={
        400: {"model": ErrorResponse, "description": "필수 값 누락 또는 이미 존재하는 이메일"},
        500: {"model": ErrorResponse, "description": "저장 실패"},
    },
)
async def create_user(
    user_data: UserCreateRequest,
    service: Annotated[UserService, Depends(get_user_service)],
    mongo: Annotated[MongoContext, Depends(get_mongo)],
):
    """
    - **name**: 사용자명
    - **email**: 이메일 주소
    - **age**: 나이
    - **street / city / zipCode**: 주소 (또는 address 객체)
    """
    result, error = await service.create_user(mongo, user_data)
    if error:
        raise_for_error(error)
    return result
