# routers/post.py
from typing import Annotated, List

from fastapi import Depends

from mongo_demo.database import MongoContext, get_mongo
from mongo_demo.schemas import (
    ErrorResponse,
    PostAssignRequest,
    PostCreateRequest,
    PostCreateResponse,
    PostWithUserResponse,
    SuccessResponse,
)
from mongo_demo.services import PostService
from mongo_demo.utils.dependencies import get_post_service
from mongo_demo.utils.router_utils import get_router, raise_for_error

router = get_router("posts")


@router.get(
    "",
    response_model=List[PostWithUserResponse],
    summary="게시글 목록 조회",
    description="모든 게시글을 작성자 정보와 함께 조회합니다.",
    responses={500: {"model": ErrorResponse, "description": "조회 실패"}},
)
async def get_posts(
    service: Annotated[PostService, Depends(get_post_service)],
    mongo: Annotated[MongoContext, Depends(get_mongo)],
):
    posts, error = await service.get_posts_with_user(mongo)
    if error:
        raise_for_error(error)
    return posts


@router.post(
    "",
    response_model=PostCreateResponse,
    summary="게시글 생성",
    responses={
        400: {"model": ErrorResponse, "description": "필수 값 누락 또는 잘못된 사용자 ID"},
        404: {"model": ErrorResponse, "description": "사용자를 찾을 수 없음"},
    },
)
async def create_post(
    post_data: PostCreateRequest,
    service: Annotated[PostService, Depends(get_post_service)],
    mongo: Annotated[MongoContext, Depends(get_mongo)],
):
    result, error = await service.create_post(mongo, post_data)
    if error:
        raise_for_error(error)
    return result


@router.delete(
    "/{post_id}",
    response_model=SuccessResponse,
    summary="게시글 삭제",
    responses={
        400: {"model": ErrorResponse, "description": "잘못된 ID"},
        404: {"model": ErrorResponse, "description": "게시글을 찾을 수 없음"},
    },
)
async def delete_post(
    post_id: str,
    service: Annotated[PostService, Depends(get_post_service)],
    mongo: Annotated[MongoContext, Depends(get_mongo)],
):
    error = await service.delete_post(mongo, post_id)
    if error:
        raise_for_error(error)
    return SuccessResponse()


@router.patch(
    "/{post_id}/assign",
    response_model=SuccessResponse,
    summary="게시글 작성자 변경",
    description="게시글의 userId 만 다른 사용자로 변경합니다.",
    responses={
        400: {"model": ErrorResponse, "description": "잘못된 ID 또는 요청 데이터"},
        404: {"model": ErrorResponse, "description": "사용자 또는 게시글을 찾을 수 없음"},
    },
)
async def assign_post(
    post_id: str,
    assign_data: PostAssignRequest,
    service: Annotated[PostService, Depends(get_post_service)],
    mongo: Annotated[MongoContext, Depends(get_mongo)],
):
    error = await service.assign_post(mongo, post_id, assign_data)
    if error:
        raise_for_error(error)
    return SuccessResponse()
