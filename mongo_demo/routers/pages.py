# routers/pages.py
"""
서버 렌더링 페이지 (Jinja2)
"""
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from mongo_demo.database import MongoContext, get_mongo
from mongo_demo.services import PostService, UserService
from mongo_demo.utils.dependencies import get_post_service, get_user_service, templates
from mongo_demo.utils.router_utils import raise_for_error

router = APIRouter(tags=["pages"], include_in_schema=False)


async def _render_users(request: Request, template: str, service: UserService, mongo: MongoContext):
    users, error = await service.get_users_with_posts(mongo)
    if error:
        raise_for_error(error)
    return templates.TemplateResponse(request, template, {"users": users})


@router.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    service: Annotated[UserService, Depends(get_user_service)],
    mongo: Annotated[MongoContext, Depends(get_mongo)],
):
    return await _render_users(request, "index.html", service, mongo)


@router.get("/users", response_class=HTMLResponse)
async def users_page(
    request: Request,
    service: Annotated[UserService, Depends(get_user_service)],
    mongo: Annotated[MongoContext, Depends(get_mongo)],
):
    return await _render_users(request, "users.html", service, mongo)


@router.get("/posts", response_class=HTMLResponse)
async def posts_page(
    request: Request,
    post_service: Annotated[PostService, Depends(get_post_service)],
    user_service: Annotated[UserService, Depends(get_user_service)],
    mongo: Annotated[MongoContext, Depends(get_mongo)],
):
    posts, error = await post_service.get_posts_with_user(mongo)
    if error:
        raise_for_error(error)
    # 배정 드롭다운용 사용자 목록 (게시글 조인 결과는 사용하지 않음)
    users, error = await user_service.get_users_with_posts(mongo)
    if error:
        raise_for_error(error)
    return templates.TemplateResponse(request, "posts.html", {"posts": posts, "users": users})
