# utils/dependencies.py
from fastapi.templating import Jinja2Templates

from mongo_demo.core.config import settings
from mongo_demo.services import PostService, UserService
from mongo_demo.utils.datetime import to_display_string

templates = Jinja2Templates(directory=str(settings.TEMPLATES_DIR))
templates.env.filters["display_time"] = to_display_string


def get_user_service() -> UserService:
    """
    사용자 서비스 의존성 주입 (FastAPI Depends용)
    """
    return UserService()


def get_post_service() -> PostService:
    """
    게시글 서비스 의존성 주입 (FastAPI Depends용)
    """
    return PostService()
