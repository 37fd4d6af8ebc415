"""
컨트롤러 모듈

API 엔드포인트와 렌더링 페이지를 정의합니다.
요청을 받아 적절한 서비스로 라우팅합니다.
"""

from .pages import router as pages_router
from .post import router as post_router
from .user import router as user_router

__all__ = [
    "pages_router",
    "post_router",
    "user_router",
]
