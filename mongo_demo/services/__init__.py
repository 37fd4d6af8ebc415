"""
서비스 계층 모듈

비즈니스 로직을 담당합니다.
Repository와 Router 사이의 중간 계층입니다.
"""

from .post_service import PostService
from .user_service import UserService

__all__ = [
    "PostService",
    "UserService",
]
