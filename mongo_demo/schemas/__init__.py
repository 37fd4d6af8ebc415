from .post_schema import (
    PostAssignRequest,
    PostCreateRequest,
    PostCreateResponse,
    PostWithUserResponse,
    SuccessResponse,
)
from .user_schema import (
    ErrorResponse,
    UserCreateRequest,
    UserCreateResponse,
    UserResponse,
    UserWithPostsResponse,
)

__all__ = [
    "ErrorResponse",
    "PostAssignRequest",
    "PostCreateRequest",
    "PostCreateResponse",
    "PostWithUserResponse",
    "SuccessResponse",
    "UserCreateRequest",
    "UserCreateResponse",
    "UserResponse",
    "UserWithPostsResponse",
]
