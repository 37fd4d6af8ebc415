"""
API 에러 메시지와 HTTP 상태 코드 매핑
서비스는 ErrorResponse(error=<아래 상수>) 를 반환하고, 라우터가 상태 코드를 결정합니다.
"""
from fastapi import status

MISSING_FIELDS = "Missing fields"
INVALID_REQUEST = "Invalid request"
EMAIL_EXISTS = "Email already exists"
USER_CREATE_FAILED = "Failed to add user"
POST_CREATE_FAILED = "Failed to add post"
INVALID_USER_ID = "Invalid user ID"
INVALID_ID = "Invalid ID"
INVALID_ID_OR_DATA = "Invalid ID or bad data"
USER_NOT_FOUND = "User not found"
POST_NOT_FOUND = "Post not found"
NOT_FOUND = "Not found"
LOAD_FAILED = "Failed to load data"
DATABASE_ERROR = "Database error"

ERROR_STATUS = {
    MISSING_FIELDS: status.HTTP_400_BAD_REQUEST,
    INVALID_REQUEST: status.HTTP_400_BAD_REQUEST,
    EMAIL_EXISTS: status.HTTP_400_BAD_REQUEST,
    INVALID_USER_ID: status.HTTP_400_BAD_REQUEST,
    INVALID_ID: status.HTTP_400_BAD_REQUEST,
    INVALID_ID_OR_DATA: status.HTTP_400_BAD_REQUEST,
    USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    POST_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


def status_for(error: str) -> int:
    return ERROR_STATUS.get(error, status.HTTP_500_INTERNAL_SERVER_ERROR)
