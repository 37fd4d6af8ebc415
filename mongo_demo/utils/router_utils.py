from fastapi import APIRouter, HTTPException

from mongo_demo.core.errors import status_for
from mongo_demo.schemas import ErrorResponse


def get_router(prefix: str):
    """
    공통 API 라우터 생성 유틸리티

    Args:
        prefix (str): 엔드포인트의 마지막 경로명 (예: "users", "posts")

    Returns:
        APIRouter: /api/{prefix} 구조의 FastAPI 라우터
    """
    prefix = prefix.strip("/").lower()
    return APIRouter(prefix=f"/api/{prefix}", tags=[prefix])


def raise_for_error(error: ErrorResponse) -> None:
    """서비스가 돌려준 ErrorResponse 를 상태 코드에 맞는 HTTPException 으로 변환"""
    raise HTTPException(
        status_code=status_for(error.error),
        detail=error.model_dump(),
    )
