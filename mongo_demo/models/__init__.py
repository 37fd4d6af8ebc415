"""
데이터 모델 모듈

MongoDB 문서 구조(users, posts)를 Pydantic 모델로 정의합니다.
"""
from mongo_demo.models.base import DocumentModel, PyObjectId
from mongo_demo.models.post import PostDocument
from mongo_demo.models.user import Address, GeoPoint, UserDocument

__all__ = [
    "Address",
    "DocumentModel",
    "GeoPoint",
    "PostDocument",
    "PyObjectId",
    "UserDocument",
]
