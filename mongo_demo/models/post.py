from typing import Optional

from pydantic import Field

from mongo_demo.models.base import DocumentModel, PyObjectId


class PostDocument(DocumentModel):
    """
    posts 컬렉션 문서
    userId 는 users._id 를 참조하지만 참조 무결성은 보장하지 않음 (null 가능)
    """

    id: Optional[PyObjectId] = Field(default=None, alias="_id")
    title: str
    body: str
    user_id: Optional[PyObjectId] = None
