from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field, field_validator

from mongo_demo.models.base import DocumentModel, PyObjectId


class Address(DocumentModel):
    street: str = ""
    city: str = ""
    zip_code: str = ""


class GeoPoint(DocumentModel):
    """GeoJSON Point: [경도, 위도] 순서"""

    type: Literal["Point"] = "Point"
    coordinates: List[float] = Field(..., min_length=2, max_length=2)

    @field_validator("coordinates")
    @classmethod
    def check_range(cls, value: List[float]) -> List[float]:
        longitude, latitude = value
        if not -180 <= longitude <= 180:
            raise ValueError("longitude must be between -180 and 180")
        if not -90 <= latitude <= 90:
            raise ValueError("latitude must be between -90 and 90")
        return value


class UserDocument(DocumentModel):
    """
    users 컬렉션 문서
    - email 유일성은 DB 유니크 인덱스로 보장
    - category/group 같은 파생 태그는 update 연산으로만 설정되며 extra 필드로 보존
    """

    id: Optional[PyObjectId] = Field(default=None, alias="_id")
    name: Optional[str] = None
    email: str
    age: Optional[int] = None
    address: Address = Field(default_factory=Address)
    location: Optional[GeoPoint] = None
    hobbies: List[str] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    category: Optional[str] = None
    group: Optional[str] = None
