from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel

from mongo_demo.models.post import PostDocument
from mongo_demo.models.user import Address, GeoPoint, UserDocument


class RequestModel(BaseModel):
    """요청 본문 공통 설정 (camelCase 키 허용, 정의되지 않은 키는 무시)"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="ignore",
    )


class AddressInput(Address):
    """요청 본문의 주소 객체 (정의되지 않은 키는 무시)"""

    model_config = ConfigDict(extra="ignore")


class GeoPointInput(GeoPoint):
    """요청 본문의 GeoJSON Point (type, coordinates 만 저장)"""

    model_config = ConfigDict(extra="ignore")


class UserCreateRequest(RequestModel):
    """
    사용자 생성 요청 스키마
    주소는 평면 필드(street, city, zipCode) 또는 address 객체로 받을 수 있음
    """

    name: str = Field(..., min_length=1, max_length=100, description="사용자명")
    email: EmailStr = Field(..., description="이메일 주소 (소문자/공백 제거 후 저장)")
    age: int = Field(..., ge=0, le=150, description="나이")
    street: Optional[str] = Field(None, description="도로명 주소")
    city: Optional[str] = Field(None, description="도시")
    zip_code: Optional[str] = Field(None, description="우편번호")
    address: Optional[AddressInput] = Field(None, description="주소 객체 (평면 필드가 우선)")
    location: Optional[GeoPointInput] = Field(None, description="GeoJSON Point")
    hobbies: List[str] = Field(default_factory=list, description="취미 목록")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Emma Wilson",
                "email": "Emma@Example.com ",
                "age": 27,
                "street": "12 Harbor Rd",
                "city": "Seattle",
                "zipCode": "98101",
            }
        }
    )

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    def build_address(self) -> Address:
        """각 필드는 평면 값 → address 객체 값 → 빈 문자열 순서로 결정"""
        nested = self.address or Address()
        return Address(
            street=self.street or nested.street or "",
            city=self.city or nested.city or "",
            zip_code=self.zip_code or nested.zip_code or "",
        )


class UserResponse(UserDocument):
    """사용자 정보 응답 스키마"""


class UserWithPostsResponse(UserDocument):
    """작성한 게시글 목록을 포함한 사용자 응답"""

    posts: List[PostDocument] = Field(default_factory=list)


class UserCreateResponse(BaseModel):
    success: bool = True
    user: UserResponse


class ErrorResponse(BaseModel):
    """
    에러 응답 스키마
    """
    error: str = Field(..., description="에러 메시지")
    detail: Optional[str] = Field(None, description="상세 에러 정보")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": "User not found",
                "detail": "No user with id 65f1c0a2e4b0a1b2c3d4e5f6",
            }
        }
    )
