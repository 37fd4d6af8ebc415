from typing import Annotated, Any

from bson import Decimal128, ObjectId
from pydantic import BaseModel, BeforeValidator, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


def _stringify_object_id(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    return value


def _stringify_bson(value: Any) -> Any:
    """extra 필드 안의 BSON 전용 타입을 JSON 으로 내보낼 수 있는 값으로 변환"""
    if isinstance(value, (ObjectId, Decimal128)):
        return str(value)
    if isinstance(value, dict):
        return {key: _stringify_bson(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_stringify_bson(item) for item in value]
    return value


# MongoDB ObjectId 는 응답에서 24자리 hex 문자열로 노출
PyObjectId = Annotated[str, BeforeValidator(_stringify_object_id)]


class DocumentModel(BaseModel):
    """
    모든 문서 모델의 공통 설정:
    - 필드명은 snake_case, 저장/응답 키는 camelCase (zipCode, createdAt, userId ...)
    - 스키마에 없는 필드(category, group 등 파생 태그)도 보존
    - 보존된 필드의 ObjectId/Decimal128 값은 문자열로 변환
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    @model_validator(mode="after")
    def stringify_extra_bson(self):
        extra = self.__pydantic_extra__
        if extra:
            for key, value in extra.items():
                extra[key] = _stringify_bson(value)
        return self
