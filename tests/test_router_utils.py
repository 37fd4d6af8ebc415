import pytest
from fastapi import HTTPException

from mongo_demo.schemas import ErrorResponse
from mongo_demo.utils.router_utils import get_router, raise_for_error


def test_get_router_builds_api_prefix():
    router = get_router("/Users/")

    assert router.prefix == "/api/users"
    assert router.tags == ["users"]


def test_raise_for_error_maps_status():
    with pytest.raises(HTTPException) as exc_info:
        raise_for_error(ErrorResponse(error="Post not found", detail="gone"))

    assert exc_info.value.status_code == 404
    assert exc_info.value.detail == {"error": "Post not found", "detail": "gone"}
