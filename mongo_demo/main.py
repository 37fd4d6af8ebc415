"""
Main.py works as a main function for the web server
Api app starts from here
"""

from contextlib import asynccontextmanager
from logging import getLogger
from logging.config import dictConfig

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from mongo_demo.core.config import settings
from mongo_demo.core.errors import INVALID_REQUEST, MISSING_FIELDS
from mongo_demo.database import connect_mongo, ensure_indexes
from mongo_demo.routers import pages_router, post_router, user_router
from mongo_demo.utils.logger import sample_logger
from mongo_demo.utils.seed_data import init_seed_data

logger = getLogger(__name__)


# ----------------------------------------------------------------------
# Lifespan: 앱 시작 시 MongoDB 연결/시딩, 종료 시 연결 해제
# ----------------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    # 연결 실패는 서버 기동 실패로 이어짐
    mongo = await connect_mongo(settings)
    app.state.mongo = mongo

    await ensure_indexes(mongo)

    try:
        await init_seed_data(mongo)
    except Exception as e:
        logger.error(f"데이터 시딩 중 오류 발생: {e}")

    logger.info(f"서버 준비 완료: http://localhost:{settings.PORT}")

    try:
        yield
    finally:
        await mongo.close()


# ----------------------------------------------------------------------
# FastAPI 애플리케이션 생성
# ----------------------------------------------------------------------
app = FastAPI(
    title="Mongo Demo",
    description="MongoDB 사용자/게시글 CRUD 데모 API",
    version="1.0.0",
    docs_url="/api/docs" if settings.DEPLOY_PHASE in ("dev", "local") else None,
    lifespan=lifespan,
)

# ----------------------------------------------------------------------
# 로거 설정
# ----------------------------------------------------------------------
dictConfig(sample_logger)

# ----------------------------------------------------------------------
# 예외 핸들러
# ----------------------------------------------------------------------


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # 서비스 ErrorResponse 는 {"error", "detail"} 형태 그대로 응답 본문이 됨
    if isinstance(exc.detail, dict) and "error" in exc.detail:
        content = exc.detail
    else:
        content = {"error": str(exc.detail)}
    return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    error_messages = []
    missing = False

    for error in errors:
        field = error.get("loc", [])[-1] if error.get("loc") else "unknown"
        msg = error.get("msg", "")

        if error.get("type") == "missing":
            missing = True
            error_messages.append(f"{field} is required")
        elif "valid email" in msg.lower():
            error_messages.append(f"{field} must be a valid email address")
        else:
            error_messages.append(f"{field}: {msg}")

    for message in error_messages:
        logger.warning(message)

    return JSONResponse(
        status_code=400,
        content={
            "error": MISSING_FIELDS if missing else INVALID_REQUEST,
            "detail": "; ".join(error_messages),
        },
    )

# ----------------------------------------------------------------------
# CORS 설정
# ----------------------------------------------------------------------
origins = [
    f"http://localhost:{settings.PORT}",
    f"http://127.0.0.1:{settings.PORT}",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ----------------------------------------------------------------------
# 라우터 등록
# ----------------------------------------------------------------------
app.include_router(user_router)  # /api/users
app.include_router(post_router)  # /api/posts
app.include_router(pages_router)  # /, /users, /posts


def run() -> None:
    """mongo-demo-server 엔트리포인트"""
    uvicorn.run(
        "mongo_demo.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_config=sample_logger,
    )


if __name__ == "__main__":
    run()
