# mongo_demo/core/config.py
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent.parent

# 기존 데모와 동일하게 config.env 를 우선 읽고, 없으면 .env 사용
load_dotenv(BASE_DIR / "config.env")
load_dotenv()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(extra="ignore")

    MONGODB_URI: str = "mongodb://localhost:27017"
    DB_NAME: str = "mongo_demo"
    COLLECTION_NAME: str = "users"
    POSTS_COLLECTION: str = "posts"
    SERVER_SELECTION_TIMEOUT_MS: int = 30000

    DEPLOY_PHASE: str = "local"
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    TEMPLATES_DIR: Path = Path(__file__).resolve().parent.parent / "templates"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
