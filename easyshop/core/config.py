# easyshop/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    Required env vars (.env):
      - JWT_SECRET (HMAC secret shared with the identity provider)

    Optional:
      - DATABASE_URL (defaults to a local SQLite file)
      - API_PREFIX (e.g. "/api/v1"; empty by default)
    """

    PROJECT_NAME: str = "EasyShop API"
    API_PREFIX: str = ""

    # Database config
    DATABASE_URL: str = "sqlite:///./easyshop.db"
    DB_ECHO: bool = False
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10
    DB_SSL_REQUIRED: bool = False

    # JWT verification (tokens are issued by the identity provider)
    JWT_SECRET: str
    JWT_ALG: str = "HS256"

    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:8080",
    ]

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
