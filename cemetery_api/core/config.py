"""Application configuration from environment variables."""

from pydantic import field_validator
from pydantic_settings import BaseSettings
from typing import Literal, Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App
    APP_NAME: str = "Cemetery Records API"
    DEBUG: bool = False
    LOG_LEVEL: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = None
    API_PREFIX: str = "/api"
    CORS_ORIGINS: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]

    # Auth (tokens are issued by the identity provider)
    JWT_SECRET: str = "super-secret-jwt-key-change-in-production"
    JWT_ALGORITHM: str = "HS256"
    JWT_ROLE_CLAIM: str = "role"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def upper_case_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper() or None
        return value

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


settings = Settings()
