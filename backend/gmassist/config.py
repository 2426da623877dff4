# backend/gmassist/config.py
from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    app_name: str = "GM Assistant"
    debug: bool = False
    log_level: str = "INFO"

    # Database
    database_url: str = Field(default="sqlite:///./gmassist.db")

    # Auth
    secret_key: str = Field(default="change-me-in-production")
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24

    cors_origins: List[str] = ["http://localhost:5173", "http://localhost:3000"]

    # Text-generation collaborator
    openai_api_key: Optional[str] = None
    openai_base_url: Optional[str] = None
    openai_model: str = "gpt-4o-mini"
    openai_timeout_seconds: float = 30.0

    # Request timing
    metrics_capacity: int = 1000
    slow_request_ms: int = 500


@lru_cache
def get_settings() -> Settings:
    return Settings()
