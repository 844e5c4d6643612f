"""Application settings and configuration management."""
from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables or defaults."""

    DB_PATH: str = Field(default="data/screening.db")
    STORE_BACKEND: Literal["sqlite", "memory"] = "sqlite"

    LLM_CONFIG_PATH: str = "app_config.json"
    FALLBACK_BANK_PATH: Optional[str] = None
    QUESTION_COUNT: int = Field(default=6, ge=1)
    RANDOM_SEED: Optional[int] = None

    MAX_UPLOAD_BYTES: int = 10 * 1024 * 1024
    REFERRAL_CODES: List[str] = Field(default_factory=lambda: ["SWIPE2024", "INTERN123", "DEMO2024"])

    IDENTITY_JWT_SECRET: str = "change-me"
    IDENTITY_JWT_ALGORITHM: str = "HS256"
    IDENTITY_AUDIENCE: Optional[str] = None

    CORS_ORIGINS: List[str] = Field(default_factory=lambda: ["*"])

    model_config = SettingsConfigDict(env_file=".env", validate_assignment=True, extra="ignore")


settings = Settings()
