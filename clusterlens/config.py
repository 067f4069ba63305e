from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Admission limits
    MAX_VERTICES: int = 100_000
    MAX_EDGES: int = 200_000

    # Engine
    DEFAULT_ALGORITHM: str = "bfs"

    # HTTP
    CORS_ALLOW_ORIGINS: list[str] = Field(default_factory=lambda: ["*"])

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = Field(default="json", description="'json' for production, 'console' for dev")


def get_settings() -> Settings:
    return Settings()
