from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment."""

    app_name: str = Field(default="Scrum Board API", validation_alias="APP_NAME")
    environment: str = Field(default="local", validation_alias="APP_ENV")
    version: str = Field(default="0.1.0")
    board_data_path: str = Field(default="data/board.json", validation_alias="BOARD_DATA_PATH")
    cors_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:3000",  # Next.js dev
            "http://localhost:5173",  # Vite dev
            "http://127.0.0.1:3000",
        ),
        validation_alias="CORS_ORIGINS",
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    host: str = Field(default="0.0.0.0", validation_alias="HOST")
    port: int = Field(default=3000, validation_alias="PORT")

    @property
    def allow_all_origins(self) -> bool:
        return self.environment in ("local", "development") or "*" in self.cors_origins

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="allow")


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()
