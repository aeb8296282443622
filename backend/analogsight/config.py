"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    analogsight_env: str = "development"
    analogsight_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Largest literal body the API accepts, in characters
    max_literal_chars: int = 65536

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
