"""Application configuration loaded from environment variables."""
import os
from functools import lru_cache
from typing import Optional

from pydantic import SecretStr
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # Database location
    data_path: str = os.getenv("DATA_PATH", os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))
    database_name: str = "wellness.db"

    @property
    def database_path(self) -> str:
        return os.path.join(self.data_path, self.database_name)

    # API configuration
    api_host: str = "127.0.0.1"
    api_port: int = 8082

    # CORS
    cors_origins: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    # Generative text API
    gemini_api_key: Optional[SecretStr] = None
    gemini_model: str = "gemini-1.5-flash"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"

    # Sessions
    session_ttl_hours: int = 168

    log_level: str = "INFO"

    class Config:
        env_prefix = "WELLNESS_"
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()
