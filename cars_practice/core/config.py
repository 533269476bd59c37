"""Application configuration from environment."""
from pathlib import Path

from pydantic_settings import BaseSettings

DEFAULT_SECRET_KEY = "change-me-in-production-use-env"


class Settings(BaseSettings):
    """App settings loaded from env / .env."""

    app_name: str = "MCAT CARS Practice API"
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite+aiosqlite:///./cars_practice.db"
    seed_on_startup: bool = True

    # JWT
    secret_key: str = DEFAULT_SECRET_KEY
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24 * 7  # 7 days

    # bcrypt work factor
    bcrypt_rounds: int = 10

    # HTTP
    api_prefix: str = "/api/v1"
    cors_origins: list[str] = ["http://localhost:5173"]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def get_settings() -> Settings:
    return Settings()


# Packaged seed data lives next to the code
DATA_DIR = Path(__file__).resolve().parent.parent / "data"
