"""Product Hunt backend — Configuration via pydantic-settings."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///./producthunt.db"

    # Security
    SECRET_KEY: str = "change-me"
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRATION_MINUTES: int = 60 * 24 * 7

    # Default admin seeded on startup
    DEFAULT_ADMIN_EMAIL: str = "admin@producthunt.local"
    DEFAULT_ADMIN_PASSWORD: str = "admin123"

    # Timezone
    TIMEZONE: str = "UTC"

    # Business rules
    FREE_PRODUCT_LIMIT: int = 1
    MEMBERSHIP_DURATION_DAYS: int = 30
    RISING_VOTE_THRESHOLD: int = 10
    DEFAULT_PAGE_SIZE: int = 20
    MAX_PAGE_SIZE: int = 100

    # CORS
    CORS_ORIGINS: list[str] = ["http://localhost:5173"]

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
