from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Sentry error monitoring
    sentry_dsn: str | None = None

    # Environment
    environment: str = "development"

    # API Settings
    api_title: str = "Recipe Stripper API"
    api_version: str = "1.0.0"
    cors_origins: list[str] = ["*"]

    # Page fetching
    fetch_timeout: float = 15.0  # seconds
    user_agent: str = "Mozilla/5.0 (compatible; RecipeStripper/1.0)"

    @property
    def sentry_enabled(self) -> bool:
        """Check if Sentry is configured."""
        return bool(self.sentry_dsn)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
