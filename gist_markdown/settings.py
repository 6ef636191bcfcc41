"""Application settings loaded from environment variables and .env file."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_URL = "https://api.github.com"


class Settings(BaseSettings):
    """Settings for the gist downloader."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    github_token: str | None = None
    github_api_url: str = DEFAULT_API_URL
    # Credential helper binary, looked up on PATH
    gh_command: str = "gh"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
