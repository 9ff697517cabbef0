"""Client configuration loaded from environment."""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """PodcastIndex client settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PODCASTINDEX_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Credentials (https://api.podcastindex.org/signup)
    api_key: str = ""
    api_secret: str = ""

    # The API rejects requests without an identifying User-Agent
    user_agent: str = "podindex/0.1"

    base_url: str = "https://api.podcastindex.org/api/1.0"
    timeout: float = 30.0

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key and self.api_secret)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
