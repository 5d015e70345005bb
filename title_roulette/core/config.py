"""Application configuration loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    tmdb_api_key: str | None = Field(default=None, alias="TMDB_API_KEY")
    tmdb_base_url: str = Field(default="https://api.themoviedb.org/3")
    tmdb_language: str = Field(default="pt-BR")
    tmdb_region: str = Field(default="BR")
    # 8 => Netflix in TMDb's watch provider list
    tmdb_provider_id: int = Field(default=8)
    tmdb_image_base: str = Field(default="https://image.tmdb.org/t/p/w500")
    tmdb_timeout: float = Field(default=10.0)
    youtube_watch_base: str = Field(default="https://www.youtube.com/watch?v=")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()
