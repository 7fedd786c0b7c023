"""Configuration loaded from CROSSWORDS_* environment variables or .env"""
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CROSSWORDS_", env_file=".env", extra="ignore")

    # Dataset
    data_path: str = "WordNet/wordnet.json"

    # HTTP
    api_url: str = "http://localhost:8000/api"
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Redis result cache, disabled when unset
    redis_url: Optional[str] = None
    cache_ttl: int = 3600

    # Synset visits allowed per search, 0 = unlimited
    max_visits: int = 250_000

    # Logging
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()
