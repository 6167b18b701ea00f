from functools import lru_cache

from pydantic_settings import BaseSettings

_ENV_FILES = (".env",)

DEFAULT_BASE_URL = "https://api.marcsync.dev"


class Settings(BaseSettings):
    """Client settings loaded from MARCSYNC_* environment variables."""

    access_token: str = ""
    base_url: str = DEFAULT_BASE_URL

    # Transport
    timeout: float = 30.0                    # Seconds, per request
    connect_retries: int = 0                 # httpx connection-level retries only

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # marcsync.* loggers
    log_level_http: str = "WARNING"          # httpx / httpcore — outbound HTTP

    model_config = {
        "env_prefix": "MARCSYNC_",
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
