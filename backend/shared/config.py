"""
Centralized configuration for the Spark backend.

All settings are loaded from environment variables with sensible defaults.
Variables are prefixed with SPARK_ (e.g., SPARK_SUPABASE_URL).
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SPARK_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Spark API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Supabase
    supabase_url: str = ""
    supabase_anon_key: str = ""
    supabase_service_role_key: str = ""
    supabase_jwt_secret: str = ""

    # Cookie holding the caller's access token when no bearer header is sent
    session_cookie_name: str = "sb-access-token"

    # Members
    approve_clears_request: bool = False

    # Assistant
    assistant_token_interval: float = 0.35  # seconds between simulated tokens


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
