"""
Centralized configuration for the Linkora backend.

All settings are loaded from environment variables with sensible defaults.
Module-specific settings should be namespaced (e.g., STORAGE_*, SUPABASE_*).
"""

from functools import lru_cache
from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Linkora API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Origin used to build public share URLs (e.g. https://linkora.app).
    # Empty means no origin is known and share URLs degrade to "".
    public_origin: str = ""

    # Snapshot persistence
    storage_backend: Literal["file", "memory"] = "file"
    storage_dir: str = ".linkora"
    storage_key: str = "linkora-profile"

    # Where the public viewer reads published profiles from
    profile_source: Literal["snapshot", "supabase"] = "snapshot"

    # Reject link/profile/theme operations beyond the user's plan limits
    enforce_plan_limits: bool = False

    # Supabase
    supabase_url: str = ""
    supabase_anon_key: str = ""
    supabase_service_role_key: str = ""


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
