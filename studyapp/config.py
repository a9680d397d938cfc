"""
Deployment configuration using Pydantic Settings.

Values come from environment variables (or a local ``.env`` file) and are
validated once when Django loads ``studyapp.settings``.
"""

from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven settings for the study app service."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Django
    django_secret_key: str = "dev-insecure-secret-key"
    django_debug: bool = False
    django_allowed_hosts: str = "localhost,127.0.0.1,testserver"
    django_db_path: Optional[str] = None

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    # Offset used when logging timestamps for humans alongside UTC
    display_tz_offset_hours: float = Field(default=9, ge=-12, le=14)

    @property
    def allowed_hosts(self) -> List[str]:
        return [h.strip() for h in self.django_allowed_hosts.split(",") if h.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
