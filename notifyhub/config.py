"""Application configuration settings."""

from __future__ import annotations

from datetime import timedelta
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"

DEFAULT_NOTIFICATION_DRAFT_TIME_MS = 30 * 1000


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        default="sqlite:///./notifyhub.db",
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    notification_draft_time: int = Field(
        default=DEFAULT_NOTIFICATION_DRAFT_TIME_MS,
        description=(
            "Milliseconds during which a new event on the same resource may be "
            "merged into the previous one"
        ),
        ge=0,
    )
    app_timezone: str = Field(
        default="UTC",
        description="IANA timezone name used for timestamps",
    )
    log_level: str = Field(
        default="INFO",
        description="Root logging level applied when the API starts",
    )

    @property
    def notification_draft_window(self) -> timedelta:
        """Return the draft window as a :class:`~datetime.timedelta`."""

        return timedelta(milliseconds=self.notification_draft_time)


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = [
    "DEFAULT_NOTIFICATION_DRAFT_TIME_MS",
    "Settings",
    "get_settings",
    "reset_settings_cache",
]
