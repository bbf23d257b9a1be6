"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"

DEFAULT_APP_URL = "https://extrahostelero.com"
DEFAULT_VAPID_SUBJECT = "mailto:contact@extrahostelero.com"
DEFAULT_PUSH_TTL_SECONDS = 86400


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding=ENV_FILE_ENCODING,
        extra="ignore",
        frozen=True,
    )

    database_url: str = Field(
        description="Database connection URL used by SQLAlchemy to reach the subscription store",
        min_length=1,
    )
    app_url: str = Field(
        default=DEFAULT_APP_URL,
        description="Base URL of the client application used to build deep links",
        min_length=1,
    )
    app_timezone: str | None = Field(
        default=None,
        description="IANA timezone (or UTC offset) used for persisted timestamps",
    )
    vapid_public_key: str | None = Field(
        default=None,
        description="Public VAPID key shared with browsers when they subscribe",
    )
    vapid_private_key: str | None = Field(
        default=None,
        description="Private VAPID key used to sign Web Push requests",
    )
    vapid_subject: str = Field(
        default=DEFAULT_VAPID_SUBJECT,
        description="Contact URI sent as the ``sub`` VAPID claim",
    )
    push_ttl_seconds: int = Field(
        default=DEFAULT_PUSH_TTL_SECONDS,
        description="Seconds the push service keeps an undelivered message",
        gt=0,
    )
    push_timeout_seconds: float = Field(
        default=10.0,
        description="Timeout applied to each request sent to a push service",
        gt=0,
    )
    notification_icon: str = Field(default="/favicon.svg")
    notification_badge: str = Field(default="/favicon.svg")

    @model_validator(mode="after")
    def _validate_vapid_settings(self) -> "Settings":
        if bool(self.vapid_public_key) ^ bool(self.vapid_private_key):
            raise ValueError(
                "VAPID_PUBLIC_KEY and VAPID_PRIVATE_KEY must both be provided to enable push delivery"
            )
        if not self.vapid_subject.startswith(("mailto:", "https:")):
            raise ValueError("VAPID_SUBJECT must be a mailto: or https: URI")
        return self

    @property
    def push_enabled(self) -> bool:
        """Return ``True`` when VAPID credentials are configured."""

        return bool(self.vapid_private_key)


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
