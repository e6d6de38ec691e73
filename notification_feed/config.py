"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from notification_feed.domain.entities.notification import DEFAULT_INCOME_SOURCE_TYPES

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING)

    app_timezone: str = Field(
        default="UTC",
        description="IANA timezone name or UTC offset used to compute notification days",
    )
    notification_income_source_types: list[str] = Field(
        default_factory=lambda: sorted(DEFAULT_INCOME_SOURCE_TYPES),
        description="Source types grouped together as income notifications",
    )
    cors_allowed_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to call the API from a browser",
    )

    @model_validator(mode="after")
    def _normalize_income_source_types(self) -> "Settings":
        normalized: list[str] = []
        for source_type in self.notification_income_source_types:
            value = source_type.strip()
            if not value:
                raise ValueError(
                    "NOTIFICATION_INCOME_SOURCE_TYPES must not contain empty entries"
                )
            if value not in normalized:
                normalized.append(value)
        self.notification_income_source_types = normalized
        return self

    def income_source_types(self) -> frozenset[str]:
        """Return the configured income classification set."""

        return frozenset(self.notification_income_source_types)


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
