# -*- coding: utf-8 -*-
"""Configuration loaded from environment via Pydantic Settings.

Nested env vars use <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, FCM__PROJECT_ID.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal, Optional

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """General application configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    app_name: str = "marketplace-push"
    service_name: Optional[str] = None
    service_version: Optional[str] = None
    environment: Literal["development", "test", "production"] = "development"
    event_history_size: int = Field(
        default=100,
        ge=0,
        description="Number of dispatched events the event bus keeps in memory.",
    )


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
RotateWhen = Literal["S", "M", "H", "D", "W0", "W1", "W2", "W3", "W4", "W5", "W6", "midnight"]


class LoggingSettings(BaseSettings):
    """Where push logs go and how they are rendered (from env LOGGING__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    console_level: LogLevel = "INFO"
    file_level: LogLevel = "INFO"
    logfire_level: LogLevel = "INFO"

    log_to_console: bool = True
    log_to_file: bool = False
    log_file_path: str = "logs/marketplace_push.log"
    log_file_when: RotateWhen = Field(
        default="midnight",
        description="TimedRotatingFileHandler rotation unit.",
    )
    log_file_interval: int = Field(default=1, ge=1)
    log_file_backup_count: int = Field(default=30, ge=0, description="Rotated files kept.")
    log_file_utc: bool = True

    json_format: bool = Field(
        default=False,
        description="JSON lines on the console instead of the colored dev renderer.",
    )

    logfire_enabled: bool = False
    logfire_token: Optional[str] = None


class FcmSettings(BaseSettings):
    """Firebase Cloud Messaging HTTP v1 gateway (from env FCM__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    enabled: bool = False
    project_id: Optional[str] = Field(default=None, description="Firebase project id.")
    access_token: Optional[str] = Field(
        default=None,
        description="OAuth2 bearer token with the firebase.messaging scope.",
    )
    base_url: str = Field(
        default="https://fcm.googleapis.com",
        description="FCM API base URL.",
    )
    timeout_seconds: float = Field(
        default=10.0,
        ge=1.0,
        le=120.0,
        description="HTTP request timeout in seconds for a single send.",
    )


class PushSettings(BaseSettings):
    """Platform delivery profile applied to every outgoing push (from env PUSH__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    android_channel_id: str = "high_importance_channel"
    sound: str = "default"
    click_action: str = "FLUTTER_NOTIFICATION_CLICK"
    apns_priority: int = Field(default=10, ge=1, le=10)
    token_slot: str = Field(
        default="fcm",
        description="Name of the per-user token slot holding the delivery target.",
    )


class RendererSettings(BaseSettings):
    """Client background renderer assets and fallbacks (from env RENDERER__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    icon: str = "/icons/Icon-192.png"
    badge: str = "/icons/Icon-192.png"
    default_tag: str = "notification-1"
    # Raw string so pydantic-settings does not try to JSON-decode it.
    vibrate_raw: str = Field(
        default="200,100,200",
        description="Vibration pattern in milliseconds, comma-separated. Env: RENDERER__VIBRATE.",
        validation_alias="vibrate",
    )
    fallback_title: str = "New Message"
    fallback_body: str = "You have a new message"
    cache_cleanup_tag: str = "cleanup-cache"

    @computed_field
    @property
    def vibrate(self) -> list[int]:
        """Parse comma-separated vibrate_raw into a list of durations."""
        if not self.vibrate_raw or not self.vibrate_raw.strip():
            return []
        return [int(s.strip()) for s in self.vibrate_raw.split(",") if s.strip()]


class Settings(BaseSettings):
    """Process-wide configuration: app identity, logging, FCM transport, push profile, renderer.

    Components receive a Settings (or one of its sections) instead of reading the
    environment. Env overrides use <section>__<key>, e.g. FCM__PROJECT_ID,
    PUSH__ANDROID_CHANNEL_ID, RENDERER__VIBRATE.
    """

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    app: AppSettings = Field(default_factory=AppSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    fcm: FcmSettings = Field(default_factory=FcmSettings)
    push: PushSettings = Field(default_factory=PushSettings)
    renderer: RendererSettings = Field(default_factory=RendererSettings)

    @classmethod
    def from_env(cls, **overrides: Any) -> Settings:
        """Read env (and .env); keyword overrides win, e.g. from_env(fcm={"enabled": True})."""
        return cls(**overrides)


@lru_cache
def get_settings() -> Settings:
    """Cached Settings for code outside the container (entry point, logging setup)."""
    return Settings()
