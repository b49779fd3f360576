"""Configuration subpackage."""

from marketplace_push.config.config import (
    AppSettings,
    FcmSettings,
    LoggingSettings,
    PushSettings,
    RendererSettings,
    Settings,
    get_settings,
)

__all__ = [
    "AppSettings",
    "FcmSettings",
    "LoggingSettings",
    "PushSettings",
    "RendererSettings",
    "Settings",
    "get_settings",
]
