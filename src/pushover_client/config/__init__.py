"""Configuration subpackage."""

from pushover_client.config.config import (
    ApiSettings,
    AppSettings,
    LoggingSettings,
    PushoverSettings,
    Settings,
    get_settings,
)

__all__ = [
    "ApiSettings",
    "AppSettings",
    "LoggingSettings",
    "PushoverSettings",
    "Settings",
    "get_settings",
]
