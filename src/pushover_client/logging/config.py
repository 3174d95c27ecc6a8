# -*- coding: utf-8 -*-
"""Logging configuration for structlog + Logfire.

Call configure_logging() once at process start. Library code only asks
structlog.get_logger() for a logger; it never configures handlers itself.
"""

from __future__ import annotations

import logging
import logfire
import structlog
from typing import Any, Optional
from structlog.types import EventDict, Processor
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from pushover_client.config import Settings, get_settings
from pushover_client.config.config import LoggingSettings
from pushover_client.utils.validation import mask_token

# Map standard logging levels to Logfire levels
LOG_LEVEL_TO_LOGFIRE: dict[str, str] = {
    "DEBUG": "debug",
    "INFO": "info",
    "WARNING": "warn",
    "ERROR": "error",
    "CRITICAL": "fatal",
}

# Event keys that may carry an application token or recipient key
CREDENTIAL_KEYS: frozenset[str] = frozenset(
    {"token", "user", "app_token", "user_key", "pushover_token", "pushover_user"}
)


def redact_credentials(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Mask credential values so full tokens never reach a log sink."""
    for key in CREDENTIAL_KEYS.intersection(event_dict):
        value = event_dict[key]
        event_dict[key] = mask_token(value if isinstance(value, str) else None)
    return event_dict


def service_context_processor(settings: Settings) -> Processor:
    """Return a processor that stamps logger name and app identity on every event."""
    app_settings = settings.app

    def _add_service_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        stdlib_logger = getattr(logger, "_logger", None)
        event_dict["logger"] = (
            getattr(stdlib_logger, "name", None) or getattr(logger, "name", "") or ""
        )
        event_dict["app_name"] = app_settings.app_name
        if app_settings.service_name:
            event_dict["service_name"] = app_settings.service_name
        if app_settings.service_version:
            event_dict["service_version"] = app_settings.service_version
        event_dict["environment"] = app_settings.environment
        return event_dict

    return _add_service_context


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


def _build_handlers(logging_settings: LoggingSettings) -> list[logging.Handler]:
    handlers: list[logging.Handler] = []

    if logging_settings.log_to_console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(_level(logging_settings.console_level))
        handlers.append(console_handler)

    if logging_settings.log_to_file:
        log_file_path = Path(logging_settings.log_file_path)
        log_file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            log_file_path,
            when=logging_settings.log_file_when,
            interval=logging_settings.log_file_interval,
            backupCount=logging_settings.log_file_backup_count,
            encoding="utf-8",
            utc=logging_settings.log_file_utc,
        )
        file_handler.setLevel(_level(logging_settings.file_level))
        handlers.append(file_handler)

    for handler in handlers:
        handler.setFormatter(logging.Formatter("%(message)s"))
    return handlers


def _configure_logfire(settings: Settings) -> None:
    app_settings = settings.app
    logging_settings = settings.logging
    logfire.configure(
        token=logging_settings.logfire_token,
        service_name=app_settings.service_name or app_settings.app_name,
        service_version=app_settings.service_version,
        min_level=LOG_LEVEL_TO_LOGFIRE.get(logging_settings.logfire_level, "info"),  # type: ignore[arg-type]
        environment=app_settings.environment,
    )


def build_processors(settings: Settings) -> list[Processor]:
    """Build the structlog processor chain for the given settings.

    File output is always JSON. Console output is JSON only when json_format
    is set and no file sink is enabled alongside it.
    """
    logging_settings = settings.logging
    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        service_context_processor(settings),
        redact_credentials,
    ]

    if logging_settings.logfire_enabled:
        processors.append(logfire.StructlogProcessor())  # type: ignore[arg-type]

    if logging_settings.log_to_console or logging_settings.log_to_file:
        use_json = logging_settings.log_to_file or logging_settings.json_format
        renderer: Any = (
            structlog.processors.JSONRenderer()
            if use_json
            else structlog.dev.ConsoleRenderer()
        )
        processors.append(renderer)

    return processors


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure stdlib handlers, Logfire and structlog (cached settings by default)."""
    settings = settings or get_settings()

    handlers = _build_handlers(settings.logging)
    if handlers:
        logging.basicConfig(
            level=min(handler.level for handler in handlers),
            handlers=handlers,
            force=True,
        )

    if settings.logging.logfire_enabled:
        _configure_logfire(settings)

    structlog.configure(
        processors=build_processors(settings),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
