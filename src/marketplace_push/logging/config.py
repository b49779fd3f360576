# -*- coding: utf-8 -*-
"""Logging configuration for structlog + Logfire.

Every push-related log line goes through the same chain: level filter, bound
context (conversation / order / user ids), service context, token masking, then
the JSON or console renderer. Logfire receives the same events when enabled.
"""

from __future__ import annotations

import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional

import logfire
import structlog
from structlog.types import EventDict, Processor

from marketplace_push.config import get_settings
from marketplace_push.utils.validation import mask_token

if TYPE_CHECKING:
    from marketplace_push.config.config import AppSettings, LoggingSettings, Settings

LOG_LEVEL_TO_LOGFIRE: dict[str, str] = {
    "DEBUG": "debug",
    "INFO": "info",
    "WARNING": "warn",
    "ERROR": "error",
    "CRITICAL": "fatal",
}

# Event keys that may carry a raw delivery token.
TOKEN_KEYS: tuple[str, ...] = ("token", "push_token", "registration_token", "fcm_token")


def service_context(app_settings: "AppSettings") -> Processor:
    """Return a processor attaching logger name, app and service identity to every event."""

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


def redact_tokens(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Mask delivery tokens passed as log fields (only the first and last 4 chars survive)."""
    for key in TOKEN_KEYS:
        if key in event_dict:
            event_dict[key] = mask_token(event_dict[key])
    return event_dict


def _stdlib_handlers(logging_settings: "LoggingSettings") -> list[logging.Handler]:
    handlers: list[logging.Handler] = []

    if logging_settings.log_to_console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, logging_settings.console_level, logging.INFO))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
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
        file_handler.setLevel(getattr(logging, logging_settings.file_level, logging.INFO))
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        handlers.append(file_handler)

    return handlers


def build_processors(settings: "Settings") -> list[Processor]:
    """Processor chain for the given settings, renderer last."""
    logging_settings = settings.logging
    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        service_context(settings.app),
        redact_tokens,
    ]

    if logging_settings.logfire_enabled:
        processors.append(logfire.StructlogProcessor())  # type: ignore[arg-type]

    # File output is always JSON; console follows json_format unless a file is also written.
    if logging_settings.log_to_console or logging_settings.log_to_file:
        use_json = logging_settings.log_to_file or logging_settings.json_format
        renderer: Any = (
            structlog.processors.JSONRenderer()
            if use_json
            else structlog.dev.ConsoleRenderer()
        )
        processors.append(renderer)

    return processors


def configure_logging(settings: Optional["Settings"] = None) -> None:
    """Configure stdlib handlers, Logfire and structlog from settings (default: get_settings())."""
    settings = settings or get_settings()
    app_settings = settings.app
    logging_settings = settings.logging

    handlers = _stdlib_handlers(logging_settings)
    if handlers:
        logging.basicConfig(level=min(h.level for h in handlers), handlers=handlers)

    if logging_settings.logfire_enabled:
        logfire.configure(
            token=logging_settings.logfire_token,
            service_name=app_settings.service_name or app_settings.app_name,
            service_version=app_settings.service_version,
            min_level=LOG_LEVEL_TO_LOGFIRE.get(logging_settings.logfire_level, "info"),  # type: ignore[arg-type]
            environment=app_settings.environment,
        )

    structlog.configure(
        processors=build_processors(settings),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
