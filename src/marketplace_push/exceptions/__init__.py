"""Exceptions subpackage."""

from marketplace_push.exceptions.exceptions import (
    INVALID_TARGET_REASONS,
    EventValidationError,
    MissingRequiredConfigError,
    PushGatewayError,
    PushNotificationError,
    RenderError,
)

__all__ = [
    "INVALID_TARGET_REASONS",
    "EventValidationError",
    "MissingRequiredConfigError",
    "PushGatewayError",
    "PushNotificationError",
    "RenderError",
]
