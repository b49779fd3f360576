"""Custom exceptions for push delivery, event validation and rendering."""

from __future__ import annotations

# Gateway reason codes that mean the delivery target can never be used again.
INVALID_TARGET_REASONS: frozenset[str] = frozenset(
    {
        "invalid-registration-token",
        "registration-token-not-registered",
    }
)


class PushNotificationError(Exception):
    """Base exception for marketplace push errors."""

    pass


class MissingRequiredConfigError(PushNotificationError):
    """Raised when a required configuration value is missing."""

    pass


class EventValidationError(PushNotificationError):
    """Raised when a store document lacks a field the event requires.

    Treated like a missing document: the change is logged and dropped.
    """

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        path: str | None = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.path = path


class PushGatewayError(PushNotificationError):
    """Raised when the push gateway rejects or fails to deliver a message."""

    def __init__(
        self,
        message: str,
        *,
        reason: str = "unknown-error",
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.reason = reason
        self.status_code = status_code
        self.cause = cause

    @property
    def is_invalid_target(self) -> bool:
        """True when the reason says the token is permanently unusable."""
        return self.reason in INVALID_TARGET_REASONS


class RenderError(PushNotificationError):
    """Raised when a delivered push payload cannot be rendered as received."""

    pass
