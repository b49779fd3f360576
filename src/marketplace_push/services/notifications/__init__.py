"""Notification services: recipient lookup and the domain event handlers."""

from marketplace_push.services.notifications.event_handlers import (
    NotificationEventHandlers,
)
from marketplace_push.services.notifications.recipient_resolver import (
    RecipientResolver,
)

__all__ = ["NotificationEventHandlers", "RecipientResolver"]
