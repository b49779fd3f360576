"""Marketplace push: notify users of new messages and order changes."""

from marketplace_push.config import get_settings
from marketplace_push.DI import Container
from marketplace_push.notifications import NotificationDispatcher, PushPayloadBuilder
from marketplace_push.renderer import BackgroundRenderer
from marketplace_push.services import NotificationEventHandlers

__version__ = "0.1.0"
__all__ = [
    "BackgroundRenderer",
    "Container",
    "NotificationDispatcher",
    "NotificationEventHandlers",
    "PushPayloadBuilder",
    "get_settings",
]
