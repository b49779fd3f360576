# -*- coding: utf-8 -*-
"""Application services."""

from marketplace_push.services.notifications import (
    NotificationEventHandlers,
    RecipientResolver,
)

__all__ = [
    "NotificationEventHandlers",
    "RecipientResolver",
]
