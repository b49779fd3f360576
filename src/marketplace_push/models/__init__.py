# -*- coding: utf-8 -*-
"""Domain models."""

from marketplace_push.models.conversation import Conversation
from marketplace_push.models.delivery import DeliveryOutcome, Recipient, RecipientRole
from marketplace_push.models.notification_payload import NotificationPayload, PlatformHints
from marketplace_push.models.notification_record import NotificationRecord, NotificationType

__all__ = [
    "Conversation",
    "DeliveryOutcome",
    "NotificationPayload",
    "NotificationRecord",
    "NotificationType",
    "PlatformHints",
    "Recipient",
    "RecipientRole",
]
