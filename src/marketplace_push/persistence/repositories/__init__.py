# -*- coding: utf-8 -*-
"""Repositories: interfaces (abstractions) and implementations (in_memory, etc.)."""

from marketplace_push.persistence.repositories.interfaces import (
    IConversationRepository,
    IDeliveryTargetRepository,
    INotificationRecordRepository,
    IUserRepository,
)
from marketplace_push.persistence.repositories.in_memory import (
    InMemoryConversationRepository,
    InMemoryDeliveryTargetRepository,
    InMemoryNotificationRecordRepository,
    InMemoryUserRepository,
)

__all__ = [
    "IConversationRepository",
    "IDeliveryTargetRepository",
    "INotificationRecordRepository",
    "IUserRepository",
    "InMemoryConversationRepository",
    "InMemoryDeliveryTargetRepository",
    "InMemoryNotificationRecordRepository",
    "InMemoryUserRepository",
]
