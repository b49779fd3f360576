"""Persistence layer (repositories, etc.)."""

from marketplace_push.persistence.repositories import (
    IConversationRepository,
    IDeliveryTargetRepository,
    INotificationRecordRepository,
    IUserRepository,
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
