"""Abstract interface for in-app notification record storage (append-only)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from marketplace_push.models.notification_record import NotificationRecord


class INotificationRecordRepository(ABC):
    """Interface for persisting NotificationRecord. Records are never updated here."""

    @abstractmethod
    async def add(self, record: NotificationRecord) -> NotificationRecord:
        """Append a record, assigning created_at at insert time. Returns the stored record."""
        ...

    @abstractmethod
    async def list_for_user(self, user_id: str) -> list[NotificationRecord]:
        """Return all records for the user, ordered by created_at (oldest first)."""
        ...
