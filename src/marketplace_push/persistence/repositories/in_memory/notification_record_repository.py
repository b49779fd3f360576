"""In-memory notification record repository (append-only list)."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

from marketplace_push.models.notification_record import NotificationRecord
from marketplace_push.persistence.repositories.interfaces.notification_record_repository import (
    INotificationRecordRepository,
)


def _utc_now() -> datetime:
    return datetime.now(UTC)


class InMemoryNotificationRecordRepository(INotificationRecordRepository):
    """In-memory implementation of INotificationRecordRepository.

    The injected clock stands in for the store's server-side timestamp.
    """

    def __init__(self, *, clock: Callable[[], datetime] = _utc_now) -> None:
        """Initialize an empty in-memory store.

        Args:
            clock: Source of created_at values (defaults to UTC now).
        """
        self._clock = clock
        self._records: list[NotificationRecord] = []

    async def add(self, record: NotificationRecord) -> NotificationRecord:
        """Append the record stamped with created_at and return it."""
        stored = record.with_created_at(self._clock())
        self._records.append(stored)
        return stored

    async def list_for_user(self, user_id: str) -> list[NotificationRecord]:
        """Return the user's records in insertion (created_at) order."""
        return [r for r in self._records if r.user_id == user_id]

    def __len__(self) -> int:
        return len(self._records)
