"""NotificationRecord: durable in-app notification entry written after a delivered push."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from uuid import UUID, uuid4


class NotificationType(str, Enum):
    """In-app notification category shown by the client."""

    MESSAGE = "message"
    ORDER_UPDATE = "orderUpdate"


@dataclass(frozen=True, slots=True)
class NotificationRecord:
    """One in-app notification for one user.

    Identity: id (UUID). context_id is the conversation id for MESSAGE records
    and the order id for ORDER_UPDATE records. created_at is left empty until the
    record store assigns it on insert.
    """

    id: UUID
    user_id: str
    title: str
    message: str
    type: NotificationType
    context_id: str
    is_read: bool = False
    created_at: datetime | None = None

    def with_created_at(self, created_at: datetime) -> NotificationRecord:
        """Return a copy stamped with the store-assigned timestamp."""
        return replace(self, created_at=created_at)

    @classmethod
    def create(
        cls,
        user_id: str,
        title: str,
        message: str,
        type: NotificationType,
        context_id: str,
        *,
        id: UUID | None = None,
    ) -> NotificationRecord:
        """Create an unread record awaiting its store timestamp."""
        if not user_id.strip():
            raise ValueError("user_id must be non-empty")
        return cls(
            id=id or uuid4(),
            user_id=user_id,
            title=title,
            message=message,
            type=type,
            context_id=context_id,
        )
