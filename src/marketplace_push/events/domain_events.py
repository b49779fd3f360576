# -*- coding: utf-8 -*-
"""Domain events published by the document trigger router (bubus BaseEvent).

One class per event kind. Built once from a store change, handled by
NotificationEventHandlers, never persisted.
"""

from __future__ import annotations

from typing import Any, Optional

from bubus import BaseEvent  # type: ignore[import-untyped]


class MessageCreatedEvent(BaseEvent[None]):
    """A message was added to conversations/{conversation_id}/messages."""

    conversation_id: str
    sender_id: str
    content: str
    message_id: Optional[str] = None


class OrderCreatedEvent(BaseEvent[None]):
    """A new document was created under orders/{order_id}."""

    order_id: str
    buyer_id: str
    seller_id: str


class OrderStatusChangedEvent(BaseEvent[None]):
    """An orders/{order_id} document was updated.

    Emitted for every update; previous_status == new_status means some other
    field changed and the handler ignores it.
    """

    order_id: str
    buyer_id: str
    seller_id: str
    # Raw document values; non-string statuses are kept so changes between them still count.
    previous_status: Any = None
    new_status: Any = None

    @property
    def status_changed(self) -> bool:
        """True when the update moved the order to a different status."""
        return self.previous_status != self.new_status


DomainEvent = MessageCreatedEvent | OrderCreatedEvent | OrderStatusChangedEvent
