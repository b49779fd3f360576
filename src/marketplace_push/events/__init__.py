# -*- coding: utf-8 -*-
"""Event bus and domain event types."""

from marketplace_push.events.bus import get_event_bus, set_event_bus
from marketplace_push.events.domain_events import (
    DomainEvent,
    MessageCreatedEvent,
    OrderCreatedEvent,
    OrderStatusChangedEvent,
)

__all__ = [
    "DomainEvent",
    "MessageCreatedEvent",
    "OrderCreatedEvent",
    "OrderStatusChangedEvent",
    "get_event_bus",
    "set_event_bus",
]
