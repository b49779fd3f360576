"""Application event bus (bubus) carrying domain events from the trigger router to the handlers."""

from __future__ import annotations

import re

from bubus import EventBus  # type: ignore[import-untyped]

from marketplace_push.config import get_settings

_event_bus: EventBus | None = None


def bus_name(app_name: str) -> str:
    """EventBus names must be identifiers: "marketplace-push" -> "MarketplacePush"."""
    name = "".join(part.capitalize() for part in re.split(r"[^0-9A-Za-z]+", app_name) if part)
    return name if name.isidentifier() else "MarketplacePush"


def get_event_bus() -> EventBus:
    """Return the application event bus singleton. Created on first call from settings."""
    global _event_bus
    if _event_bus is None:
        app = get_settings().app
        _event_bus = EventBus(
            name=bus_name(app.app_name),
            max_history_size=app.event_history_size,
            wal_path=None,
        )
    return _event_bus


def set_event_bus(bus: EventBus | None) -> None:
    """Replace the bus (tests, DI). None drops it so the next get_event_bus() builds a fresh one."""
    global _event_bus
    _event_bus = bus
