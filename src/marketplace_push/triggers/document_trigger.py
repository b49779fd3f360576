# -*- coding: utf-8 -*-
"""Document-store change adapter: validate raw changes into domain events and publish them.

Watched documents:
    conversations/{conversationId}/messages/{messageId}  (created)
    orders/{orderId}                                     (created, updated)
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Literal, Optional

import structlog
from pydantic import BaseModel, ConfigDict, ValidationError

from marketplace_push.events.domain_events import (
    DomainEvent,
    MessageCreatedEvent,
    OrderCreatedEvent,
    OrderStatusChangedEvent,
)
from marketplace_push.exceptions import EventValidationError

MESSAGE_PATH = "conversations/{conversationId}/messages/{messageId}"
ORDER_PATH = "orders/{orderId}"


class DocumentChange(BaseModel):
    """One change delivered by the store's trigger infrastructure."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    event_kind: Literal["created", "updated"]
    path: str
    before: Optional[dict[str, Any]] = None
    after: Optional[dict[str, Any]] = None


def match_path(template: str, path: str) -> dict[str, str] | None:
    """Match a document path against a template; return the captured ids or None.

    >>> match_path("orders/{orderId}", "orders/o-1")
    {'orderId': 'o-1'}
    """
    template_parts = template.strip("/").split("/")
    path_parts = path.strip("/").split("/")
    if len(template_parts) != len(path_parts):
        return None
    params: dict[str, str] = {}
    for expected, actual in zip(template_parts, path_parts):
        if expected.startswith("{") and expected.endswith("}"):
            if not actual:
                return None
            params[expected[1:-1]] = actual
        elif expected != actual:
            return None
    return params


def _require_snapshot(change: DocumentChange, which: Literal["before", "after"]) -> dict[str, Any]:
    snapshot = getattr(change, which)
    if snapshot is None:
        raise EventValidationError(
            f"Missing {which} snapshot",
            field=which,
            path=change.path,
        )
    return snapshot


def _require_str(doc: Mapping[str, Any], field: str, path: str, *, allow_empty: bool = False) -> str:
    value = doc.get(field)
    if not isinstance(value, str) or (not allow_empty and not value.strip()):
        raise EventValidationError(
            f"Missing or invalid field {field!r}",
            field=field,
            path=path,
        )
    return value


class DocumentTriggerRouter:
    """Translate DocumentChange into the matching domain event and dispatch it on the bus."""

    def __init__(
        self,
        event_bus: Any,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        self._event_bus = event_bus
        self._logger = get_logger(logger_name or self.__class__.__name__)
        self._routes: list[
            tuple[str, str, Callable[[DocumentChange, dict[str, str]], DomainEvent]]
        ] = [
            ("created", MESSAGE_PATH, self._message_created),
            ("created", ORDER_PATH, self._order_created),
            ("updated", ORDER_PATH, self._order_updated),
        ]

    def to_event(self, change: DocumentChange) -> DomainEvent | None:
        """Return the domain event for change, or None if the path/kind is not watched.

        Raises:
            EventValidationError: A required field or snapshot is missing.
        """
        for kind, template, build in self._routes:
            if kind != change.event_kind:
                continue
            params = match_path(template, change.path)
            if params is not None:
                return build(change, params)
        return None

    def route(self, change: DocumentChange) -> DomainEvent | None:
        """Build the event for change and dispatch it. Returns the dispatched event."""
        event = self.to_event(change)
        if event is None:
            self._logger.debug(
                "document_change_ignored",
                document_path=change.path,
                event_kind=change.event_kind,
            )
            return None
        self._event_bus.dispatch(event)
        return event

    def handle(self, change: DocumentChange) -> DomainEvent | None:
        """route(), logging and dropping changes that fail validation."""
        try:
            return self.route(change)
        except EventValidationError as exc:
            self._logger.warning(
                "document_change_invalid",
                document_path=exc.path,
                missing_field=exc.field,
                error_message=str(exc),
            )
            return None

    def handle_raw(self, raw: str | bytes) -> DomainEvent | None:
        """Parse a JSON-encoded DocumentChange and handle it."""
        try:
            change = DocumentChange.model_validate_json(raw)
        except ValidationError as exc:
            self._logger.warning(
                "document_change_unparseable",
                error_count=exc.error_count(),
                error_message=str(exc),
            )
            return None
        return self.handle(change)

    def _message_created(self, change: DocumentChange, params: dict[str, str]) -> DomainEvent:
        message = _require_snapshot(change, "after")
        return MessageCreatedEvent(
            conversation_id=params["conversationId"],
            message_id=params["messageId"],
            sender_id=_require_str(message, "senderId", change.path),
            content=_require_str(message, "content", change.path, allow_empty=True),
        )

    def _order_created(self, change: DocumentChange, params: dict[str, str]) -> DomainEvent:
        order = _require_snapshot(change, "after")
        return OrderCreatedEvent(
            order_id=params["orderId"],
            buyer_id=_require_str(order, "buyerId", change.path),
            seller_id=_require_str(order, "sellerId", change.path),
        )

    def _order_updated(self, change: DocumentChange, params: dict[str, str]) -> DomainEvent:
        previous = _require_snapshot(change, "before")
        current = _require_snapshot(change, "after")
        return OrderStatusChangedEvent(
            order_id=params["orderId"],
            buyer_id=_require_str(current, "buyerId", change.path),
            seller_id=_require_str(current, "sellerId", change.path),
            previous_status=previous.get("status"),
            new_status=current.get("status"),
        )
