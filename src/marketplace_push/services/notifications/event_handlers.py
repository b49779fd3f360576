# -*- coding: utf-8 -*-
"""NotificationEventHandlers: subscribe to domain events and notify the affected users."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Optional

import structlog
from structlog.contextvars import bound_contextvars

from marketplace_push.events.domain_events import (
    DomainEvent,
    MessageCreatedEvent,
    OrderCreatedEvent,
    OrderStatusChangedEvent,
)
from marketplace_push.models.delivery import DeliveryOutcome, RecipientRole
from marketplace_push.models.notification_record import NotificationRecord, NotificationType
from marketplace_push.notifications.status_messages import notifies_seller
from marketplace_push.utils.boundary import best_effort, failure_boundary

if TYPE_CHECKING:
    from bubus import EventBus  # type: ignore[import-untyped]

    from marketplace_push.notifications.dispatcher import NotificationDispatcher
    from marketplace_push.notifications.payload_builder import PushPayloadBuilder
    from marketplace_push.persistence.repositories.interfaces import IConversationRepository
    from marketplace_push.services.notifications.recipient_resolver import RecipientResolver


class NotificationEventHandlers:
    """Entry points for new messages, new orders and order updates.

    Each handler runs inside a failure boundary: whatever goes wrong is logged and
    the triggering event is never retried. Lookups and the send are awaited in
    order (recipient, token, names, send).
    """

    def __init__(
        self,
        recipient_resolver: "RecipientResolver",
        dispatcher: "NotificationDispatcher",
        conversation_repository: "IConversationRepository",
        payload_builder: "PushPayloadBuilder",
        event_bus: Any,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        self._recipients = recipient_resolver
        self._dispatcher = dispatcher
        self._conversations = conversation_repository
        self._builder = payload_builder
        self._event_bus: "EventBus" = event_bus
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def _subscriptions(self) -> list[tuple[type[Any], Callable[..., Any]]]:
        return [
            (MessageCreatedEvent, self.on_new_message),
            (OrderCreatedEvent, self.on_new_order),
            (OrderStatusChangedEvent, self.on_order_update),
        ]

    def start(self) -> None:
        """Subscribe the three handlers on the event bus."""
        for event_type, handler in self._subscriptions():
            self._event_bus.on(event_type, handler)
        self._logger.debug("notification_handlers_started")

    def stop(self) -> None:
        """Remove the three handlers from the event bus."""
        handlers = getattr(self._event_bus, "handlers", {})
        for event_type, handler in self._subscriptions():
            key = event_type.__name__
            if key in handlers:
                handlers[key] = [h for h in handlers[key] if h != handler]
        self._logger.debug("notification_handlers_stopped")

    @failure_boundary("on_new_message_failed")
    async def on_new_message(self, event: MessageCreatedEvent) -> None:
        """Notify the participant of the conversation who did not send the message."""
        with bound_contextvars(
            conversation_id=event.conversation_id,
            message_id=event.message_id,
        ):
            self._logger.info("new_message_processing")
            conversation = await self._conversations.get(event.conversation_id)
            if conversation is None:
                self._logger.info("conversation_not_found")
                return

            recipient_id = conversation.other_participant(event.sender_id)
            if recipient_id is None:
                self._logger.error("message_recipient_not_found")
                return

            await self._notify(
                event,
                user_id=recipient_id,
                role=RecipientRole.PARTICIPANT,
                counterpart_id=event.sender_id,
                record_type=NotificationType.MESSAGE,
                context_id=event.conversation_id,
            )

    @failure_boundary("on_new_order_failed")
    async def on_new_order(self, event: OrderCreatedEvent) -> None:
        """Notify the seller and the buyer; the two attempts are independent."""
        with bound_contextvars(order_id=event.order_id):
            self._logger.info("new_order_processing")
            await best_effort(
                self._notify(
                    event,
                    user_id=event.seller_id,
                    role=RecipientRole.SELLER,
                    counterpart_id=event.buyer_id,
                    record_type=NotificationType.ORDER_UPDATE,
                    context_id=event.order_id,
                ),
                logger=self._logger,
                event="new_order_seller_notify_failed",
            )
            await best_effort(
                self._notify(
                    event,
                    user_id=event.buyer_id,
                    role=RecipientRole.BUYER,
                    record_type=NotificationType.ORDER_UPDATE,
                    context_id=event.order_id,
                ),
                logger=self._logger,
                event="new_order_buyer_notify_failed",
            )

    @failure_boundary("on_order_update_failed")
    async def on_order_update(self, event: OrderStatusChangedEvent) -> None:
        """Notify the buyer of a status change, and the seller for delivered / refund_requested."""
        if not event.status_changed:
            return

        with bound_contextvars(order_id=event.order_id):
            self._logger.info(
                "order_status_update_processing",
                old_status=event.previous_status,
                new_status=event.new_status,
            )
            await best_effort(
                self._notify(
                    event,
                    user_id=event.buyer_id,
                    role=RecipientRole.BUYER,
                    record_type=NotificationType.ORDER_UPDATE,
                    context_id=event.order_id,
                ),
                logger=self._logger,
                event="order_update_buyer_notify_failed",
            )
            if not notifies_seller(event.new_status):
                return
            await best_effort(
                self._notify(
                    event,
                    user_id=event.seller_id,
                    role=RecipientRole.SELLER,
                    counterpart_id=event.buyer_id,
                    record_type=NotificationType.ORDER_UPDATE,
                    context_id=event.order_id,
                ),
                logger=self._logger,
                event="order_update_seller_notify_failed",
            )

    async def _notify(
        self,
        event: DomainEvent,
        *,
        user_id: str,
        role: RecipientRole,
        record_type: NotificationType,
        context_id: str,
        counterpart_id: Optional[str] = None,
    ) -> Optional[DeliveryOutcome]:
        """Resolve, build, dispatch and record for one recipient. None when nothing was sent."""
        recipient = await self._recipients.resolve(user_id)
        if recipient is None:
            return None

        counterpart_name = None
        if counterpart_id:
            counterpart_name = await self._recipients.display_name(counterpart_id)

        payload = self._builder.build(event, role, counterpart_name)
        if payload is None:
            return None

        record = NotificationRecord.create(
            user_id=user_id,
            title=payload.title,
            message=payload.body,
            type=record_type,
            context_id=context_id,
        )
        return await self._dispatcher.notify_and_record(recipient, payload, record)
