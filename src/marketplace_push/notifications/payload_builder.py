# -*- coding: utf-8 -*-
"""Build push payloads from domain events, and render them as FCM v1 messages."""

from __future__ import annotations

from typing import Any

from marketplace_push.events.domain_events import (
    DomainEvent,
    MessageCreatedEvent,
    OrderCreatedEvent,
    OrderStatusChangedEvent,
)
from marketplace_push.models.delivery import RecipientRole
from marketplace_push.models.notification_payload import NotificationPayload, PlatformHints
from marketplace_push.notifications.status_messages import seller_status_notice, status_phrase

DEFAULT_SENDER_NAME = "Someone"
DEFAULT_BUYER_NAME = "Someone"
DEFAULT_CUSTOMER_NAME = "A customer"


class PushPayloadBuilder:
    """Map (event, recipient role, counterpart name) to a NotificationPayload.

    Pure: no I/O, same input gives the same payload. The counterpart name is the
    other party shown in the text (message sender, or buyer for seller pushes);
    None falls back to a placeholder.
    """

    def __init__(self, hints: PlatformHints | None = None) -> None:
        self._hints = hints or PlatformHints()

    def build(
        self,
        event: DomainEvent,
        role: RecipientRole,
        counterpart_name: str | None = None,
    ) -> NotificationPayload | None:
        """Return the payload for this recipient, or None when the role gets no push.

        Raises:
            TypeError: If event is not a known domain event.
        """
        if isinstance(event, MessageCreatedEvent):
            return self._message_created(event, counterpart_name)
        if isinstance(event, OrderCreatedEvent):
            return self._order_created(event, role, counterpart_name)
        if isinstance(event, OrderStatusChangedEvent):
            return self._order_status_changed(event, role, counterpart_name)
        raise TypeError(f"Unsupported event type: {type(event).__name__}")

    def _message_created(
        self,
        event: MessageCreatedEvent,
        sender_name: str | None,
    ) -> NotificationPayload:
        return self._payload(
            title=f"New message from {sender_name or DEFAULT_SENDER_NAME}",
            body=event.content,
            data={
                "type": "message",
                "conversationId": event.conversation_id,
                "senderId": event.sender_id,
            },
        )

    def _order_created(
        self,
        event: OrderCreatedEvent,
        role: RecipientRole,
        buyer_name: str | None,
    ) -> NotificationPayload | None:
        if role is RecipientRole.SELLER:
            return self._payload(
                title="New Order Received",
                body=f"{buyer_name or DEFAULT_BUYER_NAME} placed a new order",
                data={"type": "order", "orderId": event.order_id, "buyerId": event.buyer_id},
            )
        if role is RecipientRole.BUYER:
            return self._payload(
                title="Order Placed Successfully",
                body=f"Your order #{event.order_id} has been placed",
                data={"type": "order", "orderId": event.order_id},
            )
        return None

    def _order_status_changed(
        self,
        event: OrderStatusChangedEvent,
        role: RecipientRole,
        buyer_name: str | None,
    ) -> NotificationPayload | None:
        if role is RecipientRole.BUYER:
            return self._payload(
                title="Order Status Updated",
                body=f"Order #{event.order_id} {status_phrase(event.new_status)}",
                data={"type": "order", "orderId": event.order_id},
            )
        if role is RecipientRole.SELLER:
            notice = seller_status_notice(event.new_status)
            if notice is None:
                return None
            return self._payload(
                title=notice.title,
                body=notice.body_template.format(
                    buyer_name=buyer_name or DEFAULT_CUSTOMER_NAME,
                    order_id=event.order_id,
                ),
                data={"type": "order", "orderId": event.order_id, "buyerId": event.buyer_id},
            )
        return None

    def _payload(self, *, title: str, body: str, data: dict[str, str]) -> NotificationPayload:
        return NotificationPayload(
            title=title,
            body=body,
            data=data,
            platform_hints=self._hints,
        )


def to_gateway_message(token: str, payload: NotificationPayload) -> dict[str, Any]:
    """Render payload as an FCM HTTP v1 `message` object addressed to token.

    Android gets a high-priority notification on the configured channel; APNs gets
    a background-wake (content-available) push. click_action and priority are
    also copied into data for clients that read them from there.
    """
    hints = payload.platform_hints
    data = dict(payload.data)
    data["click_action"] = hints.click_action
    data["priority"] = hints.android_priority
    return {
        "token": token,
        "notification": {
            "title": payload.title,
            "body": payload.body,
        },
        "android": {
            "priority": hints.android_priority,
            "notification": {
                "click_action": hints.click_action,
                "channel_id": hints.android_channel,
                "sound": hints.sound,
                "visibility": hints.android_visibility.upper(),
                "notification_priority": f"PRIORITY_{hints.android_priority.upper()}",
                "default_sound": True,
                "default_vibrate_timings": True,
            },
        },
        "apns": {
            "headers": {"apns-priority": str(hints.apns_priority)},
            "payload": {
                "aps": {
                    "content-available": 1 if hints.content_available else 0,
                    "sound": hints.sound,
                },
            },
        },
        "data": data,
    }
