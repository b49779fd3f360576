"""Notification subsystem: payloads, wording, gateways and the dispatcher."""

from marketplace_push.notifications.dispatcher import NotificationDispatcher
from marketplace_push.notifications.gateways import (
    BasePushGateway,
    FcmPushGateway,
    LoggingPushGateway,
)
from marketplace_push.notifications.payload_builder import (
    PushPayloadBuilder,
    to_gateway_message,
)
from marketplace_push.notifications.status_messages import (
    seller_status_notice,
    status_phrase,
)

__all__ = [
    "BasePushGateway",
    "FcmPushGateway",
    "LoggingPushGateway",
    "NotificationDispatcher",
    "PushPayloadBuilder",
    "seller_status_notice",
    "status_phrase",
    "to_gateway_message",
]
