"""Push gateways."""

from marketplace_push.notifications.gateways.base import BasePushGateway
from marketplace_push.notifications.gateways.fcm import FcmPushGateway
from marketplace_push.notifications.gateways.logging_gateway import LoggingPushGateway

__all__ = [
    "BasePushGateway",
    "FcmPushGateway",
    "LoggingPushGateway",
]
