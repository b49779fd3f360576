# -*- coding: utf-8 -*-
"""Base push gateway."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover
    from marketplace_push.config.config import Settings


class BasePushGateway(ABC):
    """Abstract base for push delivery backends.

    send() either returns the gateway's message id or raises PushGatewayError
    carrying a reason code.
    """

    def __init__(self, settings: "Settings"):
        """
        Args:
            settings: Global configuration (Settings).
        """
        self.settings = settings

    @property
    @abstractmethod
    def is_running(self) -> bool:
        """True between initialize() and shutdown()."""
        pass

    @abstractmethod
    async def initialize(self) -> None:
        """Acquire transport resources."""
        pass

    @abstractmethod
    async def shutdown(self) -> None:
        """Release transport resources."""
        pass

    @abstractmethod
    async def send(self, message: dict[str, Any]) -> str:
        """
        Deliver one layered message.

        Args:
            message: FCM v1 message object (see payload_builder.to_gateway_message).

        Returns:
            Gateway-assigned message id.

        Raises:
            PushGatewayError: Delivery failed; `reason` classifies the failure.
        """
        pass
