# -*- coding: utf-8 -*-
"""Logging push gateway (development: nothing leaves the process)."""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING, Any, Callable, Optional

import structlog

from marketplace_push.notifications.gateways.base import BasePushGateway
from marketplace_push.utils.validation import mask_token

if TYPE_CHECKING:  # pragma: no cover
    from marketplace_push.config import Settings


class LoggingPushGateway(BasePushGateway):
    """Log every message instead of sending it. Always succeeds."""

    def __init__(
        self,
        settings: "Settings",
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        super().__init__(settings)
        self._logger = get_logger(logger_name or self.__class__.__name__)
        self._running = False
        self.sent: list[dict[str, Any]] = []

    @property
    def is_running(self) -> bool:
        return self._running

    async def initialize(self) -> None:
        self._running = True

    async def shutdown(self) -> None:
        self._running = False

    async def send(self, message: dict[str, Any]) -> str:
        message_id = f"local/messages/{uuid.uuid4().hex}"
        self.sent.append(message)
        notification = message.get("notification") or {}
        self._logger.info(
            "push_logged",
            message_id=message_id,
            token_masked=mask_token(message.get("token")),
            title=notification.get("title"),
            body=notification.get("body"),
            data=message.get("data"),
        )
        return message_id
