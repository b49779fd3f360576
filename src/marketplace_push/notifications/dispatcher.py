"""Notification dispatcher: one best-effort push per recipient, then the in-app record."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import structlog
from structlog.contextvars import bound_contextvars

from marketplace_push.exceptions import PushGatewayError
from marketplace_push.models.delivery import DeliveryOutcome, Recipient
from marketplace_push.notifications.payload_builder import to_gateway_message
from marketplace_push.utils.boundary import best_effort
from marketplace_push.utils.validation import is_valid_token

if TYPE_CHECKING:
    from marketplace_push.models.notification_payload import NotificationPayload
    from marketplace_push.models.notification_record import NotificationRecord
    from marketplace_push.notifications.gateways.base import BasePushGateway
    from marketplace_push.persistence.repositories.interfaces import (
        IDeliveryTargetRepository,
        INotificationRecordRepository,
    )


class NotificationDispatcher:
    """Send one push through the gateway and act on the outcome.

    At-most-once: a failed send is never retried. DELIVERED lets the caller's
    record be written, INVALID_TARGET deletes the recipient's token, and every
    other failure is logged and dropped. Neither method raises.
    """

    def __init__(
        self,
        gateway: BasePushGateway,
        delivery_target_repository: IDeliveryTargetRepository,
        notification_record_repository: INotificationRecordRepository,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            gateway: Push gateway used for the single delivery attempt.
            delivery_target_repository: Token store; invalid tokens are deleted here.
            notification_record_repository: Store for in-app records after delivery.
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        self._gateway = gateway
        self._targets = delivery_target_repository
        self._records = notification_record_repository
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def dispatch(
        self,
        recipient: Recipient,
        payload: NotificationPayload,
    ) -> DeliveryOutcome:
        """Attempt delivery of payload to recipient's token and classify the result."""
        with bound_contextvars(push_user_id=recipient.user_id):
            token = recipient.token
            if not is_valid_token(token):
                self._logger.error(
                    "push_target_invalid",
                    token_type=type(token).__name__,
                )
                return DeliveryOutcome.TRANSIENT_FAILURE

            try:
                message_id = await self._gateway.send(to_gateway_message(token, payload))
            except PushGatewayError as exc:
                if exc.is_invalid_target:
                    self._logger.warning(
                        "push_target_rejected",
                        push_reason=exc.reason,
                        error_message=str(exc),
                    )
                    await self._invalidate_target(recipient.user_id)
                    return DeliveryOutcome.INVALID_TARGET
                self._logger.error(
                    "push_send_failed",
                    push_reason=exc.reason,
                    http_status_code=exc.status_code,
                    error_message=str(exc),
                )
                return DeliveryOutcome.TRANSIENT_FAILURE
            except Exception as exc:
                self._logger.exception(
                    "push_send_error",
                    error_type=type(exc).__name__,
                    error_message=str(exc),
                )
                return DeliveryOutcome.TRANSIENT_FAILURE

            self._logger.info(
                "push_delivered",
                push_message_id=message_id,
                push_type=payload.data.get("type"),
            )
            return DeliveryOutcome.DELIVERED

    async def notify_and_record(
        self,
        recipient: Recipient,
        payload: NotificationPayload,
        record: NotificationRecord,
    ) -> DeliveryOutcome:
        """Dispatch, then persist record only if the push was delivered."""
        outcome = await self.dispatch(recipient, payload)
        if outcome is not DeliveryOutcome.DELIVERED:
            return outcome
        stored = await best_effort(
            self._records.add(record),
            logger=self._logger,
            event="notification_record_failed",
            push_user_id=recipient.user_id,
        )
        if stored is not None:
            self._logger.debug(
                "notification_record_created",
                push_user_id=recipient.user_id,
                record_id=str(stored.id),
                record_type=stored.type.value,
            )
        return outcome

    async def _invalidate_target(self, user_id: str) -> None:
        """Delete the user's token. Failures are logged only."""

        async def _delete() -> bool:
            await self._targets.delete_token(user_id)
            return True

        deleted = await best_effort(
            _delete(),
            logger=self._logger,
            event="push_target_delete_failed",
            default=False,
        )
        if deleted:
            self._logger.info("push_target_invalidated")
