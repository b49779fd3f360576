# -*- coding: utf-8 -*-
"""Unit tests for NotificationDispatcher."""

from __future__ import annotations

from typing import Any, cast

import pytest

from marketplace_push.exceptions import PushGatewayError
from marketplace_push.models.delivery import DeliveryOutcome, Recipient
from marketplace_push.models.notification_payload import NotificationPayload
from marketplace_push.models.notification_record import NotificationRecord, NotificationType
from marketplace_push.notifications.dispatcher import NotificationDispatcher
from marketplace_push.persistence.repositories.in_memory import (
    InMemoryDeliveryTargetRepository,
    InMemoryNotificationRecordRepository,
)

TOKEN = "fcm-token-user-b-0001"


class _FailingDeleteTargetRepository(InMemoryDeliveryTargetRepository):
    async def delete_token(self, user_id: str) -> None:
        raise RuntimeError("store unavailable")


class _FailingRecordRepository(InMemoryNotificationRecordRepository):
    async def add(self, record: NotificationRecord) -> NotificationRecord:
        raise RuntimeError("write rejected")


def _payload() -> NotificationPayload:
    return NotificationPayload(
        title="New message from Ana",
        body="Hello",
        data={"type": "message", "conversationId": "conv-1", "senderId": "user-a"},
    )


def _record() -> NotificationRecord:
    return NotificationRecord.create(
        user_id="user-b",
        title="New message from Ana",
        message="Hello",
        type=NotificationType.MESSAGE,
        context_id="conv-1",
    )


async def test_dispatch_delivered(dispatcher: NotificationDispatcher, gateway: Any) -> None:
    outcome = await dispatcher.dispatch(Recipient("user-b", TOKEN), _payload())

    assert outcome is DeliveryOutcome.DELIVERED
    assert len(gateway.sent) == 1
    message = gateway.sent[0]
    assert message["token"] == TOKEN
    assert message["notification"] == {"title": "New message from Ana", "body": "Hello"}
    assert message["data"]["conversationId"] == "conv-1"


@pytest.mark.parametrize("token", ["", "   ", 12345, {"token": "x"}])
async def test_dispatch_rejects_malformed_token_without_sending(
    dispatcher: NotificationDispatcher,
    gateway: Any,
    target_repo: InMemoryDeliveryTargetRepository,
    token: Any,
) -> None:
    await target_repo.save_token("user-b", token)

    outcome = await dispatcher.dispatch(Recipient("user-b", token), _payload())

    assert outcome is DeliveryOutcome.TRANSIENT_FAILURE
    assert gateway.sent == []
    # A malformed slot is left in place; only the gateway can declare a token dead.
    assert await target_repo.get_token("user-b") == token


@pytest.mark.parametrize(
    "reason",
    ["registration-token-not-registered", "invalid-registration-token"],
)
async def test_dispatch_invalid_target_deletes_token_once(
    dispatcher: NotificationDispatcher,
    gateway: Any,
    target_repo: InMemoryDeliveryTargetRepository,
    reason: str,
) -> None:
    await target_repo.save_token("user-b", TOKEN)
    gateway.failures[TOKEN] = PushGatewayError("rejected", reason=reason, status_code=404)

    outcome = await dispatcher.dispatch(Recipient("user-b", TOKEN), _payload())

    assert outcome is DeliveryOutcome.INVALID_TARGET
    assert len(gateway.sent) == 1
    assert await target_repo.get_token("user-b") is None


@pytest.mark.parametrize("reason", ["quota-exceeded", "network-error", "unknown-error"])
async def test_dispatch_other_gateway_errors_keep_token(
    dispatcher: NotificationDispatcher,
    gateway: Any,
    target_repo: InMemoryDeliveryTargetRepository,
    reason: str,
) -> None:
    await target_repo.save_token("user-b", TOKEN)
    gateway.failures[TOKEN] = PushGatewayError("failed", reason=reason, status_code=503)

    outcome = await dispatcher.dispatch(Recipient("user-b", TOKEN), _payload())

    assert outcome is DeliveryOutcome.TRANSIENT_FAILURE
    assert await target_repo.get_token("user-b") == TOKEN


async def test_dispatch_unexpected_exception_is_transient(
    dispatcher: NotificationDispatcher,
    gateway: Any,
) -> None:
    gateway.failures[TOKEN] = RuntimeError("boom")

    outcome = await dispatcher.dispatch(Recipient("user-b", TOKEN), _payload())

    assert outcome is DeliveryOutcome.TRANSIENT_FAILURE


async def test_dispatch_swallows_token_delete_failure(gateway: Any) -> None:
    records = InMemoryNotificationRecordRepository()
    dispatcher = NotificationDispatcher(
        gateway=cast(Any, gateway),
        delivery_target_repository=_FailingDeleteTargetRepository(),
        notification_record_repository=records,
    )
    gateway.failures[TOKEN] = PushGatewayError(
        "gone", reason="registration-token-not-registered", status_code=404
    )

    outcome = await dispatcher.dispatch(Recipient("user-b", TOKEN), _payload())

    assert outcome is DeliveryOutcome.INVALID_TARGET


async def test_notify_and_record_writes_one_record_when_delivered(
    dispatcher: NotificationDispatcher,
    record_repo: InMemoryNotificationRecordRepository,
    now_utc: Any,
) -> None:
    record = _record()

    outcome = await dispatcher.notify_and_record(Recipient("user-b", TOKEN), _payload(), record)

    assert outcome is DeliveryOutcome.DELIVERED
    stored = await record_repo.list_for_user("user-b")
    assert len(stored) == 1
    assert stored[0].id == record.id
    assert stored[0].is_read is False
    assert stored[0].created_at == now_utc


@pytest.mark.parametrize(
    "failure",
    [
        PushGatewayError("gone", reason="registration-token-not-registered"),
        PushGatewayError("later", reason="quota-exceeded"),
        RuntimeError("boom"),
    ],
)
async def test_notify_and_record_skips_record_when_not_delivered(
    dispatcher: NotificationDispatcher,
    gateway: Any,
    record_repo: InMemoryNotificationRecordRepository,
    failure: Exception,
) -> None:
    gateway.failures[TOKEN] = failure

    outcome = await dispatcher.notify_and_record(Recipient("user-b", TOKEN), _payload(), _record())

    assert outcome is not DeliveryOutcome.DELIVERED
    assert len(record_repo) == 0


async def test_notify_and_record_swallows_record_write_failure(gateway: Any) -> None:
    dispatcher = NotificationDispatcher(
        gateway=cast(Any, gateway),
        delivery_target_repository=InMemoryDeliveryTargetRepository(),
        notification_record_repository=_FailingRecordRepository(),
    )

    outcome = await dispatcher.notify_and_record(Recipient("user-b", TOKEN), _payload(), _record())

    assert outcome is DeliveryOutcome.DELIVERED
    assert len(gateway.sent) == 1
