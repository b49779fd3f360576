# -*- coding: utf-8 -*-
"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any, cast

import pytest

from marketplace_push.config import Settings
from marketplace_push.models.conversation import Conversation
from marketplace_push.notifications.dispatcher import NotificationDispatcher
from marketplace_push.notifications.payload_builder import PushPayloadBuilder
from marketplace_push.persistence.repositories.in_memory import (
    InMemoryConversationRepository,
    InMemoryDeliveryTargetRepository,
    InMemoryNotificationRecordRepository,
    InMemoryUserRepository,
)
from marketplace_push.services.notifications import (
    NotificationEventHandlers,
    RecipientResolver,
)


class FakePushGateway:
    """Records sent messages; raises the configured exception for a given token."""

    def __init__(self) -> None:
        self.sent: list[dict[str, Any]] = []
        self.failures: dict[str, Exception] = {}

    async def send(self, message: dict[str, Any]) -> str:
        self.sent.append(message)
        failure = self.failures.get(message["token"])
        if failure is not None:
            raise failure
        return f"projects/test/messages/{len(self.sent)}"

    def sent_to(self, token: str) -> list[dict[str, Any]]:
        return [m for m in self.sent if m["token"] == token]


class FakeEventBus:
    """Minimal event bus fake for unit tests."""

    def __init__(self) -> None:
        self.handlers: dict[str, list[Any]] = {}
        self.dispatched: list[Any] = []

    def on(self, event_type: type[Any], handler: Any) -> None:
        key = event_type.__name__
        self.handlers.setdefault(key, []).append(handler)

    def dispatch(self, event: Any) -> None:
        self.dispatched.append(event)


@pytest.fixture
def now_utc() -> datetime:
    """Stable UTC timestamp for deterministic assertions."""
    return datetime(2026, 2, 13, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def settings() -> Settings:
    """Default settings (no .env influence on the fields tests rely on)."""
    return Settings.from_env()


@pytest.fixture
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def target_repo() -> InMemoryDeliveryTargetRepository:
    return InMemoryDeliveryTargetRepository()


@pytest.fixture
def conversation_repo() -> InMemoryConversationRepository:
    return InMemoryConversationRepository()


@pytest.fixture
def record_repo(now_utc: datetime) -> InMemoryNotificationRecordRepository:
    return InMemoryNotificationRecordRepository(clock=lambda: now_utc)


@pytest.fixture
def gateway() -> FakePushGateway:
    return FakePushGateway()


@pytest.fixture
def event_bus() -> FakeEventBus:
    return FakeEventBus()


@pytest.fixture
def payload_builder() -> PushPayloadBuilder:
    return PushPayloadBuilder()


@pytest.fixture
def dispatcher(
    gateway: FakePushGateway,
    target_repo: InMemoryDeliveryTargetRepository,
    record_repo: InMemoryNotificationRecordRepository,
) -> NotificationDispatcher:
    return NotificationDispatcher(
        gateway=cast(Any, gateway),
        delivery_target_repository=target_repo,
        notification_record_repository=record_repo,
    )


@pytest.fixture
def recipient_resolver(
    target_repo: InMemoryDeliveryTargetRepository,
    user_repo: InMemoryUserRepository,
) -> RecipientResolver:
    return RecipientResolver(
        delivery_target_repository=target_repo,
        user_repository=user_repo,
    )


@pytest.fixture
def handlers(
    recipient_resolver: RecipientResolver,
    dispatcher: NotificationDispatcher,
    conversation_repo: InMemoryConversationRepository,
    payload_builder: PushPayloadBuilder,
    event_bus: FakeEventBus,
) -> NotificationEventHandlers:
    return NotificationEventHandlers(
        recipient_resolver=recipient_resolver,
        dispatcher=dispatcher,
        conversation_repository=conversation_repo,
        payload_builder=payload_builder,
        event_bus=event_bus,
    )


@pytest.fixture
def seed_users(
    user_repo: InMemoryUserRepository,
    target_repo: InMemoryDeliveryTargetRepository,
    conversation_repo: InMemoryConversationRepository,
) -> Callable[..., Any]:
    """Async helper: store display names, tokens and conversations in one call."""

    async def _seed(
        *,
        names: dict[str, str | None] | None = None,
        tokens: dict[str, Any] | None = None,
        conversations: dict[str, tuple[str, ...]] | None = None,
    ) -> None:
        for user_id, name in (names or {}).items():
            await user_repo.save_display_name(user_id, name)
        for user_id, token in (tokens or {}).items():
            await target_repo.save_token(user_id, token)
        for conversation_id, participants in (conversations or {}).items():
            await conversation_repo.save(Conversation(id=conversation_id, participants=participants))

    return _seed
