# -*- coding: utf-8 -*-
"""Dependency injection container (dependency-injector)."""

from __future__ import annotations

from dependency_injector import containers, providers

from marketplace_push.config import Settings, get_settings
from marketplace_push.events.bus import get_event_bus
from marketplace_push.models.notification_payload import PlatformHints
from marketplace_push.notifications.dispatcher import NotificationDispatcher
from marketplace_push.notifications.gateways.base import BasePushGateway
from marketplace_push.notifications.gateways.fcm import FcmPushGateway
from marketplace_push.notifications.gateways.logging_gateway import LoggingPushGateway
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
from marketplace_push.triggers import DocumentTriggerRouter


def _build_push_gateway(settings: Settings) -> BasePushGateway:
    """FCM when enabled in settings, otherwise the logging gateway."""
    if settings.fcm.enabled:
        return FcmPushGateway(settings=settings)
    return LoggingPushGateway(settings=settings)


def _build_platform_hints(settings: Settings) -> PlatformHints:
    return PlatformHints.from_settings(settings.push)


def _build_delivery_target_repository(settings: Settings) -> InMemoryDeliveryTargetRepository:
    return InMemoryDeliveryTargetRepository(slot=settings.push.token_slot)


class Container(containers.DeclarativeContainer):
    """Application container. Wires settings, bus, stores, gateway, dispatcher and handlers."""

    config = providers.Callable(get_settings)

    event_bus = providers.Callable(get_event_bus)

    user_repository = providers.Singleton(InMemoryUserRepository)

    delivery_target_repository = providers.Singleton(_build_delivery_target_repository, config)

    conversation_repository = providers.Singleton(InMemoryConversationRepository)

    notification_record_repository = providers.Singleton(InMemoryNotificationRecordRepository)

    push_gateway = providers.Singleton(_build_push_gateway, config)

    payload_builder = providers.Singleton(
        PushPayloadBuilder,
        hints=providers.Callable(_build_platform_hints, config),
    )

    dispatcher = providers.Singleton(
        NotificationDispatcher,
        gateway=push_gateway,
        delivery_target_repository=delivery_target_repository,
        notification_record_repository=notification_record_repository,
    )

    recipient_resolver = providers.Singleton(
        RecipientResolver,
        delivery_target_repository=delivery_target_repository,
        user_repository=user_repository,
    )

    notification_handlers = providers.Singleton(
        NotificationEventHandlers,
        recipient_resolver=recipient_resolver,
        dispatcher=dispatcher,
        conversation_repository=conversation_repository,
        payload_builder=payload_builder,
        event_bus=event_bus,
    )

    trigger_router = providers.Singleton(
        DocumentTriggerRouter,
        event_bus=event_bus,
    )
