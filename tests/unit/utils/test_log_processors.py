# -*- coding: utf-8 -*-
"""Unit tests for the structlog processors and the event bus naming."""

from __future__ import annotations

from types import SimpleNamespace

import structlog

from marketplace_push.config import Settings
from marketplace_push.events.bus import bus_name
from marketplace_push.logging.config import build_processors, redact_tokens, service_context


def test_redact_tokens_masks_known_keys() -> None:
    event = redact_tokens(
        None,
        "info",
        {"event": "push_delivered", "token": "dGhpcyBpcyBhIHRva2Vu", "push_user_id": "user-b"},
    )

    assert event["token"] == "dGhp...a2Vu"
    assert event["push_user_id"] == "user-b"


def test_service_context_adds_app_identity() -> None:
    settings = Settings.from_env(app={"service_name": "push-worker", "environment": "test"})
    processor = service_context(settings.app)
    logger = SimpleNamespace(_logger=SimpleNamespace(name="NotificationDispatcher"))

    event = processor(logger, "info", {"event": "push_delivered"})

    assert event["logger"] == "NotificationDispatcher"
    assert event["app_name"] == "marketplace-push"
    assert event["service_name"] == "push-worker"
    assert event["environment"] == "test"


def test_build_processors_renders_json_when_writing_files() -> None:
    settings = Settings.from_env(logging={"log_to_console": False, "log_to_file": True})

    processors = build_processors(settings)

    assert redact_tokens in processors
    assert isinstance(processors[-1], structlog.processors.JSONRenderer)


def test_build_processors_without_outputs_has_no_renderer() -> None:
    settings = Settings.from_env(logging={"log_to_console": False, "log_to_file": False})

    processors = build_processors(settings)

    assert processors[-1] is redact_tokens


def test_bus_name() -> None:
    assert bus_name("marketplace-push") == "MarketplacePush"
    assert bus_name("push_worker 2") == "PushWorker2"
    assert bus_name("---") == "MarketplacePush"
