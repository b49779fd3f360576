# -*- coding: utf-8 -*-
"""Unit tests for BackgroundRenderer against the in-memory client runtime."""

from __future__ import annotations

from typing import Any

import pytest

from marketplace_push.config import RendererSettings, Settings
from marketplace_push.renderer import BackgroundRenderer
from marketplace_push.renderer.runtime import (
    InMemoryCache,
    InMemoryCacheStorage,
    InMemoryClientRuntime,
    NotificationOptions,
)


class _FlakyRuntime(InMemoryClientRuntime):
    """Fails the first show_notification call, then behaves normally."""

    def __init__(self) -> None:
        super().__init__()
        self.calls = 0

    async def show_notification(self, title: str, options: NotificationOptions) -> None:
        self.calls += 1
        if self.calls == 1:
            raise RuntimeError("display refused")
        await super().show_notification(title, options)


class _BrokenStorage(InMemoryCacheStorage):
    """Lists a cache that can no longer be opened."""

    async def keys(self) -> list[str]:
        return ["gone", *await super().keys()]

    async def open(self, name: str) -> InMemoryCache:
        if name == "gone":
            raise RuntimeError("cache removed")
        return await super().open(name)


@pytest.fixture
def renderer_settings(settings: Settings) -> RendererSettings:
    return settings.renderer


@pytest.fixture
def runtime() -> InMemoryClientRuntime:
    return InMemoryClientRuntime()


@pytest.fixture
def renderer(runtime: InMemoryClientRuntime, renderer_settings: RendererSettings) -> BackgroundRenderer:
    return BackgroundRenderer(runtime, renderer_settings)


async def test_renders_payload_with_defaults(
    renderer: BackgroundRenderer,
    runtime: InMemoryClientRuntime,
) -> None:
    payload = {
        "notification": {"title": "Order Status Updated", "body": "Order #o-1 has been shipped"},
        "data": {"type": "order", "orderId": "o-1"},
    }

    shown = await renderer.on_background_message(payload)

    assert shown is not None
    assert runtime.shown == [shown]
    title, options = shown
    assert title == "Order Status Updated"
    assert options.body == "Order #o-1 has been shipped"
    assert options.icon == "/icons/Icon-192.png"
    assert options.badge == "/icons/Icon-192.png"
    assert options.tag == "notification-1"
    assert options.vibrate == (200, 100, 200)
    assert options.data == {"type": "order", "orderId": "o-1"}
    assert options.image is None


async def test_uses_data_tag_and_image(renderer: BackgroundRenderer) -> None:
    payload = {
        "notification": {"title": "t", "body": "b", "image": "https://cdn.example/p.png"},
        "data": {"tag": "order-o-1"},
    }

    shown = await renderer.on_background_message(payload)

    assert shown is not None
    assert shown[1].tag == "order-o-1"
    assert shown[1].image == "https://cdn.example/p.png"


@pytest.mark.parametrize(
    "payload",
    [
        {"notification": {"title": "Only a title"}},
        {"notification": {"body": "Only a body"}},
        {"notification": "text"},
        {"data": {"type": "message"}},
        None,
        "plain string",
    ],
)
async def test_malformed_payload_renders_fallback(
    renderer: BackgroundRenderer,
    runtime: InMemoryClientRuntime,
    payload: Any,
) -> None:
    shown = await renderer.on_background_message(payload)

    assert shown is not None
    title, options = shown
    assert title == "New Message"
    assert options.body == "You have a new message"
    assert options.tag == "notification-1"
    assert len(runtime.shown) == 1


async def test_display_failure_falls_back(renderer_settings: RendererSettings) -> None:
    runtime = _FlakyRuntime()
    renderer = BackgroundRenderer(runtime, renderer_settings)

    shown = await renderer.on_background_message({"notification": {"title": "t", "body": "b"}})

    assert shown is not None
    assert shown[0] == "New Message"
    assert runtime.calls == 2


async def test_periodic_sync_ignores_other_tags(
    renderer: BackgroundRenderer,
    runtime: InMemoryClientRuntime,
) -> None:
    cache = await runtime.caches.open("images")
    await cache.put("a", b"1")

    assert await renderer.on_periodic_sync("refresh-feed") == 0
    assert len(cache) == 1


async def test_cleanup_with_no_caches_deletes_nothing(renderer: BackgroundRenderer) -> None:
    assert await renderer.on_periodic_sync("cleanup-cache") == 0


async def test_cleanup_clears_every_cache(
    renderer: BackgroundRenderer,
    runtime: InMemoryClientRuntime,
) -> None:
    images = await runtime.caches.open("images")
    pages = await runtime.caches.open("pages")
    await images.put("a", b"1")
    await images.put("b", b"2")
    await pages.put("/home", "<html/>")

    deleted = await renderer.on_periodic_sync("cleanup-cache")

    assert deleted == 3
    assert len(images) == 0
    assert len(pages) == 0


async def test_cleanup_continues_past_broken_cache(renderer_settings: RendererSettings) -> None:
    runtime = InMemoryClientRuntime(storage=_BrokenStorage())
    cache = await runtime.caches.open("pages")
    await cache.put("/home", "<html/>")
    renderer = BackgroundRenderer(runtime, renderer_settings)

    assert await renderer.clear_caches() == 1
    assert len(cache) == 0


async def test_in_memory_cache_delete_missing_key() -> None:
    cache = InMemoryCache(maxsize=2)
    await cache.put("a", 1)
    await cache.put("b", 2)
    await cache.put("c", 3)

    assert await cache.keys() == ["b", "c"]
    assert await cache.delete("a") is False
    assert await cache.delete("b") is True


def test_vibrate_pattern_parsing() -> None:
    assert RendererSettings(vibrate="300, 50").vibrate == [300, 50]
    assert RendererSettings(vibrate="").vibrate == []
