"""Client-side background renderer for delivered pushes."""

from marketplace_push.renderer.background_renderer import BackgroundRenderer
from marketplace_push.renderer.runtime import (
    Cache,
    CacheStorage,
    ClientRuntime,
    InMemoryCache,
    InMemoryCacheStorage,
    InMemoryClientRuntime,
    NotificationOptions,
)

__all__ = [
    "BackgroundRenderer",
    "Cache",
    "CacheStorage",
    "ClientRuntime",
    "InMemoryCache",
    "InMemoryCacheStorage",
    "InMemoryClientRuntime",
    "NotificationOptions",
]
