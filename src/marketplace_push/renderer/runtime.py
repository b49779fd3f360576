# -*- coding: utf-8 -*-
"""Client push runtime primitives used by the background renderer.

ClientRuntime is what a delivered push sees: a notification-render primitive and
keyed local caches. InMemoryClientRuntime backs local runs and tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol

from cachetools import LRUCache


@dataclass(frozen=True, slots=True)
class NotificationOptions:
    """Options passed with a system notification (body, assets, tag, vibration)."""

    body: str
    icon: str | None = None
    badge: str | None = None
    tag: str | None = None
    image: str | None = None
    vibrate: tuple[int, ...] = ()
    data: dict[str, Any] = field(default_factory=dict)


class Cache(Protocol):
    """One named local cache."""

    async def keys(self) -> list[str]:
        """Return the keys of the entries currently stored."""
        ...

    async def delete(self, key: str) -> bool:
        """Delete an entry. Returns False when it was already gone."""
        ...


class CacheStorage(Protocol):
    """All named caches of the client."""

    async def keys(self) -> list[str]:
        """Return the names of the existing caches."""
        ...

    async def open(self, name: str) -> Cache:
        """Return the cache with this name, creating it if needed."""
        ...


class ClientRuntime(Protocol):
    """Execution context that receives pushes while the app is not in the foreground."""

    @property
    def caches(self) -> CacheStorage:
        ...

    async def show_notification(self, title: str, options: NotificationOptions) -> None:
        """Render a system notification."""
        ...


class InMemoryCache:
    """Cache backed by a bounded cachetools.LRUCache."""

    def __init__(self, maxsize: int = 256) -> None:
        self._entries: LRUCache[str, Any] = LRUCache(maxsize=max(1, maxsize))

    async def keys(self) -> list[str]:
        return list(self._entries.keys())

    async def put(self, key: str, value: Any) -> None:
        self._entries[key] = value

    async def delete(self, key: str) -> bool:
        if key not in self._entries:
            return False
        del self._entries[key]
        return True

    def __len__(self) -> int:
        return len(self._entries)


class InMemoryCacheStorage:
    """Named InMemoryCache instances, created on first open()."""

    def __init__(self, *, cache_maxsize: int = 256) -> None:
        self._cache_maxsize = cache_maxsize
        self._caches: dict[str, InMemoryCache] = {}

    async def keys(self) -> list[str]:
        return list(self._caches.keys())

    async def open(self, name: str) -> InMemoryCache:
        cache = self._caches.get(name)
        if cache is None:
            cache = InMemoryCache(self._cache_maxsize)
            self._caches[name] = cache
        return cache


@dataclass
class InMemoryClientRuntime:
    """Client runtime that records rendered notifications instead of showing them."""

    storage: InMemoryCacheStorage = field(default_factory=InMemoryCacheStorage)
    shown: list[tuple[str, NotificationOptions]] = field(default_factory=list)

    @property
    def caches(self) -> InMemoryCacheStorage:
        return self.storage

    async def show_notification(self, title: str, options: NotificationOptions) -> None:
        self.shown.append((title, options))
