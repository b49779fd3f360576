# -*- coding: utf-8 -*-
"""BackgroundRenderer: show delivered pushes while the client is not in the foreground."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Callable, Optional

import structlog

from marketplace_push.exceptions import RenderError
from marketplace_push.renderer.runtime import NotificationOptions
from marketplace_push.utils.boundary import best_effort

if TYPE_CHECKING:
    from marketplace_push.config.config import RendererSettings
    from marketplace_push.renderer.runtime import ClientRuntime


class BackgroundRenderer:
    """Render pushes from a partially trusted payload and keep local caches clean.

    Payload shape: {"notification": {"title", "body", "image"?}, "data"?: {...}}.
    Anything that does not fit is rendered as the generic fallback notification.
    """

    def __init__(
        self,
        runtime: "ClientRuntime",
        settings: "RendererSettings",
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        self._runtime = runtime
        self._settings = settings
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def on_background_message(self, payload: Any) -> tuple[str, NotificationOptions] | None:
        """Render payload; on any fault render the fallback instead.

        Returns:
            The (title, options) that were shown, or None if even the fallback failed.
        """
        self._logger.debug("background_message_received")
        try:
            title, options = self._extract(payload)
            await self._runtime.show_notification(title, options)
            return title, options
        except Exception as exc:
            self._logger.warning(
                "background_render_failed",
                error_type=type(exc).__name__,
                error_message=str(exc),
            )
        return await best_effort(
            self._render_fallback(),
            logger=self._logger,
            event="background_fallback_render_failed",
        )

    async def on_periodic_sync(self, tag: str) -> int:
        """Handle a periodic maintenance trigger. Only the cache cleanup tag does anything.

        Returns:
            Number of cache entries deleted.
        """
        if tag != self._settings.cache_cleanup_tag:
            self._logger.debug("periodic_sync_ignored", sync_tag=tag)
            return 0
        return await self.clear_caches()

    async def clear_caches(self) -> int:
        """Delete every entry of every local cache, best effort.

        Caches or entries removed concurrently are skipped, and a failure on one
        cache does not stop the others.
        """
        names = await best_effort(
            self._runtime.caches.keys(),
            logger=self._logger,
            event="cache_enumeration_failed",
            default=[],
        )
        deleted = 0
        for name in names or []:
            cleared = await best_effort(
                self._clear_cache(name),
                logger=self._logger,
                event="cache_clear_failed",
                default=0,
                cache_name=name,
            )
            deleted += cleared or 0
        self._logger.info(
            "cache_cleanup_complete",
            cache_count=len(names or []),
            deleted_entries=deleted,
        )
        return deleted

    async def _clear_cache(self, name: str) -> int:
        cache = await self._runtime.caches.open(name)
        deleted = 0
        for key in await cache.keys():
            if await cache.delete(key):
                deleted += 1
        return deleted

    def _extract(self, payload: Any) -> tuple[str, NotificationOptions]:
        if not isinstance(payload, Mapping):
            raise RenderError("payload is not an object")
        notification = payload.get("notification")
        if not isinstance(notification, Mapping):
            raise RenderError("payload.notification is missing")

        title = notification.get("title")
        body = notification.get("body")
        if not isinstance(title, str):
            raise RenderError("notification.title is missing")
        if not isinstance(body, str):
            raise RenderError("notification.body is missing")
        image = notification.get("image")

        raw_data = payload.get("data")
        data = dict(raw_data) if isinstance(raw_data, Mapping) else {}
        tag = data.get("tag")
        if not isinstance(tag, str) or not tag:
            tag = self._settings.default_tag

        return title, NotificationOptions(
            body=body,
            icon=self._settings.icon,
            badge=self._settings.badge,
            tag=tag,
            image=image if isinstance(image, str) else None,
            vibrate=tuple(self._settings.vibrate),
            data=data,
        )

    async def _render_fallback(self) -> tuple[str, NotificationOptions]:
        title = self._settings.fallback_title
        options = NotificationOptions(
            body=self._settings.fallback_body,
            icon=self._settings.icon,
            badge=self._settings.badge,
            tag=self._settings.default_tag,
            vibrate=tuple(self._settings.vibrate),
        )
        await self._runtime.show_notification(title, options)
        return title, options
