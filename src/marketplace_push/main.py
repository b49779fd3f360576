# -*- coding: utf-8 -*-
"""
Entry point for the push notification service.

Orchestrates: logging, settings, container, gateway, event handlers, shutdown (EOF, SIGINT or CancelledError).
Changes flow: stdin (one DocumentChange JSON per line) -> DocumentTriggerRouter -> event bus
-> NotificationEventHandlers -> NotificationDispatcher -> push gateway.

Run with: python -m marketplace_push.main < changes.jsonl
"""
from __future__ import annotations

import asyncio
import signal
import sys
from collections.abc import AsyncIterator
from typing import TYPE_CHECKING, Any, Optional

import structlog

from marketplace_push.DI import Container
from marketplace_push.config import get_settings
from marketplace_push.logging.config import configure_logging

if TYPE_CHECKING:
    from marketplace_push.config import Settings


def _setup_sigint(shutdown_event: asyncio.Event) -> bool:
    """Route SIGINT to shutdown_event. Returns False where the loop has no signal support."""
    try:
        loop = asyncio.get_running_loop()
        loop.add_signal_handler(
            signal.SIGINT,
            lambda: shutdown_event.set(),
        )
    except NotImplementedError:
        return False  # Windows has no add_signal_handler
    return True


async def _open_stdin_reader() -> asyncio.StreamReader:
    """Return a StreamReader fed by stdin without blocking the event loop."""
    loop = asyncio.get_running_loop()
    reader = asyncio.StreamReader()
    try:
        await loop.connect_read_pipe(lambda: asyncio.StreamReaderProtocol(reader), sys.stdin)
    except ValueError:
        # stdin redirected from a regular file: the loop cannot watch it, but reading it never blocks.
        reader.feed_data(await asyncio.to_thread(sys.stdin.buffer.read))
        reader.feed_eof()
    return reader


async def _read_lines(
    reader: asyncio.StreamReader,
    shutdown_event: asyncio.Event,
) -> AsyncIterator[str]:
    """Yield non-empty lines until EOF or until shutdown_event is set, even mid-read."""
    stop = asyncio.ensure_future(shutdown_event.wait())
    try:
        while not stop.done():
            read = asyncio.ensure_future(reader.readline())
            await asyncio.wait({read, stop}, return_when=asyncio.FIRST_COMPLETED)
            if not read.done():
                read.cancel()
                return
            raw = read.result()
            if not raw:
                return
            line = raw.decode("utf-8", errors="replace").strip()
            if line:
                yield line
    finally:
        stop.cancel()


async def _do_shutdown(container: Container, logger: Any) -> None:
    """Clean shutdown. Safe to call on normal shutdown or CancelledError."""
    container.notification_handlers().stop()
    await container.event_bus().stop()
    await container.push_gateway().shutdown()
    logger.info("main_shutdown_complete")


async def run(
    *,
    settings: Optional["Settings"] = None,
    container: Optional[Container] = None,
    reader: Optional[asyncio.StreamReader] = None,
    shutdown_event: Optional[asyncio.Event] = None,
) -> None:
    """Route stdin changes until EOF or shutdown. Arguments default to the process-wide ones."""
    settings = settings or get_settings()
    configure_logging(settings)
    logger = structlog.get_logger("main")

    container = container or Container()
    gateway = container.push_gateway()
    await gateway.initialize()
    handlers = container.notification_handlers()
    handlers.start()
    router = container.trigger_router()
    bus = container.event_bus()

    shutdown_event = shutdown_event or asyncio.Event()
    sigint_installed = _setup_sigint(shutdown_event)

    logger.info(
        "main_started",
        gateway=type(gateway).__name__,
        environment=settings.app.environment,
    )
    routed = 0
    try:
        reader = reader or await _open_stdin_reader()
        async for line in _read_lines(reader, shutdown_event):
            if router.handle_raw(line) is not None:
                routed += 1
        if shutdown_event.is_set():
            logger.info("main_shutdown_requested", routed_events=routed)
        else:
            logger.info("main_input_exhausted", routed_events=routed)
        await bus.wait_until_idle()
    finally:
        if sigint_installed:
            asyncio.get_running_loop().remove_signal_handler(signal.SIGINT)
        await _do_shutdown(container, logger)


def main() -> None:
    asyncio.run(run())


__all__ = ["run", "main"]

if __name__ == "__main__":
    main()
