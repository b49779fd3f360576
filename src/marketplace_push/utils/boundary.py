"""Failure boundaries: run a step, log and discard the failures it is allowed to have."""

from __future__ import annotations

import functools
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

T = TypeVar("T")


async def best_effort(
    step: Awaitable[T],
    *,
    logger: Any,
    event: str,
    default: T | None = None,
    errors: tuple[type[BaseException], ...] = (Exception,),
    **context: Any,
) -> T | None:
    """Await step; on one of errors, log `event` with the error and return default.

    Cancellation is never swallowed (CancelledError is not an Exception).

    Args:
        step: Awaitable to run.
        logger: structlog-style logger used for the failure entry.
        event: Log event name for the failure.
        default: Value returned when the step fails.
        errors: Exception types treated as a no-op outcome.
        **context: Extra key/values attached to the failure log entry.
    """
    try:
        return await step
    except errors as exc:
        logger.exception(
            event,
            error_type=type(exc).__name__,
            error_message=str(exc),
            **context,
        )
        return default


def failure_boundary(
    event: str,
) -> Callable[[Callable[..., Awaitable[Any]]], Callable[..., Awaitable[Any]]]:
    """Decorate an async method so any exception it raises is logged as `event` and dropped.

    The instance must expose a structlog logger as ``self._logger``.
    """

    def decorate(func: Callable[..., Awaitable[Any]]) -> Callable[..., Awaitable[Any]]:
        @functools.wraps(func)
        async def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
            return await best_effort(
                func(self, *args, **kwargs),
                logger=self._logger,
                event=event,
            )

        return wrapper

    return decorate
