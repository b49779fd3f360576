# -*- coding: utf-8 -*-
"""Abstract interface for per-user delivery target (push token) storage."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class IDeliveryTargetRepository(ABC):
    """Interface for the single push token tracked per user.

    One slot per user; registration is last-write-wins and invalidation deletes
    the slot wholesale.
    """

    @abstractmethod
    async def get_token(self, user_id: str) -> Any | None:
        """Return the stored token value, or None if the user has no token slot.

        The value is returned as stored; callers validate its shape.
        """
        ...

    @abstractmethod
    async def save_token(self, user_id: str, token: Any) -> None:
        """Register (or replace) the user's token."""
        ...

    @abstractmethod
    async def delete_token(self, user_id: str) -> None:
        """Delete the user's token slot. Idempotent (deleting an absent slot is a no-op)."""
        ...
