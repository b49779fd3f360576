# -*- coding: utf-8 -*-
"""In-memory delivery target repository (keyed by (user_id, slot))."""

from __future__ import annotations

from typing import Any

from marketplace_push.persistence.repositories.interfaces.delivery_target_repository import (
    IDeliveryTargetRepository,
)


class InMemoryDeliveryTargetRepository(IDeliveryTargetRepository):
    """In-memory implementation of IDeliveryTargetRepository.

    Mirrors the users/{user_id}/tokens/{slot} layout: one token document per
    user under a fixed slot name.
    """

    def __init__(self, slot: str = "fcm") -> None:
        """Initialize an empty in-memory store.

        Args:
            slot: Token slot name shared by every user (e.g. "fcm").
        """
        self._slot = slot
        self._store: dict[tuple[str, str], Any] = {}

    async def get_token(self, user_id: str) -> Any | None:
        """Return the stored token value, or None if the slot is missing."""
        return self._store.get((user_id, self._slot))

    async def save_token(self, user_id: str, token: Any) -> None:
        """Register (or replace) the user's token."""
        self._store[(user_id, self._slot)] = token

    async def delete_token(self, user_id: str) -> None:
        """Delete the user's token slot. No-op when absent."""
        self._store.pop((user_id, self._slot), None)
