"""In-memory user repository (display names keyed by user id)."""

from __future__ import annotations

from typing import Optional

from marketplace_push.persistence.repositories.interfaces.user_repository import (
    IUserRepository,
)


class InMemoryUserRepository(IUserRepository):
    """In-memory implementation of IUserRepository."""

    def __init__(self) -> None:
        """Initialize an empty in-memory store."""
        self._store: dict[str, Optional[str]] = {}

    async def get_display_name(self, user_id: str) -> Optional[str]:
        """Return the display name, or None if the user or the name is missing."""
        return self._store.get(user_id)

    async def save_display_name(self, user_id: str, display_name: Optional[str]) -> None:
        """Insert or update the user's display name."""
        self._store[user_id] = display_name
