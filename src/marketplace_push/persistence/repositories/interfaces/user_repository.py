"""Abstract interface for user profile storage (display names)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class IUserRepository(ABC):
    """Interface for reading user profile fields needed to word notifications."""

    @abstractmethod
    async def get_display_name(self, user_id: str) -> Optional[str]:
        """Return the user's display name, or None if the user or the name is missing."""
        ...

    @abstractmethod
    async def save_display_name(self, user_id: str, display_name: Optional[str]) -> None:
        """Insert or update the user's display name."""
        ...
