"""Abstract interface for conversation storage."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from marketplace_push.models.conversation import Conversation


class IConversationRepository(ABC):
    """Interface for looking up conversations (participants) by id."""

    @abstractmethod
    async def get(self, conversation_id: str) -> Optional[Conversation]:
        """Return the conversation, or None if missing."""
        ...

    @abstractmethod
    async def save(self, conversation: Conversation) -> None:
        """Insert or update a conversation (by id)."""
        ...
