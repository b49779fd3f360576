"""In-memory conversation repository (keyed by conversation id)."""

from __future__ import annotations

from marketplace_push.models.conversation import Conversation
from marketplace_push.persistence.repositories.interfaces.conversation_repository import (
    IConversationRepository,
)


class InMemoryConversationRepository(IConversationRepository):
    """In-memory implementation of IConversationRepository."""

    def __init__(self) -> None:
        """Initialize an empty in-memory store."""
        self._store: dict[str, Conversation] = {}

    async def get(self, conversation_id: str) -> Conversation | None:
        """Return the conversation, or None if missing."""
        return self._store.get(conversation_id)

    async def save(self, conversation: Conversation) -> None:
        """Insert or update a conversation (by id)."""
        self._store[conversation.id] = conversation
