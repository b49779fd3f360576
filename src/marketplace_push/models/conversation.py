"""Conversation: the participants of a chat thread."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Conversation:
    """Chat thread between users. Only the participant list matters here."""

    id: str
    participants: tuple[str, ...] = ()

    def other_participant(self, sender_id: str) -> str | None:
        """Return the first participant that is not the sender, or None.

        Blank and non-string entries are skipped; they cannot name a recipient.
        """
        for participant in self.participants:
            if isinstance(participant, str) and participant.strip() and participant != sender_id:
                return participant
        return None
