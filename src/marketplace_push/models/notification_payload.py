"""NotificationPayload: platform-layered push content built per recipient per event."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping

if TYPE_CHECKING:
    from marketplace_push.config.config import PushSettings


@dataclass(frozen=True, slots=True)
class PlatformHints:
    """Per-platform delivery profile. Constant for every push the service sends."""

    android_priority: str = "high"
    android_channel: str = "high_importance_channel"
    android_visibility: str = "public"
    apns_priority: int = 10
    content_available: bool = True
    sound: str = "default"
    click_action: str = "FLUTTER_NOTIFICATION_CLICK"

    @classmethod
    def from_settings(cls, settings: PushSettings) -> PlatformHints:
        """Build hints from the PUSH__* configuration section."""
        return cls(
            android_channel=settings.android_channel_id,
            apns_priority=settings.apns_priority,
            sound=settings.sound,
            click_action=settings.click_action,
        )


@dataclass(frozen=True, slots=True)
class NotificationPayload:
    """Title/body shown to the user plus auxiliary string data for the client.

    data always carries a `type` key (message / order) and the ids the client
    needs to deep-link (conversationId, senderId, orderId, buyerId).
    """

    title: str
    body: str
    data: Mapping[str, str] = field(default_factory=dict)
    platform_hints: PlatformHints = field(default_factory=PlatformHints)

    def __post_init__(self) -> None:
        # Read-only view so the payload cannot change after construction.
        object.__setattr__(self, "data", MappingProxyType(dict(self.data)))
