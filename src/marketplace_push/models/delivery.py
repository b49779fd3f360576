"""Delivery-side types: who receives a push and how the attempt ended."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class DeliveryOutcome(str, Enum):
    """Result of one dispatch attempt. Drives the post-send branch."""

    DELIVERED = "DELIVERED"
    """Gateway accepted the message; a NotificationRecord is persisted."""
    INVALID_TARGET = "INVALID_TARGET"
    """Gateway rejected the token as permanently unusable; the token is deleted."""
    TRANSIENT_FAILURE = "TRANSIENT_FAILURE"
    """Anything else (bad token shape, network, quota); logged and dropped."""


class RecipientRole(str, Enum):
    """Which side of the domain event the recipient is on."""

    PARTICIPANT = "participant"
    BUYER = "buyer"
    SELLER = "seller"


@dataclass(frozen=True, slots=True)
class Recipient:
    """A user the service is about to notify.

    token is whatever the target store holds for the user; its shape is checked
    by the dispatcher, not here.
    """

    user_id: str
    token: Any = None
