"""Validation helpers for delivery tokens and document fields."""

from __future__ import annotations

from typing import Any


def is_valid_token(token: Any) -> bool:
    """Return True if token is a non-blank string usable as a delivery target."""
    return isinstance(token, str) and token.strip() != ""


def mask_token(token: Any) -> str:
    """Return a masked delivery token for logging (e.g. dGhp...c2Vk)."""
    if not isinstance(token, str) or len(token) < 12:
        return "***"
    return f"{token[:4]}...{token[-4:]}"


def optional_str(value: Any) -> str | None:
    """Return value when it is a non-blank string, else None."""
    if isinstance(value, str) and value.strip():
        return value
    return None
