"""Human-readable wording for order lifecycle states."""

from __future__ import annotations

from typing import Any, NamedTuple

_STATUS_PHRASES: dict[str, str] = {
    "processing": "is being processed",
    "shipped": "has been shipped",
    "delivered": "has been delivered",
    "cancelled": "has been cancelled",
    "refunded": "has been refunded",
}

_DEFAULT_PHRASE = "has been updated"


class SellerNotice(NamedTuple):
    """Title and body template for a status change the seller must hear about."""

    title: str
    body_template: str
    """Formatted with buyer_name and order_id."""


# Statuses that also notify the seller. Not part of the buyer phrase table.
SELLER_STATUS_NOTICES: dict[str, SellerNotice] = {
    "delivered": SellerNotice(
        title="Order Delivered",
        body_template="{buyer_name} has received order #{order_id}",
    ),
    "refund_requested": SellerNotice(
        title="Refund Requested",
        body_template="{buyer_name} has requested a refund for order #{order_id}",
    ),
}


def status_phrase(status: Any) -> str:
    """Return the buyer-facing phrase for an order status, e.g. "has been shipped".

    Unknown or missing statuses read "has been updated".
    """
    if not isinstance(status, str):
        return _DEFAULT_PHRASE
    return _STATUS_PHRASES.get(status, _DEFAULT_PHRASE)


def seller_status_notice(status: Any) -> SellerNotice | None:
    """Return the seller notice for status, or None when the seller is not notified."""
    if not isinstance(status, str):
        return None
    return SELLER_STATUS_NOTICES.get(status)


def notifies_seller(status: Any) -> bool:
    """True for statuses (delivered, refund_requested) that also notify the seller."""
    return seller_status_notice(status) is not None
