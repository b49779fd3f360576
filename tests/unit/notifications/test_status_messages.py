# -*- coding: utf-8 -*-
"""Unit tests for order status wording."""

from __future__ import annotations

import pytest

from marketplace_push.notifications.status_messages import (
    notifies_seller,
    seller_status_notice,
    status_phrase,
)


@pytest.mark.parametrize(
    ("status", "expected"),
    [
        ("processing", "is being processed"),
        ("shipped", "has been shipped"),
        ("delivered", "has been delivered"),
        ("cancelled", "has been cancelled"),
        ("refunded", "has been refunded"),
    ],
)
def test_status_phrase_known_statuses(status: str, expected: str) -> None:
    assert status_phrase(status) == expected


def test_status_phrase_unknown_status_reads_updated() -> None:
    assert status_phrase("unknown_value") == "has been updated"


def test_status_phrase_refund_requested_is_not_in_phrase_table() -> None:
    assert status_phrase("refund_requested") == "has been updated"


def test_status_phrase_non_string_reads_updated() -> None:
    assert status_phrase(None) == "has been updated"
    assert status_phrase(3) == "has been updated"


def test_seller_notice_only_for_delivered_and_refund_requested() -> None:
    assert seller_status_notice("delivered") is not None
    assert seller_status_notice("refund_requested") is not None
    assert seller_status_notice("shipped") is None
    assert seller_status_notice(None) is None
    assert notifies_seller("delivered")
    assert not notifies_seller("cancelled")


def test_seller_notice_templates() -> None:
    delivered = seller_status_notice("delivered")
    refund = seller_status_notice("refund_requested")
    assert delivered is not None and refund is not None

    assert delivered.title == "Order Delivered"
    assert delivered.body_template.format(buyer_name="Ana", order_id="o-1") == (
        "Ana has received order #o-1"
    )
    assert refund.title == "Refund Requested"
    assert refund.body_template.format(buyer_name="Ana", order_id="o-1") == (
        "Ana has requested a refund for order #o-1"
    )
