"""Document-store trigger adapters."""

from marketplace_push.triggers.document_trigger import (
    MESSAGE_PATH,
    ORDER_PATH,
    DocumentChange,
    DocumentTriggerRouter,
    match_path,
)

__all__ = [
    "MESSAGE_PATH",
    "ORDER_PATH",
    "DocumentChange",
    "DocumentTriggerRouter",
    "match_path",
]
