"""Logging setup (structlog + Logfire)."""

from marketplace_push.logging.config import configure_logging

__all__ = ["configure_logging"]
