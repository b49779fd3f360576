"""Dependency injection."""

from marketplace_push.DI.container import Container

__all__ = ["Container"]
