"""RecipientResolver: turn a user id into a Recipient (token) and look up display names."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import structlog

from marketplace_push.models.delivery import Recipient
from marketplace_push.utils.validation import optional_str

if TYPE_CHECKING:
    from marketplace_push.persistence.repositories.interfaces import (
        IDeliveryTargetRepository,
        IUserRepository,
    )


class RecipientResolver:
    """Reads the user and token stores on behalf of the event handlers."""

    def __init__(
        self,
        delivery_target_repository: IDeliveryTargetRepository,
        user_repository: IUserRepository,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        self._targets = delivery_target_repository
        self._users = user_repository
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def resolve(self, user_id: str) -> Recipient | None:
        """Return the recipient with its stored token, or None if the user has no token slot.

        A slot holding an empty or malformed token still yields a Recipient; the
        dispatcher rejects it.
        """
        token = await self._targets.get_token(user_id)
        if token is None:
            self._logger.info("push_target_missing", push_user_id=user_id)
            return None
        self._logger.debug(
            "push_target_resolved",
            push_user_id=user_id,
            token_exists=bool(token),
        )
        return Recipient(user_id=user_id, token=token)

    async def display_name(self, user_id: str) -> str | None:
        """Return the user's display name, or None when missing or blank."""
        return optional_str(await self._users.get_display_name(user_id))
