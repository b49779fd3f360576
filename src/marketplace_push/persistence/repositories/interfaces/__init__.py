# -*- coding: utf-8 -*-
"""Repository interfaces (abstractions). Implementations live in in_memory/."""

from marketplace_push.persistence.repositories.interfaces.conversation_repository import (
    IConversationRepository,
)
from marketplace_push.persistence.repositories.interfaces.delivery_target_repository import (
    IDeliveryTargetRepository,
)
from marketplace_push.persistence.repositories.interfaces.notification_record_repository import (
    INotificationRecordRepository,
)
from marketplace_push.persistence.repositories.interfaces.user_repository import (
    IUserRepository,
)

__all__ = [
    "IConversationRepository",
    "IDeliveryTargetRepository",
    "INotificationRecordRepository",
    "IUserRepository",
]
