"""In-memory repository implementations."""

from marketplace_push.persistence.repositories.in_memory.conversation_repository import (
    InMemoryConversationRepository,
)
from marketplace_push.persistence.repositories.in_memory.delivery_target_repository import (
    InMemoryDeliveryTargetRepository,
)
from marketplace_push.persistence.repositories.in_memory.notification_record_repository import (
    InMemoryNotificationRecordRepository,
)
from marketplace_push.persistence.repositories.in_memory.user_repository import (
    InMemoryUserRepository,
)

__all__ = [
    "InMemoryConversationRepository",
    "InMemoryDeliveryTargetRepository",
    "InMemoryNotificationRecordRepository",
    "InMemoryUserRepository",
]
