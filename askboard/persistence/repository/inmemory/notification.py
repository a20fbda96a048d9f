"""In-memory notification repository for testing."""

from typing import Optional, Sequence

from askboard.domain.model import Notification
from askboard.domain.repository import NotificationRepository
from askboard.domain.value import NotificationId, UserId

from .store import InMemoryStore


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    def _for_user(self, user_id: UserId, unread_only: bool) -> list[Notification]:
        return [
            n
            for n in self.store.notifications.values()
            if n.user_id == user_id and not (unread_only and n.is_read)
        ]

    async def save(self, notification: Notification) -> Notification:
        """Save a notification."""
        self.store.notifications[notification.id] = notification
        return notification

    async def find_by_user(
        self,
        user_id: UserId,
        unread_only: bool = False,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Notification]:
        """A user's notifications, newest first."""
        notifications = sorted(
            self._for_user(user_id, unread_only),
            key=lambda n: n.created_at,
            reverse=True,
        )
        return notifications[offset : offset + limit]

    async def count_by_user(self, user_id: UserId, unread_only: bool = False) -> int:
        """Count a user's notifications."""
        return len(self._for_user(user_id, unread_only))

    async def mark_read(
        self,
        user_id: UserId,
        notification_ids: Optional[Sequence[NotificationId]] = None,
    ) -> int:
        """Mark a user's unread notifications as read."""
        wanted = set(notification_ids) if notification_ids is not None else None
        updated = 0
        for notification in self._for_user(user_id, unread_only=True):
            if wanted is not None and notification.id not in wanted:
                continue
            self.store.notifications[notification.id] = notification.model_copy(
                update={"is_read": True}
            )
            updated += 1
        return updated
