"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from askboard.domain.model.notification import Notification
from askboard.domain.value import NotificationId, UserId


class NotificationRepository(ABC):
    """Repository for Notification entity."""

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Insert a notification.

        A failure here must leave the surrounding transaction usable.

        Args:
            notification: The notification to save

        Returns:
            The saved notification
        """
        pass

    @abstractmethod
    async def find_by_user(
        self,
        user_id: UserId,
        unread_only: bool = False,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Notification]:
        """Find a user's notifications, newest first.

        Args:
            user_id: Recipient
            unread_only: Skip notifications already read
            limit: Page size
            offset: Number of notifications to skip

        Returns:
            Notifications for the requested page
        """
        pass

    @abstractmethod
    async def count_by_user(self, user_id: UserId, unread_only: bool = False) -> int:
        """Count a user's notifications."""
        pass

    @abstractmethod
    async def mark_read(
        self,
        user_id: UserId,
        notification_ids: Optional[Sequence[NotificationId]] = None,
    ) -> int:
        """Mark notifications as read.

        Args:
            user_id: Recipient; IDs belonging to other users are ignored
            notification_ids: Notifications to mark, None for all unread

        Returns:
            Number of notifications changed
        """
        pass
