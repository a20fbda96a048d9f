"""PostgreSQL implementation of Notification repository."""

from typing import Optional, Sequence

from sqlalchemy import desc, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from askboard.domain.model import Notification
from askboard.domain.repository import NotificationRepository
from askboard.domain.value import NotificationId, UserId
from askboard.persistence.mappers import notification_to_dict, row_to_notification
from askboard.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, notification: Notification) -> Notification:
        """Insert inside a SAVEPOINT.

        A failed insert rolls back to the savepoint only, leaving the
        request transaction usable for the write that triggered it.
        """
        async with self.session.begin_nested():
            stmt = notifications_table.insert().values(
                **notification_to_dict(notification)
            )
            await self.session.execute(stmt)
        return notification

    def _for_user(self, stmt, user_id: UserId, unread_only: bool):
        stmt = stmt.where(notifications_table.c.user_id == user_id)
        if unread_only:
            stmt = stmt.where(notifications_table.c.is_read.is_(False))
        return stmt

    async def find_by_user(
        self,
        user_id: UserId,
        unread_only: bool = False,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Notification]:
        """Find a user's notifications, newest first."""
        stmt = (
            self._for_user(select(notifications_table), user_id, unread_only)
            .order_by(desc(notifications_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_notification(dict(row)) for row in result.mappings().all()]

    async def count_by_user(self, user_id: UserId, unread_only: bool = False) -> int:
        """Count a user's notifications."""
        stmt = self._for_user(
            select(func.count()).select_from(notifications_table),
            user_id,
            unread_only,
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def mark_read(
        self,
        user_id: UserId,
        notification_ids: Optional[Sequence[NotificationId]] = None,
    ) -> int:
        """Mark unread notifications of one user as read."""
        stmt = update(notifications_table).where(
            notifications_table.c.user_id == user_id,
            notifications_table.c.is_read.is_(False),
        )
        if notification_ids is not None:
            if not notification_ids:
                return 0
            stmt = stmt.where(notifications_table.c.id.in_(notification_ids))

        result = await self.session.execute(stmt.values(is_read=True))
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
