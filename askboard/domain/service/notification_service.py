"""Notification domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from askboard.domain.model import Answer, Notification, Question, User
from askboard.domain.repository import NotificationRepository
from askboard.domain.value import (
    NotificationId,
    NotificationType,
    QuestionId,
    UserId,
)

from .base import Service


class NotificationService(Service):
    """Emits and reads user notifications.

    Emission is best-effort: a failed write is logged and dropped so the
    answer, comment or acceptance that triggered it still commits.
    """

    def __init__(self, notification_repository: NotificationRepository) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
        """
        self.notification_repository = notification_repository

    async def notify(
        self,
        recipient_id: UserId,
        actor_id: UserId,
        type: NotificationType,
        title: str,
        message: str,
        question_id: QuestionId | None = None,
    ) -> Notification | None:
        """Send one notification.

        Args:
            recipient_id: User receiving the notification
            actor_id: User whose action caused it
            type: Trigger kind
            title: Short headline
            message: Full text
            question_id: Question the notification links to

        Returns:
            The stored notification, None when suppressed or failed
        """
        with logfire.span(
            "notification_service.notify",
            recipient_id=str(recipient_id),
            type=type.value,
        ):
            if recipient_id == actor_id:
                logfire.debug("Self-notification suppressed", user_id=str(actor_id))
                return None

            notification = Notification(
                id=NotificationId(uuid4()),
                user_id=recipient_id,
                type=type,
                title=title,
                message=message,
                related_question_id=question_id,
                related_user_id=actor_id,
                created_at=datetime.now(),
            )

            try:
                saved = await self.notification_repository.save(notification)
            except Exception as e:
                logfire.warn(
                    "Notification dropped",
                    recipient_id=str(recipient_id),
                    type=type.value,
                    error=str(e),
                )
                return None

            logfire.info(
                "Notification sent",
                notification_id=str(saved.id),
                recipient_id=str(recipient_id),
                type=type.value,
            )
            return saved

    async def notify_new_answer(
        self, question: Question, answerer: User
    ) -> Notification | None:
        """Tell a question's author that someone answered."""
        return await self.notify(
            recipient_id=question.author_id,
            actor_id=answerer.id,
            type=NotificationType.ANSWER,
            title="New answer to your question",
            message=f'{answerer.name} answered your question "{question.title}"',
            question_id=question.id,
        )

    async def notify_new_comment(
        self, question: Question, answer: Answer, commenter: User
    ) -> Notification | None:
        """Tell an answer's author that someone commented on it."""
        return await self.notify(
            recipient_id=answer.author_id,
            actor_id=commenter.id,
            type=NotificationType.COMMENT,
            title="New comment on your answer",
            message=f'{commenter.name} commented on your answer to "{question.title}"',
            question_id=question.id,
        )

    async def notify_accepted(
        self, question: Question, answer: Answer, acceptor: User
    ) -> Notification | None:
        """Tell an answer's author that their answer was accepted."""
        return await self.notify(
            recipient_id=answer.author_id,
            actor_id=acceptor.id,
            type=NotificationType.ACCEPTED,
            title="Your answer was accepted!",
            message=(
                f'Your answer to "{question.title}" was accepted by {acceptor.name}'
            ),
            question_id=question.id,
        )

    async def list_for_user(
        self,
        user_id: UserId,
        unread_only: bool = False,
        limit: int = 10,
        offset: int = 0,
    ) -> tuple[list[Notification], int, int]:
        """Page through a user's notifications, newest first.

        Returns:
            (notifications, total matching the filter, unread count)
        """
        with logfire.span(
            "notification_service.list_for_user",
            user_id=str(user_id),
            unread_only=unread_only,
        ):
            notifications = await self.notification_repository.find_by_user(
                user_id, unread_only=unread_only, limit=limit, offset=offset
            )
            total = await self.notification_repository.count_by_user(
                user_id, unread_only=unread_only
            )
            unread = await self.notification_repository.count_by_user(
                user_id, unread_only=True
            )
            return notifications, total, unread

    async def mark_read(
        self,
        user_id: UserId,
        notification_ids: list[NotificationId] | None = None,
    ) -> int:
        """Mark notifications read.

        Args:
            user_id: Owner; other users' notifications are never touched
            notification_ids: Specific notifications, None for all unread

        Returns:
            Number of notifications updated
        """
        with logfire.span("notification_service.mark_read", user_id=str(user_id)):
            updated = await self.notification_repository.mark_read(
                user_id, notification_ids
            )
            logfire.info(
                "Notifications marked read", user_id=str(user_id), updated=updated
            )
            return updated
