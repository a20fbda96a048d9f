"""List notifications use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from askboard.application.usecase.base import CamelModel
from askboard.domain.service import NotificationService, QuestionService
from askboard.domain.value import NotificationType, UserId


class RelatedQuestion(CamelModel):
    """Question a notification links to."""

    id: str
    title: str


class NotificationItem(CamelModel):
    """Notification in response."""

    id: str
    type: NotificationType
    title: str
    message: str
    is_read: bool
    created_at: datetime
    related_question: RelatedQuestion | None
    related_user_id: str | None


class ListNotificationsRequest(BaseModel):
    """List notifications request."""

    user_id: str  # User ID from authenticated user
    unread_only: bool = False
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)


class ListNotificationsResponse(CamelModel):
    """List notifications response."""

    notifications: list[NotificationItem]
    unread_count: int
    total: int


class ListNotificationsUseCase:
    """Use case for reading a user's notifications, newest first."""

    def __init__(
        self,
        notification_service: NotificationService,
        question_service: QuestionService,
    ) -> None:
        """Initialize list notifications use case.

        Args:
            notification_service: Notification domain service
            question_service: Question domain service (related titles)
        """
        self.notification_service = notification_service
        self.question_service = question_service

    async def execute(
        self, request: ListNotificationsRequest
    ) -> ListNotificationsResponse:
        """Execute list notifications flow.

        Args:
            request: Recipient, filter and page

        Returns:
            Notifications with the user's unread count
        """
        notifications, total, unread = await self.notification_service.list_for_user(
            UserId(UUID(request.user_id)),
            unread_only=request.unread_only,
            limit=request.limit,
            offset=(request.page - 1) * request.limit,
        )

        question_ids = list(
            {n.related_question_id for n in notifications if n.related_question_id}
        )
        questions = await self.question_service.find_by_ids(question_ids)

        items = []
        for notification in notifications:
            question = questions.get(notification.related_question_id)
            items.append(
                NotificationItem(
                    id=str(notification.id),
                    type=notification.type,
                    title=notification.title,
                    message=notification.message,
                    is_read=notification.is_read,
                    created_at=notification.created_at,
                    related_question=(
                        RelatedQuestion(id=str(question.id), title=question.title)
                        if question
                        else None
                    ),
                    related_user_id=(
                        str(notification.related_user_id)
                        if notification.related_user_id
                        else None
                    ),
                )
            )

        return ListNotificationsResponse(
            notifications=items, unread_count=unread, total=total
        )
