"""Mark notifications read use case."""

from uuid import UUID

from pydantic import BaseModel, model_validator

from askboard.application.usecase.base import CamelModel
from askboard.domain.service import NotificationService
from askboard.domain.value import NotificationId, UserId


class MarkReadRequest(BaseModel):
    """Mark read request.

    Either mark_all is set or notification_ids lists what to mark.
    """

    user_id: str  # User ID from authenticated user
    mark_all: bool = False
    notification_ids: list[UUID] | None = None

    @model_validator(mode="after")
    def require_target(self) -> "MarkReadRequest":
        if not self.mark_all and self.notification_ids is None:
            raise ValueError("Either markAllAsRead or notificationIds is required")
        return self


class MarkReadResponse(CamelModel):
    """Mark read response."""

    success: bool = True
    updated: int


class MarkReadUseCase:
    """Use case for marking notifications as read."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize mark read use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(self, request: MarkReadRequest) -> MarkReadResponse:
        """Execute mark read flow.

        IDs that belong to other users are ignored.
        """
        ids = (
            None
            if request.mark_all
            else [NotificationId(nid) for nid in request.notification_ids or []]
        )
        updated = await self.notification_service.mark_read(
            UserId(UUID(request.user_id)), ids
        )
        return MarkReadResponse(updated=updated)
