"""Notification routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request
from pydantic import Field

from askboard.application.usecase.auth import GetCurrentUserUseCase
from askboard.application.usecase.base import CamelModel
from askboard.application.usecase.notification import (
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    MarkReadRequest,
    MarkReadResponse,
    MarkReadUseCase,
)
from askboard.config import Settings
from askboard.interface.api.session import require_user

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


class MarkReadAPIRequest(CamelModel):
    """API request for marking notifications read."""

    mark_all_as_read: bool = False
    notification_ids: list[UUID] | None = Field(default=None)


@router.get("", response_model=ListNotificationsResponse)
async def list_notifications(
    request: Request,
    use_case: FromDishka[ListNotificationsUseCase],
    current_user_use_case: FromDishka[GetCurrentUserUseCase],
    settings: FromDishka[Settings],
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    unread_only: bool = Query(default=False, alias="unreadOnly"),
) -> ListNotificationsResponse:
    """List the current user's notifications, newest first."""
    user = await require_user(request, current_user_use_case, settings)
    return await use_case.execute(
        ListNotificationsRequest(
            user_id=user.id, unread_only=unread_only, page=page, limit=limit
        )
    )


@router.patch("", response_model=MarkReadResponse)
async def mark_read(
    request: Request,
    body: MarkReadAPIRequest,
    use_case: FromDishka[MarkReadUseCase],
    current_user_use_case: FromDishka[GetCurrentUserUseCase],
    settings: FromDishka[Settings],
) -> MarkReadResponse:
    """Mark all or selected notifications as read."""
    user = await require_user(request, current_user_use_case, settings)
    return await use_case.execute(
        MarkReadRequest(
            user_id=user.id,
            mark_all=body.mark_all_as_read,
            notification_ids=body.notification_ids,
        )
    )
