"""Comment routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, status
from pydantic import Field

from askboard.application.usecase.auth import GetCurrentUserUseCase
from askboard.application.usecase.base import CamelModel
from askboard.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from askboard.config import Settings
from askboard.interface.api.session import require_user

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(CamelModel):
    """API request for commenting on an answer."""

    answer_id: UUID
    content: str = Field(min_length=10)


@router.post(
    "", response_model=CreateCommentResponse, status_code=status.HTTP_201_CREATED
)
async def create_comment(
    request: Request,
    body: CreateCommentAPIRequest,
    use_case: FromDishka[CreateCommentUseCase],
    current_user_use_case: FromDishka[GetCurrentUserUseCase],
    settings: FromDishka[Settings],
) -> CreateCommentResponse:
    """Comment on an answer. Requires authentication."""
    user = await require_user(request, current_user_use_case, settings)
    return await use_case.execute(
        CreateCommentRequest(
            answer_id=body.answer_id, content=body.content, author_id=user.id
        )
    )
