"""Admin moderation routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request

from askboard.application.usecase.auth import GetCurrentUserUseCase
from askboard.application.usecase.moderation import (
    DeleteQuestionRequest,
    DeleteQuestionResponse,
    DeleteQuestionUseCase,
    DeleteUserRequest,
    DeleteUserResponse,
    DeleteUserUseCase,
)
from askboard.config import Settings
from askboard.interface.api.session import require_user

router = APIRouter(prefix="/moderation", tags=["moderation"], route_class=DishkaRoute)


@router.delete("/questions/{question_id}", response_model=DeleteQuestionResponse)
async def delete_question(
    question_id: UUID,
    request: Request,
    use_case: FromDishka[DeleteQuestionUseCase],
    current_user_use_case: FromDishka[GetCurrentUserUseCase],
    settings: FromDishka[Settings],
) -> DeleteQuestionResponse:
    """Delete a question and everything under it. Admin only."""
    user = await require_user(request, current_user_use_case, settings)
    return await use_case.execute(
        DeleteQuestionRequest(question_id=question_id, admin_id=user.id)
    )


@router.delete("/users/{user_id}", response_model=DeleteUserResponse)
async def delete_user(
    user_id: UUID,
    request: Request,
    use_case: FromDishka[DeleteUserUseCase],
    current_user_use_case: FromDishka[GetCurrentUserUseCase],
    settings: FromDishka[Settings],
) -> DeleteUserResponse:
    """Delete a user and all their content. Admin only, never yourself."""
    user = await require_user(request, current_user_use_case, settings)
    return await use_case.execute(DeleteUserRequest(user_id=user_id, admin_id=user.id))
