"""Answer routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, status
from pydantic import Field

from askboard.application.usecase.answer import (
    CreateAnswerRequest,
    CreateAnswerResponse,
    CreateAnswerUseCase,
    SetAcceptedRequest,
    SetAcceptedResponse,
    SetAcceptedUseCase,
)
from askboard.application.usecase.auth import GetCurrentUserUseCase
from askboard.application.usecase.base import CamelModel
from askboard.config import Settings
from askboard.interface.api.session import require_user

router = APIRouter(prefix="/answers", tags=["answers"], route_class=DishkaRoute)


class CreateAnswerAPIRequest(CamelModel):
    """API request for answering a question."""

    question_id: UUID
    content: str = Field(min_length=20)


class SetAcceptedAPIRequest(CamelModel):
    """API request for accepting or unaccepting an answer."""

    is_accepted: bool


@router.post(
    "", response_model=CreateAnswerResponse, status_code=status.HTTP_201_CREATED
)
async def create_answer(
    request: Request,
    body: CreateAnswerAPIRequest,
    use_case: FromDishka[CreateAnswerUseCase],
    current_user_use_case: FromDishka[GetCurrentUserUseCase],
    settings: FromDishka[Settings],
) -> CreateAnswerResponse:
    """Answer a question. Requires authentication."""
    user = await require_user(request, current_user_use_case, settings)
    return await use_case.execute(
        CreateAnswerRequest(
            question_id=body.question_id, content=body.content, author_id=user.id
        )
    )


@router.patch("/{answer_id}", response_model=SetAcceptedResponse)
async def set_accepted(
    answer_id: UUID,
    request: Request,
    body: SetAcceptedAPIRequest,
    use_case: FromDishka[SetAcceptedUseCase],
    current_user_use_case: FromDishka[GetCurrentUserUseCase],
    settings: FromDishka[Settings],
) -> SetAcceptedResponse:
    """Accept or unaccept an answer. Only the question author may do this."""
    user = await require_user(request, current_user_use_case, settings)
    return await use_case.execute(
        SetAcceptedRequest(
            answer_id=answer_id, is_accepted=body.is_accepted, user_id=user.id
        )
    )
