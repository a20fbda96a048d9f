"""Question routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request, status
from pydantic import Field

from askboard.application.usecase.auth import GetCurrentUserUseCase
from askboard.application.usecase.base import CamelModel
from askboard.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionResponse,
    CreateQuestionUseCase,
    GetQuestionRequest,
    GetQuestionResponse,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
)
from askboard.config import Settings
from askboard.domain.value import QuestionSortOrder, TagName
from askboard.interface.api.session import optional_user, require_user

router = APIRouter(prefix="/questions", tags=["questions"], route_class=DishkaRoute)


class CreateQuestionAPIRequest(CamelModel):
    """API request for asking a question."""

    title: str = Field(min_length=10, max_length=300)
    description: str = Field(min_length=20)
    tags: list[TagName] = Field(min_length=1, max_length=5)


@router.get("", response_model=ListQuestionsResponse)
async def list_questions(
    use_case: FromDishka[ListQuestionsUseCase],
    search: str | None = None,
    tags: str | None = Query(default=None, description="Comma-separated tag names"),
    sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
) -> ListQuestionsResponse:
    """List questions.

    Example:
        GET /questions?tags=react,nextjs&sort=popular&page=1&limit=10
    """
    with logfire.span("api.list_questions", search=search, tags=tags, sort=sort.value):
        return await use_case.execute(
            ListQuestionsRequest(
                search=search, tags=tags, sort=sort, page=page, limit=limit
            )
        )


@router.post(
    "", response_model=CreateQuestionResponse, status_code=status.HTTP_201_CREATED
)
async def create_question(
    request: Request,
    body: CreateQuestionAPIRequest,
    use_case: FromDishka[CreateQuestionUseCase],
    current_user_use_case: FromDishka[GetCurrentUserUseCase],
    settings: FromDishka[Settings],
) -> CreateQuestionResponse:
    """Ask a question. Requires authentication."""
    user = await require_user(request, current_user_use_case, settings)
    return await use_case.execute(
        CreateQuestionRequest(
            title=body.title,
            description=body.description,
            tags=body.tags,
            author_id=user.id,
        )
    )


@router.get("/{question_id}", response_model=GetQuestionResponse)
async def get_question(
    question_id: UUID,
    request: Request,
    use_case: FromDishka[GetQuestionUseCase],
    current_user_use_case: FromDishka[GetCurrentUserUseCase],
    settings: FromDishka[Settings],
) -> GetQuestionResponse:
    """Get a question with its answers and comments.

    Logged-in viewers also get their own votes.
    """
    viewer = await optional_user(request, current_user_use_case, settings)
    return await use_case.execute(
        GetQuestionRequest(
            question_id=str(question_id), viewer_id=viewer.id if viewer else None
        )
    )
