"""Create answer use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from askboard.application.usecase.base import AuthorInfo, CamelModel
from askboard.domain.model import Answer
from askboard.domain.service import AnswerService, UserService
from askboard.domain.value import QuestionId, UserId


class AnswerView(CamelModel):
    """Answer as returned by write operations."""

    id: str
    question_id: str
    content: str
    author: AuthorInfo
    is_accepted: bool
    created_at: datetime
    updated_at: datetime
    vote_score: int = 0

    @classmethod
    def from_answer(cls, answer: Answer, vote_score: int = 0) -> "AnswerView":
        return cls(
            id=str(answer.id),
            question_id=str(answer.question_id),
            content=answer.content,
            author=AuthorInfo(id=str(answer.author_id), name=answer.author_name),
            is_accepted=answer.is_accepted,
            created_at=answer.created_at,
            updated_at=answer.updated_at,
            vote_score=vote_score,
        )


class CreateAnswerRequest(BaseModel):
    """Create answer request."""

    question_id: UUID
    content: str = Field(min_length=20)
    author_id: str  # User ID from authenticated user


class CreateAnswerResponse(CamelModel):
    """Create answer response."""

    success: bool = True
    answer: AnswerView


class CreateAnswerUseCase:
    """Use case for answering a question."""

    def __init__(
        self, answer_service: AnswerService, user_service: UserService
    ) -> None:
        """Initialize create answer use case.

        Args:
            answer_service: Answer domain service
            user_service: User domain service
        """
        self.answer_service = answer_service
        self.user_service = user_service

    async def execute(self, request: CreateAnswerRequest) -> CreateAnswerResponse:
        """Execute create answer flow.

        Raises:
            NotFoundError: If question not found
        """
        author = await self.user_service.get_by_id(UserId(UUID(request.author_id)))
        answer = await self.answer_service.create_answer(
            author=author,
            question_id=QuestionId(request.question_id),
            content=request.content,
        )
        return CreateAnswerResponse(answer=AnswerView.from_answer(answer))
