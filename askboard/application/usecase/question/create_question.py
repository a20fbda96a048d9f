"""Create question use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from askboard.application.usecase.base import AuthorInfo, CamelModel
from askboard.domain.service import QuestionService, UserService
from askboard.domain.value import TagName, UserId


class CreateQuestionRequest(BaseModel):
    """Create question request."""

    title: str = Field(min_length=10, max_length=300)
    description: str = Field(min_length=20)
    tags: list[TagName] = Field(min_length=1, max_length=5)
    author_id: str  # User ID from authenticated user


class CreatedQuestion(CamelModel):
    """Question as returned right after creation."""

    id: str
    title: str
    description: str
    tags: list[str]
    author: AuthorInfo
    created_at: datetime
    answer_count: int = 0
    vote_score: int = 0


class CreateQuestionResponse(CamelModel):
    """Create question response."""

    success: bool = True
    question: CreatedQuestion


class CreateQuestionUseCase:
    """Use case for asking a question."""

    def __init__(
        self, question_service: QuestionService, user_service: UserService
    ) -> None:
        """Initialize create question use case.

        Args:
            question_service: Question domain service
            user_service: User domain service
        """
        self.question_service = question_service
        self.user_service = user_service

    async def execute(self, request: CreateQuestionRequest) -> CreateQuestionResponse:
        """Execute create question flow.

        Args:
            request: Create question request

        Returns:
            The created question
        """
        author = await self.user_service.get_by_id(UserId(UUID(request.author_id)))
        question = await self.question_service.create_question(
            author=author,
            title=request.title,
            description=request.description,
            tag_names=request.tags,
        )

        return CreateQuestionResponse(
            question=CreatedQuestion(
                id=str(question.id),
                title=question.title,
                description=question.description,
                tags=[tag.root for tag in question.tag_names],
                author=AuthorInfo(
                    id=str(question.author_id), name=question.author_name
                ),
                created_at=question.created_at,
            )
        )
