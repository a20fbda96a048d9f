"""Create comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from askboard.application.usecase.base import AuthorInfo, CamelModel
from askboard.domain.service import CommentService, UserService
from askboard.domain.value import AnswerId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    answer_id: UUID
    content: str = Field(min_length=10)
    author_id: str  # User ID from authenticated user


class CommentView(CamelModel):
    """Created comment."""

    id: str
    answer_id: str
    content: str
    author: AuthorInfo
    created_at: datetime


class CreateCommentResponse(CamelModel):
    """Create comment response."""

    success: bool = True
    comment: CommentView


class CreateCommentUseCase:
    """Use case for commenting on an answer."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Raises:
            NotFoundError: If answer not found
        """
        author = await self.user_service.get_by_id(UserId(UUID(request.author_id)))
        comment = await self.comment_service.create_comment(
            author=author,
            answer_id=AnswerId(request.answer_id),
            content=request.content,
        )
        return CreateCommentResponse(
            comment=CommentView(
                id=str(comment.id),
                answer_id=str(comment.answer_id),
                content=comment.content,
                author=AuthorInfo(id=str(comment.author_id), name=comment.author_name),
                created_at=comment.created_at,
            )
        )
