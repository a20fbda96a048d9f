"""Admin question deletion use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from askboard.application.usecase.base import CamelModel
from askboard.domain.error import PermissionDeniedError
from askboard.domain.service import QuestionService, UserService
from askboard.domain.value import QuestionId, UserId


class DeleteQuestionRequest(BaseModel):
    """Delete question request."""

    question_id: UUID
    admin_id: str  # User ID from authenticated user


class DeleteQuestionResponse(CamelModel):
    """Delete question response."""

    success: bool = True


class DeleteQuestionUseCase:
    """Use case for an admin removing a question."""

    def __init__(
        self, question_service: QuestionService, user_service: UserService
    ) -> None:
        """Initialize delete question use case.

        Args:
            question_service: Question domain service
            user_service: User domain service
        """
        self.question_service = question_service
        self.user_service = user_service

    async def execute(self, request: DeleteQuestionRequest) -> DeleteQuestionResponse:
        """Execute delete question flow.

        Raises:
            PermissionDeniedError: If the user is not an admin
            NotFoundError: If question not found
        """
        admin = await self.user_service.get_by_id(UserId(UUID(request.admin_id)))
        if not admin.is_admin:
            logfire.warn("Non-admin moderation attempt", user_id=str(admin.id))
            raise PermissionDeniedError("Admin access required")

        await self.question_service.delete_question(QuestionId(request.question_id))
        return DeleteQuestionResponse()
