"""Accept or unaccept an answer."""

from uuid import UUID

from pydantic import BaseModel

from askboard.application.usecase.answer.create_answer import AnswerView
from askboard.application.usecase.base import CamelModel
from askboard.domain.service import AnswerService, UserService, VoteService
from askboard.domain.value import AnswerId, UserId, VoteTargetType


class SetAcceptedRequest(BaseModel):
    """Set accepted request."""

    answer_id: UUID
    is_accepted: bool
    user_id: str  # User ID from authenticated user


class SetAcceptedResponse(CamelModel):
    """Set accepted response."""

    success: bool = True
    answer: AnswerView


class SetAcceptedUseCase:
    """Use case for the question author toggling an accepted answer."""

    def __init__(
        self,
        answer_service: AnswerService,
        user_service: UserService,
        vote_service: VoteService,
    ) -> None:
        """Initialize set accepted use case.

        Args:
            answer_service: Answer domain service
            user_service: User domain service
            vote_service: Vote domain service (score in response)
        """
        self.answer_service = answer_service
        self.user_service = user_service
        self.vote_service = vote_service

    async def execute(self, request: SetAcceptedRequest) -> SetAcceptedResponse:
        """Execute set accepted flow.

        Raises:
            NotFoundError: If answer not found
            PermissionDeniedError: If the user did not ask the question
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        answer = await self.answer_service.set_accepted(
            AnswerId(request.answer_id), request.is_accepted, user
        )
        score = await self.vote_service.score(VoteTargetType.ANSWER, answer.id)
        return SetAcceptedResponse(answer=AnswerView.from_answer(answer, score))
