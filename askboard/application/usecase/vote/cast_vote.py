"""Cast vote use case."""

from uuid import UUID

from pydantic import BaseModel

from askboard.application.usecase.base import CamelModel
from askboard.domain.service import VoteService
from askboard.domain.value import UserId, VoteTargetType, VoteType


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    target_type: VoteTargetType
    target_id: UUID
    vote_type: VoteType
    user_id: str  # User ID from authenticated user


class CastVoteResponse(CamelModel):
    """Cast vote response."""

    success: bool = True
    vote_score: int
    user_vote: VoteType | None


class CastVoteUseCase:
    """Use case for voting on a question or answer."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            New score and the user's resulting vote (None after toggling off)

        Raises:
            NotFoundError: If the target does not exist
            BusinessRuleViolationError: If the user votes on their own content
        """
        result = await self.vote_service.cast_vote(
            user_id=UserId(UUID(request.user_id)),
            target_type=request.target_type,
            target_id=request.target_id,
            vote_type=request.vote_type,
        )
        return CastVoteResponse(
            vote_score=result.vote_score, user_vote=result.user_vote
        )
