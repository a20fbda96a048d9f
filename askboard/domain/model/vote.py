"""Vote entity."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from askboard.domain.model.common import DomainModel
from askboard.domain.value import UserId, VoteId, VoteTargetType, VoteType


class Vote(DomainModel):
    """Vote on a question or answer.

    Business rules:
    - One vote per user per target (enforced by database unique constraint)
    - Repeating the same direction removes the vote
    - Voting the other direction flips this row in place
    - Users never vote on their own content
    """

    id: VoteId
    user_id: UserId
    target_type: VoteTargetType
    target_id: UUID  # QuestionId or AnswerId
    vote_type: VoteType
    created_at: datetime = Field(default_factory=datetime.now)
