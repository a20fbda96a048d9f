"""In-memory vote repository for testing."""

from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from askboard.domain.model.vote import Vote
from askboard.domain.repository.vote import VoteRepository
from askboard.domain.value import UserId, VoteId, VoteTargetType, VoteType

from .store import InMemoryStore


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_by_user_and_target(
        self,
        user_id: UserId,
        target_type: VoteTargetType,
        target_id: UUID,
        for_update: bool = False,
    ) -> Optional[Vote]:
        """Find a vote by user and target."""
        for vote in self.store.votes.values():
            if (
                vote.user_id == user_id
                and vote.target_type == target_type
                and vote.target_id == target_id
            ):
                return vote
        return None

    async def find_by_user_and_targets(
        self,
        user_id: UserId,
        target_type: VoteTargetType,
        target_ids: Sequence[UUID],
    ) -> list[Vote]:
        """Find a user's votes on multiple items (batch query)."""
        wanted = set(target_ids)
        return [
            v
            for v in self.store.votes.values()
            if v.user_id == user_id
            and v.target_type == target_type
            and v.target_id in wanted
        ]

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If vote already exists (duplicate)
        """
        existing = await self.find_by_user_and_target(
            vote.user_id, vote.target_type, vote.target_id
        )
        if existing:
            raise IntegrityError("Duplicate vote", None, Exception())

        self.store.votes[vote.id] = vote
        return vote

    async def update_type(self, vote_id: VoteId, vote_type: VoteType) -> Vote:
        """Flip a vote's direction."""
        updated = self.store.votes[vote_id].model_copy(update={"vote_type": vote_type})
        self.store.votes[vote_id] = updated
        return updated

    async def delete(self, vote_id: VoteId) -> None:
        """Delete a vote by ID."""
        self.store.votes.pop(vote_id, None)

    async def score(self, target_type: VoteTargetType, target_id: UUID) -> int:
        """Sum vote weights for one target."""
        return sum(
            v.vote_type.weight
            for v in self.store.votes.values()
            if v.target_type == target_type and v.target_id == target_id
        )

    async def scores(
        self, target_type: VoteTargetType, target_ids: Sequence[UUID]
    ) -> dict[UUID, int]:
        """Sum vote weights per target."""
        wanted = set(target_ids)
        result: dict[UUID, int] = {}
        for vote in self.store.votes.values():
            if vote.target_type == target_type and vote.target_id in wanted:
                result[vote.target_id] = (
                    result.get(vote.target_id, 0) + vote.vote_type.weight
                )
        return result
