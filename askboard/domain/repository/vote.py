"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence
from uuid import UUID

from askboard.domain.model.vote import Vote
from askboard.domain.value import UserId, VoteId, VoteTargetType, VoteType


class VoteRepository(ABC):
    """Repository for Vote entity.

    Scores are derived from vote rows on every read, never stored.
    """

    @abstractmethod
    async def find_by_user_and_target(
        self,
        user_id: UserId,
        target_type: VoteTargetType,
        target_id: UUID,
        for_update: bool = False,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific target.

        Args:
            user_id: The user's ID
            target_type: Question or answer
            target_id: ID of the target
            for_update: Hold a row lock until the transaction ends

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_and_targets(
        self,
        user_id: UserId,
        target_type: VoteTargetType,
        target_ids: Sequence[UUID],
    ) -> list[Vote]:
        """Find a user's votes on multiple targets (batch query).

        Args:
            user_id: The user's ID
            target_type: Question or answer
            target_ids: Targets to check

        Returns:
            The user's votes on those targets
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Insert a vote.

        Raises:
            IntegrityError: If the user already voted on the target
        """
        pass

    @abstractmethod
    async def update_type(self, vote_id: VoteId, vote_type: VoteType) -> Vote:
        """Flip the direction of an existing vote in place.

        Args:
            vote_id: The vote to update
            vote_type: New direction

        Returns:
            The updated vote
        """
        pass

    @abstractmethod
    async def delete(self, vote_id: VoteId) -> None:
        """Delete a vote.

        Args:
            vote_id: The vote to delete
        """
        pass

    @abstractmethod
    async def score(self, target_type: VoteTargetType, target_id: UUID) -> int:
        """UP count minus DOWN count for one target."""
        pass

    @abstractmethod
    async def scores(
        self, target_type: VoteTargetType, target_ids: Sequence[UUID]
    ) -> dict[UUID, int]:
        """Scores for several targets of one type.

        Targets without votes may be absent from the result.
        """
        pass
