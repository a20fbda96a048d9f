"""Vote domain service."""

from datetime import datetime
from uuid import UUID, uuid4

import logfire
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError

from askboard.domain.error import BusinessRuleViolationError, NotFoundError
from askboard.domain.model.vote import Vote
from askboard.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    VoteRepository,
)
from askboard.domain.value import (
    AnswerId,
    QuestionId,
    UserId,
    VoteId,
    VoteTargetType,
    VoteType,
)

from .base import Service


class VoteResult(BaseModel):
    """Outcome of casting a vote."""

    vote_score: int
    user_vote: VoteType | None


class VoteService(Service):
    """Domain service for the vote ledger."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            question_repository: Question repository (target lookup)
            answer_repository: Answer repository (target lookup)
        """
        self.vote_repository = vote_repository
        self.question_repository = question_repository
        self.answer_repository = answer_repository

    async def _target_author(
        self, target_type: VoteTargetType, target_id: UUID
    ) -> UserId:
        if target_type == VoteTargetType.QUESTION:
            question = await self.question_repository.find_by_id(QuestionId(target_id))
            if not question:
                raise NotFoundError("Question", str(target_id))
            return question.author_id

        answer = await self.answer_repository.find_by_id(AnswerId(target_id))
        if not answer:
            raise NotFoundError("Answer", str(target_id))
        return answer.author_id

    async def cast_vote(
        self,
        user_id: UserId,
        target_type: VoteTargetType,
        target_id: UUID,
        vote_type: VoteType,
    ) -> VoteResult:
        """Cast, flip or withdraw a vote.

        No existing vote inserts one. Repeating the same direction removes
        the vote. The opposite direction flips the existing row in place.

        Args:
            user_id: Voting user
            target_type: Question or answer
            target_id: Target ID
            vote_type: Requested direction

        Returns:
            Recomputed score and the user's vote after the operation

        Raises:
            NotFoundError: If the target does not exist
            BusinessRuleViolationError: If the user authored the target
        """
        with logfire.span(
            "vote_service.cast_vote",
            user_id=str(user_id),
            target_type=target_type.value,
            target_id=str(target_id),
            vote_type=vote_type.value,
        ):
            author_id = await self._target_author(target_type, target_id)
            if author_id == user_id:
                logfire.warn("Self-vote rejected", user_id=str(user_id))
                raise BusinessRuleViolationError(
                    f"You cannot vote on your own {target_type.value.lower()}"
                )

            # Lock the existing row so lookup and write are one step
            existing = await self.vote_repository.find_by_user_and_target(
                user_id, target_type, target_id, for_update=True
            )

            user_vote: VoteType | None
            if existing is None:
                vote = Vote(
                    id=VoteId(uuid4()),
                    user_id=user_id,
                    target_type=target_type,
                    target_id=target_id,
                    vote_type=vote_type,
                    created_at=datetime.now(),
                )
                try:
                    await self.vote_repository.save(vote)
                except IntegrityError:
                    logfire.warn(
                        "Concurrent duplicate vote",
                        user_id=str(user_id),
                        target_id=str(target_id),
                    )
                    raise BusinessRuleViolationError("Vote already recorded")
                user_vote = vote_type
                logfire.info("Vote added", target_id=str(target_id))
            elif existing.vote_type == vote_type:
                await self.vote_repository.delete(existing.id)
                user_vote = None
                logfire.info("Vote withdrawn", target_id=str(target_id))
            else:
                await self.vote_repository.update_type(existing.id, vote_type)
                user_vote = vote_type
                logfire.info("Vote flipped", target_id=str(target_id))

            score = await self.vote_repository.score(target_type, target_id)
            return VoteResult(vote_score=score, user_vote=user_vote)

    async def score(self, target_type: VoteTargetType, target_id: UUID) -> int:
        """Current score of one target."""
        return await self.vote_repository.score(target_type, target_id)

    async def scores(
        self, target_type: VoteTargetType, target_ids: list[UUID]
    ) -> dict[UUID, int]:
        """Scores for a page of targets; targets without votes score 0."""
        if not target_ids:
            return {}
        found = await self.vote_repository.scores(target_type, target_ids)
        return {target_id: found.get(target_id, 0) for target_id in target_ids}

    async def user_votes(
        self,
        user_id: UserId | None,
        target_type: VoteTargetType,
        target_ids: list[UUID],
    ) -> dict[UUID, VoteType]:
        """The viewer's own votes on a set of targets."""
        if user_id is None or not target_ids:
            return {}
        votes = await self.vote_repository.find_by_user_and_targets(
            user_id, target_type, target_ids
        )
        return {vote.target_id: vote.vote_type for vote in votes}
