"""Unit tests for VoteService."""

from uuid import uuid4

import pytest

from askboard.domain.error import BusinessRuleViolationError, NotFoundError
from askboard.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    VoteRepository,
)
from askboard.domain.service import VoteService
from askboard.domain.value import VoteTargetType, VoteType
from tests.conftest import make_answer, make_question, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestCastVote:
    """Tests for cast_vote method."""

    @pytest.mark.asyncio
    async def test_first_vote_is_recorded(self, unit_env):
        """A first UP vote should score +1 and report the user's vote."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question(make_user("Author")))
        voter = make_user("Voter")

        # Act
        result = await vote_service.cast_vote(
            voter.id, VoteTargetType.QUESTION, question.id, VoteType.UP
        )

        # Assert
        assert result.vote_score == 1
        assert result.user_vote == VoteType.UP

    @pytest.mark.asyncio
    async def test_same_direction_twice_withdraws_vote(self, unit_env):
        """UP then UP again should leave no vote and a score of 0."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question(make_user("Author")))
        voter = make_user("Voter")
        await vote_service.cast_vote(
            voter.id, VoteTargetType.QUESTION, question.id, VoteType.UP
        )

        # Act
        result = await vote_service.cast_vote(
            voter.id, VoteTargetType.QUESTION, question.id, VoteType.UP
        )

        # Assert
        assert result.vote_score == 0
        assert result.user_vote is None
        stored = await vote_repo.find_by_user_and_target(
            voter.id, VoteTargetType.QUESTION, question.id
        )
        assert stored is None

    @pytest.mark.asyncio
    async def test_opposite_direction_flips_vote_in_place(self, unit_env):
        """UP then DOWN should keep one vote row, now DOWN."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question(make_user("Author")))
        voter = make_user("Voter")
        await vote_service.cast_vote(
            voter.id, VoteTargetType.QUESTION, question.id, VoteType.UP
        )
        original = await vote_repo.find_by_user_and_target(
            voter.id, VoteTargetType.QUESTION, question.id
        )

        # Act
        result = await vote_service.cast_vote(
            voter.id, VoteTargetType.QUESTION, question.id, VoteType.DOWN
        )

        # Assert
        assert result.vote_score == -1
        assert result.user_vote == VoteType.DOWN
        flipped = await vote_repo.find_by_user_and_target(
            voter.id, VoteTargetType.QUESTION, question.id
        )
        assert flipped.id == original.id
        assert flipped.vote_type == VoteType.DOWN

    @pytest.mark.asyncio
    async def test_score_sums_votes_from_several_users(self, unit_env):
        """Score should be the number of UP votes minus DOWN votes."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        question = await question_repo.save(make_question(make_user("Author")))
        answer = await answer_repo.save(make_answer(question, make_user("Answerer")))

        # Act
        for vote_type in (VoteType.UP, VoteType.UP, VoteType.DOWN):
            result = await vote_service.cast_vote(
                make_user().id, VoteTargetType.ANSWER, answer.id, vote_type
            )

        # Assert
        assert result.vote_score == 1
        assert await vote_service.score(VoteTargetType.ANSWER, answer.id) == 1

    @pytest.mark.asyncio
    async def test_self_vote_on_question_is_rejected(self, unit_env):
        """Voting on your own question should raise."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        question_repo = await unit_env.get(QuestionRepository)
        author = make_user("Author")
        question = await question_repo.save(make_question(author))

        # Act & Assert
        with pytest.raises(
            BusinessRuleViolationError, match="cannot vote on your own question"
        ):
            await vote_service.cast_vote(
                author.id, VoteTargetType.QUESTION, question.id, VoteType.UP
            )

    @pytest.mark.asyncio
    async def test_self_vote_on_answer_is_rejected(self, unit_env):
        """Voting on your own answer should raise."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        answerer = make_user("Answerer")
        question = await question_repo.save(make_question(make_user("Author")))
        answer = await answer_repo.save(make_answer(question, answerer))

        # Act & Assert
        with pytest.raises(
            BusinessRuleViolationError, match="cannot vote on your own answer"
        ):
            await vote_service.cast_vote(
                answerer.id, VoteTargetType.ANSWER, answer.id, VoteType.DOWN
            )

    @pytest.mark.asyncio
    async def test_vote_on_missing_target_raises_not_found(self, unit_env):
        """Voting on a non-existent answer should raise NotFoundError."""
        # Arrange
        vote_service = await unit_env.get(VoteService)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Answer not found"):
            await vote_service.cast_vote(
                make_user().id, VoteTargetType.ANSWER, uuid4(), VoteType.UP
            )


class TestVoteQueries:
    """Tests for score and user vote lookups."""

    @pytest.mark.asyncio
    async def test_scores_fill_missing_targets_with_zero(self, unit_env):
        """Targets without votes should score 0."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        question_repo = await unit_env.get(QuestionRepository)
        voted = await question_repo.save(make_question(make_user("Author")))
        unvoted = await question_repo.save(make_question(make_user("Other")))
        await vote_service.cast_vote(
            make_user().id, VoteTargetType.QUESTION, voted.id, VoteType.DOWN
        )

        # Act
        scores = await vote_service.scores(
            VoteTargetType.QUESTION, [voted.id, unvoted.id]
        )

        # Assert
        assert scores == {voted.id: -1, unvoted.id: 0}

    @pytest.mark.asyncio
    async def test_user_votes_without_viewer_is_empty(self, unit_env):
        """Anonymous viewers have no votes."""
        # Arrange
        vote_service = await unit_env.get(VoteService)

        # Act
        votes = await vote_service.user_votes(
            None, VoteTargetType.QUESTION, [uuid4()]
        )

        # Assert
        assert votes == {}
