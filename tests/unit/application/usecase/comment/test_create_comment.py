"""Unit tests for CreateCommentUseCase."""

from uuid import uuid4

import pytest
from dishka import AsyncContainer
from pydantic import ValidationError

from askboard.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from askboard.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    UserRepository,
)
from tests.conftest import make_answer, make_question, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_comment_returns_author(self, unit_env: AsyncContainer):
        """The response names the commenting user."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        commenter = await user_repo.save(make_user("Commenter"))
        question = await question_repo.save(make_question(make_user()))
        answer = await answer_repo.save(make_answer(question, make_user()))

        # Act
        result = await use_case.execute(
            CreateCommentRequest(
                answer_id=answer.id,
                content="Worked for me, thanks!",
                author_id=str(commenter.id),
            )
        )

        # Assert
        assert result.success is True
        assert result.comment.answer_id == str(answer.id)
        assert result.comment.author.name == "Commenter"

    def test_short_comment_is_rejected(self):
        """Comments need at least ten characters."""
        with pytest.raises(ValidationError):
            CreateCommentRequest(
                answer_id=uuid4(), content="too short", author_id="x"
            )
