"""Unit tests for the answer use cases."""

import pytest
from dishka import AsyncContainer

from askboard.application.usecase.answer import (
    CreateAnswerRequest,
    CreateAnswerUseCase,
    SetAcceptedRequest,
    SetAcceptedUseCase,
)
from askboard.domain.error import PermissionDeniedError
from askboard.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    UserRepository,
)
from tests.conftest import make_question, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestAnswerUseCases:
    """Tests for CreateAnswerUseCase and SetAcceptedUseCase."""

    @pytest.mark.asyncio
    async def test_create_then_accept(self, unit_env: AsyncContainer):
        """The asker accepts a fresh answer and gets it back accepted."""
        # Arrange
        create_answer = await unit_env.get(CreateAnswerUseCase)
        set_accepted = await unit_env.get(SetAcceptedUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        asker = await user_repo.save(make_user("Asker"))
        answerer = await user_repo.save(make_user("Answerer"))
        question = await question_repo.save(make_question(asker))

        created = await create_answer.execute(
            CreateAnswerRequest(
                question_id=question.id,
                content="<p>Wrap the call in asyncio.run().</p>",
                author_id=str(answerer.id),
            )
        )

        # Act
        result = await set_accepted.execute(
            SetAcceptedRequest(
                answer_id=created.answer.id, is_accepted=True, user_id=str(asker.id)
            )
        )

        # Assert
        assert created.answer.is_accepted is False
        assert result.answer.is_accepted is True
        assert result.answer.vote_score == 0
        assert result.model_dump(by_alias=True)["answer"]["isAccepted"] is True

    @pytest.mark.asyncio
    async def test_accept_by_answerer_is_denied(self, unit_env: AsyncContainer):
        """Only the question author may accept."""
        # Arrange
        set_accepted = await unit_env.get(SetAcceptedUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        asker = await user_repo.save(make_user("Asker"))
        answerer = await user_repo.save(make_user("Answerer"))
        question = await question_repo.save(make_question(asker))
        create_answer = await unit_env.get(CreateAnswerUseCase)
        created = await create_answer.execute(
            CreateAnswerRequest(
                question_id=question.id,
                content="<p>Wrap the call in asyncio.run().</p>",
                author_id=str(answerer.id),
            )
        )

        # Act & Assert
        with pytest.raises(PermissionDeniedError):
            await set_accepted.execute(
                SetAcceptedRequest(
                    answer_id=created.answer.id,
                    is_accepted=True,
                    user_id=str(answerer.id),
                )
            )
        answers = await answer_repo.find_by_question(question.id)
        assert not any(a.is_accepted for a in answers)
