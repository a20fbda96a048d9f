"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from askboard.domain.error import NotFoundError
from askboard.domain.repository import (
    AnswerRepository,
    NotificationRepository,
    QuestionRepository,
)
from askboard.domain.service import CommentService
from askboard.domain.value import AnswerId, NotificationType
from tests.conftest import make_answer, make_question, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_comment_notifies_answer_author(self, unit_env):
        """Commenting on an answer notifies whoever wrote the answer."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        asker = make_user("Asker")
        answerer = make_user("Answerer")
        question = await question_repo.save(make_question(asker))
        answer = await answer_repo.save(make_answer(question, answerer))

        # Act
        comment = await comment_service.create_comment(
            make_user("Commenter"), answer.id, "Could you add an example?"
        )

        # Assert
        assert comment.answer_id == answer.id
        assert comment.author_name == "Commenter"
        answerer_notes = await notification_repo.find_by_user(answerer.id)
        assert [n.type for n in answerer_notes] == [NotificationType.COMMENT]
        assert await notification_repo.count_by_user(asker.id) == 0

    @pytest.mark.asyncio
    async def test_comment_on_missing_answer_raises(self, unit_env):
        """Commenting on a non-existent answer should raise NotFoundError."""
        # Arrange
        comment_service = await unit_env.get(CommentService)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Answer not found"):
            await comment_service.create_comment(
                make_user(), AnswerId(uuid4()), "This goes nowhere at all."
            )


class TestCommentsByAnswer:
    """Tests for comments_by_answer method."""

    @pytest.mark.asyncio
    async def test_groups_comments_and_keeps_empty_answers(self, unit_env):
        """Every requested answer gets a list, oldest comment first."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        question = await question_repo.save(make_question(make_user()))
        busy = await answer_repo.save(make_answer(question, make_user()))
        quiet = await answer_repo.save(make_answer(question, make_user(), minutes=1))
        first = await comment_service.create_comment(
            make_user(), busy.id, "First comment on this."
        )
        second = await comment_service.create_comment(
            make_user(), busy.id, "Second comment on this."
        )

        # Act
        grouped = await comment_service.comments_by_answer([busy.id, quiet.id])

        # Assert
        assert [c.id for c in grouped[busy.id]] == [first.id, second.id]
        assert grouped[quiet.id] == []
