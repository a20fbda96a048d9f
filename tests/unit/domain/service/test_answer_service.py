"""Unit tests for AnswerService."""

from uuid import uuid4

import pytest

from askboard.domain.error import NotFoundError, PermissionDeniedError
from askboard.domain.repository import (
    AnswerRepository,
    NotificationRepository,
    QuestionRepository,
)
from askboard.domain.service import AnswerService
from askboard.domain.value import AnswerId, NotificationType, QuestionId
from tests.conftest import make_answer, make_question, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _accepted_ids(answer_repo: AnswerRepository, question_id) -> set:
    answers = await answer_repo.find_by_question(question_id)
    return {answer.id for answer in answers if answer.is_accepted}


class TestCreateAnswer:
    """Tests for create_answer method."""

    @pytest.mark.asyncio
    async def test_create_answer_notifies_question_author(self, unit_env):
        """Answering someone else's question should notify its author."""
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        question_repo = await unit_env.get(QuestionRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        asker = make_user("Asker")
        answerer = make_user("Answerer")
        question = await question_repo.save(make_question(asker))

        # Act
        answer = await answer_service.create_answer(
            answerer, question.id, "<p>Here is a detailed answer.</p>"
        )

        # Assert
        assert answer.question_id == question.id
        assert answer.is_accepted is False
        assert answer.author_name == "Answerer"
        notifications = await notification_repo.find_by_user(asker.id)
        assert len(notifications) == 1
        assert notifications[0].type == NotificationType.ANSWER
        assert notifications[0].title == "New answer to your question"
        assert notifications[0].related_question_id == question.id
        assert notifications[0].related_user_id == answerer.id

    @pytest.mark.asyncio
    async def test_answering_own_question_sends_no_notification(self, unit_env):
        """Self-notifications are suppressed."""
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        question_repo = await unit_env.get(QuestionRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        asker = make_user("Asker")
        question = await question_repo.save(make_question(asker))

        # Act
        await answer_service.create_answer(
            asker, question.id, "<p>Answering my own question here.</p>"
        )

        # Assert
        assert await notification_repo.count_by_user(asker.id) == 0

    @pytest.mark.asyncio
    async def test_answer_to_missing_question_raises(self, unit_env):
        """Answering a non-existent question should raise NotFoundError."""
        # Arrange
        answer_service = await unit_env.get(AnswerService)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Question not found"):
            await answer_service.create_answer(
                make_user(), QuestionId(uuid4()), "<p>Nobody will read this.</p>"
            )


class TestSetAccepted:
    """Tests for set_accepted method."""

    @pytest.mark.asyncio
    async def test_accepting_second_answer_unaccepts_first(self, unit_env):
        """Accepting R1 then R2 should leave exactly R2 accepted."""
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        asker = make_user("Asker")
        question = await question_repo.save(make_question(asker))
        first = await answer_repo.save(make_answer(question, make_user("One")))
        second = await answer_repo.save(
            make_answer(question, make_user("Two"), minutes=1)
        )

        # Act
        await answer_service.set_accepted(first.id, True, asker)
        await answer_service.set_accepted(second.id, True, asker)

        # Assert
        assert await _accepted_ids(answer_repo, question.id) == {second.id}

    @pytest.mark.asyncio
    async def test_unaccept_clears_flag(self, unit_env):
        """Unaccepting the accepted answer leaves none accepted."""
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        asker = make_user("Asker")
        question = await question_repo.save(make_question(asker))
        answer = await answer_repo.save(
            make_answer(question, make_user("One"), is_accepted=True)
        )

        # Act
        updated = await answer_service.set_accepted(answer.id, False, asker)

        # Assert
        assert updated.is_accepted is False
        assert await _accepted_ids(answer_repo, question.id) == set()

    @pytest.mark.asyncio
    async def test_unaccept_of_non_accepted_answer_is_noop(self, unit_env):
        """Unaccepting an answer that isn't accepted keeps the other accepted."""
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        asker = make_user("Asker")
        question = await question_repo.save(make_question(asker))
        accepted = await answer_repo.save(
            make_answer(question, make_user("One"), is_accepted=True)
        )
        other = await answer_repo.save(
            make_answer(question, make_user("Two"), minutes=1)
        )

        # Act
        updated = await answer_service.set_accepted(other.id, False, asker)

        # Assert
        assert updated.is_accepted is False
        assert await _accepted_ids(answer_repo, question.id) == {accepted.id}

    @pytest.mark.asyncio
    async def test_only_question_author_can_accept(self, unit_env):
        """Anyone other than the asker should get PermissionDeniedError."""
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        answerer = make_user("Answerer")
        question = await question_repo.save(make_question(make_user("Asker")))
        answer = await answer_repo.save(make_answer(question, answerer))

        # Act & Assert
        with pytest.raises(
            PermissionDeniedError, match="Only the question author can accept"
        ):
            await answer_service.set_accepted(answer.id, True, answerer)
        assert await _accepted_ids(answer_repo, question.id) == set()

    @pytest.mark.asyncio
    async def test_accept_missing_answer_raises(self, unit_env):
        """Accepting a non-existent answer should raise NotFoundError."""
        # Arrange
        answer_service = await unit_env.get(AnswerService)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Answer not found"):
            await answer_service.set_accepted(AnswerId(uuid4()), True, make_user())

    @pytest.mark.asyncio
    async def test_accept_notifies_answer_author_once(self, unit_env):
        """Only the transition to accepted sends a notification."""
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        asker = make_user("Asker")
        answerer = make_user("Answerer")
        question = await question_repo.save(make_question(asker))
        answer = await answer_repo.save(make_answer(question, answerer))

        # Act
        await answer_service.set_accepted(answer.id, True, asker)
        await answer_service.set_accepted(answer.id, True, asker)

        # Assert
        notifications = await notification_repo.find_by_user(answerer.id)
        assert len(notifications) == 1
        assert notifications[0].type == NotificationType.ACCEPTED
        assert notifications[0].title == "Your answer was accepted!"
        assert "was accepted by Asker" in notifications[0].message

    @pytest.mark.asyncio
    async def test_accepting_own_answer_sends_no_notification(self, unit_env):
        """Accepting your own answer to your own question notifies nobody."""
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        asker = make_user("Asker")
        question = await question_repo.save(make_question(asker))
        answer = await answer_repo.save(make_answer(question, asker))

        # Act
        updated = await answer_service.set_accepted(answer.id, True, asker)

        # Assert
        assert updated.is_accepted is True
        assert await notification_repo.count_by_user(asker.id) == 0


class TestAnswerStats:
    """Tests for stats_for_questions method."""

    @pytest.mark.asyncio
    async def test_stats_count_answers_and_accepted_flag(self, unit_env):
        """Stats report answer counts and accepted flags, zero-filled."""
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        asker = make_user("Asker")
        answered = await question_repo.save(make_question(asker))
        empty = await question_repo.save(make_question(asker, minutes=1))
        await answer_repo.save(make_answer(answered, make_user(), is_accepted=True))
        await answer_repo.save(make_answer(answered, make_user(), minutes=2))

        # Act
        stats = await answer_service.stats_for_questions([answered.id, empty.id])

        # Assert
        assert stats[answered.id].answer_count == 2
        assert stats[answered.id].has_accepted_answer is True
        assert stats[empty.id].answer_count == 0
        assert stats[empty.id].has_accepted_answer is False
