"""Answer domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from askboard.domain.error import NotFoundError, PermissionDeniedError
from askboard.domain.model import Answer, User
from askboard.domain.repository import (
    AnswerRepository,
    AnswerStats,
    QuestionRepository,
)
from askboard.domain.value import AnswerId, QuestionId

from .base import Service
from .notification_service import NotificationService


class AnswerService(Service):
    """Domain service for answers and the one-accepted-answer rule."""

    def __init__(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
        notification_service: NotificationService,
    ) -> None:
        """Initialize answer service.

        Args:
            answer_repository: Answer repository
            question_repository: Question repository
            notification_service: Notification domain service
        """
        self.answer_repository = answer_repository
        self.question_repository = question_repository
        self.notification_service = notification_service

    async def create_answer(
        self, author: User, question_id: QuestionId, content: str
    ) -> Answer:
        """Answer a question and notify its author.

        Raises:
            NotFoundError: If question not found
        """
        with logfire.span(
            "answer_service.create_answer",
            question_id=str(question_id),
            author_id=str(author.id),
        ):
            question = await self.question_repository.find_by_id(question_id)
            if not question:
                logfire.warn(
                    "Answer to non-existent question", question_id=str(question_id)
                )
                raise NotFoundError("Question", str(question_id))

            now = datetime.now()
            answer = Answer(
                id=AnswerId(uuid4()),
                question_id=question_id,
                author_id=author.id,
                author_name=author.name,
                content=content,
                created_at=now,
                updated_at=now,
            )
            saved = await self.answer_repository.save(answer)
            logfire.info("Answer created", answer_id=str(saved.id))

            await self.notification_service.notify_new_answer(question, author)
            return saved

    async def get_by_id(self, answer_id: AnswerId) -> Answer:
        """Get an answer by ID.

        Raises:
            NotFoundError: If answer not found
        """
        with logfire.span("answer_service.get_by_id", answer_id=str(answer_id)):
            answer = await self.answer_repository.find_by_id(answer_id)
            if not answer:
                logfire.warn("Answer not found", answer_id=str(answer_id))
                raise NotFoundError("Answer", str(answer_id))
            return answer

    async def list_for_question(self, question_id: QuestionId) -> list[Answer]:
        """Answers in display order: accepted first, then oldest first."""
        return await self.answer_repository.find_by_question(question_id)

    async def stats_for_questions(
        self, question_ids: list[QuestionId]
    ) -> dict[QuestionId, AnswerStats]:
        """Answer count and accepted flag per question, zeroes filled in."""
        if not question_ids:
            return {}
        found = await self.answer_repository.stats_for_questions(question_ids)
        return {qid: found.get(qid, AnswerStats()) for qid in question_ids}

    async def set_accepted(
        self, answer_id: AnswerId, is_accepted: bool, acting_user: User
    ) -> Answer:
        """Accept or unaccept an answer.

        Accepting clears every other accepted answer of the question first,
        with the question row locked, so at most one answer stays accepted.

        Args:
            answer_id: Answer to change
            is_accepted: New flag value
            acting_user: Must be the question's author

        Returns:
            The updated answer

        Raises:
            NotFoundError: If the answer or its question is missing
            PermissionDeniedError: If the acting user didn't ask the question
        """
        with logfire.span(
            "answer_service.set_accepted",
            answer_id=str(answer_id),
            is_accepted=is_accepted,
            user_id=str(acting_user.id),
        ):
            answer = await self.answer_repository.find_by_id(answer_id)
            if not answer:
                logfire.warn("Accept on non-existent answer", answer_id=str(answer_id))
                raise NotFoundError("Answer", str(answer_id))

            question = await self.question_repository.lock(answer.question_id)
            if not question:
                raise NotFoundError("Question", str(answer.question_id))

            if question.author_id != acting_user.id:
                logfire.warn(
                    "Accept by non-author rejected",
                    answer_id=str(answer_id),
                    user_id=str(acting_user.id),
                )
                raise PermissionDeniedError(
                    "Only the question author can accept answers"
                )

            was_accepted = answer.is_accepted
            if is_accepted:
                cleared = await self.answer_repository.clear_accepted(
                    question.id, exclude=answer.id
                )
                if cleared:
                    logfire.info(
                        "Previous accepted answer cleared",
                        question_id=str(question.id),
                        cleared=cleared,
                    )

            updated = await self.answer_repository.set_accepted(answer.id, is_accepted)
            if not updated:
                raise NotFoundError("Answer", str(answer_id))

            logfire.info(
                "Answer acceptance changed",
                answer_id=str(answer_id),
                is_accepted=is_accepted,
            )

            if is_accepted and not was_accepted:
                await self.notification_service.notify_accepted(
                    question, updated, acting_user
                )
            return updated
