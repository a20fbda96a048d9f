"""Comment domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from askboard.domain.error import NotFoundError
from askboard.domain.model import Comment, User
from askboard.domain.repository import (
    AnswerRepository,
    CommentRepository,
    QuestionRepository,
)
from askboard.domain.value import AnswerId, CommentId

from .base import Service
from .notification_service import NotificationService


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
        notification_service: NotificationService,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            answer_repository: Answer repository
            question_repository: Question repository (notification text)
            notification_service: Notification domain service
        """
        self.comment_repository = comment_repository
        self.answer_repository = answer_repository
        self.question_repository = question_repository
        self.notification_service = notification_service

    async def create_comment(
        self, author: User, answer_id: AnswerId, content: str
    ) -> Comment:
        """Comment on an answer and notify the answer's author.

        Args:
            author: Commenting user
            answer_id: Answer being commented on
            content: Comment text

        Returns:
            Created comment

        Raises:
            NotFoundError: If answer not found
        """
        with logfire.span(
            "comment_service.create_comment",
            answer_id=str(answer_id),
            author_id=str(author.id),
        ):
            answer = await self.answer_repository.find_by_id(answer_id)
            if not answer:
                logfire.warn("Comment on non-existent answer", answer_id=str(answer_id))
                raise NotFoundError("Answer", str(answer_id))

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                answer_id=answer_id,
                author_id=author.id,
                author_name=author.name,
                content=content,
                created_at=now,
                updated_at=now,
            )
            saved = await self.comment_repository.save(comment)
            logfire.info("Comment created", comment_id=str(saved.id))

            question = await self.question_repository.find_by_id(answer.question_id)
            if question:
                await self.notification_service.notify_new_comment(
                    question, answer, author
                )
            return saved

    async def comments_by_answer(
        self, answer_ids: list[AnswerId]
    ) -> dict[AnswerId, list[Comment]]:
        """Group comments of several answers, oldest first within each."""
        grouped: dict[AnswerId, list[Comment]] = {aid: [] for aid in answer_ids}
        if not answer_ids:
            return grouped
        for comment in await self.comment_repository.find_by_answers(answer_ids):
            grouped.setdefault(comment.answer_id, []).append(comment)
        return grouped
