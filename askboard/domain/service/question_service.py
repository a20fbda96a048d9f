"""Question domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from askboard.domain.error import NotFoundError
from askboard.domain.model import Question, User
from askboard.domain.repository import QuestionRepository
from askboard.domain.value import QuestionId, QuestionSortOrder, TagName

from .base import Service
from .tag_service import TagService


class QuestionService(Service):
    """Domain service for question operations."""

    def __init__(
        self, question_repository: QuestionRepository, tag_service: TagService
    ) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
            tag_service: Tag domain service (catalog registration)
        """
        self.question_repository = question_repository
        self.tag_service = tag_service

    async def create_question(
        self,
        author: User,
        title: str,
        description: str,
        tag_names: list[TagName],
    ) -> Question:
        """Ask a question.

        Duplicate tag names are collapsed, keeping first occurrence order.

        Args:
            author: Asking user
            title: Question title
            description: HTML body
            tag_names: 1-5 tag names

        Returns:
            Created question
        """
        with logfire.span(
            "question_service.create_question",
            author_id=str(author.id),
            tags=[tag.root for tag in tag_names],
        ):
            unique_tags = list({tag.root: tag for tag in tag_names}.values())
            now = datetime.now()
            question = Question(
                id=QuestionId(uuid4()),
                title=title.strip(),
                description=description,
                author_id=author.id,
                author_name=author.name,
                tag_names=unique_tags,
                created_at=now,
                updated_at=now,
            )

            saved = await self.question_repository.save(question)
            await self.tag_service.ensure_tags(unique_tags)

            logfire.info("Question created", question_id=str(saved.id))
            return saved

    async def get_by_id(self, question_id: QuestionId) -> Question:
        """Get a question by ID.

        Raises:
            NotFoundError: If question not found
        """
        with logfire.span("question_service.get_by_id", question_id=str(question_id)):
            question = await self.question_repository.find_by_id(question_id)
            if not question:
                logfire.warn("Question not found", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))
            return question

    async def find_by_ids(
        self, question_ids: list[QuestionId]
    ) -> dict[QuestionId, Question]:
        """Batch lookup, missing IDs are left out."""
        if not question_ids:
            return {}
        return await self.question_repository.find_by_ids(question_ids)

    async def list_questions(
        self,
        search: str | None = None,
        tags: list[TagName] | None = None,
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        limit: int = 10,
        offset: int = 0,
    ) -> tuple[list[Question], int]:
        """Filter, sort and page questions.

        Returns:
            (questions on the page, total matching the filters)
        """
        tags = tags or []
        with logfire.span(
            "question_service.list_questions",
            search=search,
            tags=[tag.root for tag in tags],
            sort=sort.value,
            limit=limit,
            offset=offset,
        ):
            total = await self.question_repository.count(search=search, tags=tags)
            questions = await self.question_repository.find_all(
                search=search, tags=tags, sort=sort, limit=limit, offset=offset
            )
            logfire.info("Questions listed", count=len(questions), total=total)
            return questions, total

    async def delete_question(self, question_id: QuestionId) -> None:
        """Delete a question with its answers, comments and votes.

        Raises:
            NotFoundError: If question not found
        """
        with logfire.span(
            "question_service.delete_question", question_id=str(question_id)
        ):
            deleted = await self.question_repository.delete(question_id)
            if not deleted:
                logfire.warn(
                    "Question to delete not found", question_id=str(question_id)
                )
                raise NotFoundError("Question", str(question_id))
            logfire.info("Question deleted", question_id=str(question_id))
