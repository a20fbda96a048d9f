"""PostgreSQL implementation of Question repository."""

from typing import Optional, Sequence

import logfire
from sqlalchemy import delete, desc, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from askboard.domain.model import Question
from askboard.domain.repository import QuestionRepository
from askboard.domain.value import QuestionId, QuestionSortOrder, TagName, VoteTargetType
from askboard.persistence.database import LIKE_ESCAPE, contains_pattern
from askboard.persistence.mappers import question_to_dict, row_to_question
from askboard.persistence.tables import answers_table, questions_table, votes_table


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @staticmethod
    def _apply_filters(stmt, search: Optional[str], tags: Sequence[TagName]):
        """Add search and tag filters shared by find_all and count."""
        if search:
            pattern = contains_pattern(search)
            stmt = stmt.where(
                or_(
                    questions_table.c.title.ilike(pattern, escape=LIKE_ESCAPE),
                    questions_table.c.description.ilike(pattern, escape=LIKE_ESCAPE),
                )
            )
        if tags:
            # Array overlap (&&), served by the GIN index
            stmt = stmt.where(
                questions_table.c.tag_names.overlap([tag.root for tag in tags])
            )
        return stmt

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        stmt = select(questions_table).where(questions_table.c.id == question_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_question(dict(row)) if row else None

    async def find_by_ids(
        self, question_ids: Sequence[QuestionId]
    ) -> dict[QuestionId, Question]:
        """Batch lookup of questions."""
        if not question_ids:
            return {}
        stmt = select(questions_table).where(questions_table.c.id.in_(question_ids))
        result = await self.session.execute(stmt)
        questions = [row_to_question(dict(row)) for row in result.mappings().all()]
        return {question.id: question for question in questions}

    async def lock(self, question_id: QuestionId) -> Optional[Question]:
        """Load a question with SELECT ... FOR UPDATE."""
        stmt = (
            select(questions_table)
            .where(questions_table.c.id == question_id)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_question(dict(row)) if row else None

    async def find_all(
        self,
        search: Optional[str] = None,
        tags: Sequence[TagName] = (),
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Question]:
        """Find questions with filtering and pagination."""
        with logfire.span(
            "question_repository.find_all",
            search=search,
            tags=[tag.root for tag in tags],
            sort=sort.value,
            limit=limit,
            offset=offset,
        ):
            stmt = self._apply_filters(select(questions_table), search, tags)

            if sort == QuestionSortOrder.OLDEST:
                stmt = stmt.order_by(questions_table.c.created_at)
            elif sort == QuestionSortOrder.POPULAR:
                answer_count = (
                    select(func.count())
                    .select_from(answers_table)
                    .where(answers_table.c.question_id == questions_table.c.id)
                    .scalar_subquery()
                )
                stmt = stmt.order_by(
                    desc(answer_count), desc(questions_table.c.created_at)
                )
            else:
                stmt = stmt.order_by(desc(questions_table.c.created_at))

            stmt = stmt.limit(limit).offset(offset)

            result = await self.session.execute(stmt)
            questions = [row_to_question(dict(row)) for row in result.mappings().all()]
            logfire.info("Found questions", count=len(questions))
            return questions

    async def count(
        self, search: Optional[str] = None, tags: Sequence[TagName] = ()
    ) -> int:
        """Count questions matching the given filters."""
        stmt = self._apply_filters(
            select(func.count()).select_from(questions_table), search, tags
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_tag_usage(self, search: Optional[str] = None) -> dict[str, int]:
        """Count tag usage by unnesting every question's tag list."""
        tag = func.unnest(questions_table.c.tag_names).label("tag")
        inner = select(tag).select_from(questions_table).subquery()
        stmt = select(inner.c.tag, func.count().label("usage")).group_by(inner.c.tag)
        if search:
            stmt = stmt.where(
                inner.c.tag.ilike(contains_pattern(search), escape=LIKE_ESCAPE)
            )

        result = await self.session.execute(stmt)
        return {row.tag: row.usage for row in result.fetchall()}

    async def save(self, question: Question) -> Question:
        """Save a question (create or update)."""
        question_dict = question_to_dict(question)

        existing = await self.find_by_id(question.id)
        if existing:
            stmt = (
                questions_table.update()
                .where(questions_table.c.id == question.id)
                .values(**question_dict)
            )
        else:
            stmt = questions_table.insert().values(**question_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return question

    async def delete(self, question_id: QuestionId) -> bool:
        """Delete a question.

        Answers, comments and notifications go by foreign key cascade;
        votes on the question and its answers are removed here.
        """
        answer_ids = select(answers_table.c.id).where(
            answers_table.c.question_id == question_id
        )
        await self.session.execute(
            delete(votes_table).where(
                or_(
                    (votes_table.c.target_type == VoteTargetType.QUESTION.value)
                    & (votes_table.c.target_id == question_id),
                    (votes_table.c.target_type == VoteTargetType.ANSWER.value)
                    & votes_table.c.target_id.in_(answer_ids),
                )
            )
        )

        result = await self.session.execute(
            delete(questions_table).where(questions_table.c.id == question_id)
        )
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
