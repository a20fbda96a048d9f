"""PostgreSQL implementation of Answer repository."""

from datetime import datetime
from typing import Optional, Sequence

from sqlalchemy import desc, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from askboard.domain.model import Answer
from askboard.domain.repository import AnswerRepository, AnswerStats
from askboard.domain.value import AnswerId, QuestionId
from askboard.persistence.mappers import answer_to_dict, row_to_answer
from askboard.persistence.tables import answers_table


class PostgresAnswerRepository(AnswerRepository):
    """PostgreSQL implementation of AnswerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        stmt = select(answers_table).where(answers_table.c.id == answer_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_answer(dict(row)) if row else None

    async def find_by_question(self, question_id: QuestionId) -> list[Answer]:
        """Find all answers to a question, accepted first then oldest first."""
        stmt = (
            select(answers_table)
            .where(answers_table.c.question_id == question_id)
            .order_by(desc(answers_table.c.is_accepted), answers_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_answer(dict(row)) for row in result.mappings().all()]

    async def stats_for_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> dict[QuestionId, AnswerStats]:
        """Aggregate answer counts with one GROUP BY query."""
        if not question_ids:
            return {}

        stmt = (
            select(
                answers_table.c.question_id,
                func.count().label("answer_count"),
                func.bool_or(answers_table.c.is_accepted).label("has_accepted"),
            )
            .where(answers_table.c.question_id.in_(question_ids))
            .group_by(answers_table.c.question_id)
        )
        result = await self.session.execute(stmt)
        return {
            QuestionId(row.question_id): AnswerStats(
                answer_count=row.answer_count,
                has_accepted_answer=bool(row.has_accepted),
            )
            for row in result.fetchall()
        }

    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create or update)."""
        answer_dict = answer_to_dict(answer)

        existing = await self.find_by_id(answer.id)
        if existing:
            stmt = (
                answers_table.update()
                .where(answers_table.c.id == answer.id)
                .values(**answer_dict)
            )
        else:
            stmt = answers_table.insert().values(**answer_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return answer

    async def clear_accepted(
        self, question_id: QuestionId, exclude: Optional[AnswerId] = None
    ) -> int:
        """Bulk-unaccept a question's accepted answers."""
        stmt = update(answers_table).where(
            answers_table.c.question_id == question_id,
            answers_table.c.is_accepted.is_(True),
        )
        if exclude is not None:
            stmt = stmt.where(answers_table.c.id != exclude)
        stmt = stmt.values(is_accepted=False, updated_at=datetime.now())

        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def set_accepted(
        self, answer_id: AnswerId, is_accepted: bool
    ) -> Optional[Answer]:
        """Set the accepted flag and return the updated row."""
        stmt = (
            update(answers_table)
            .where(answers_table.c.id == answer_id)
            .values(is_accepted=is_accepted, updated_at=datetime.now())
            .returning(*answers_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_answer(dict(row)) if row else None
