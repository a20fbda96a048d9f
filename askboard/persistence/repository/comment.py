"""PostgreSQL implementation of Comment repository."""

from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from askboard.domain.model import Comment
from askboard.domain.repository import CommentRepository
from askboard.domain.value import AnswerId, CommentId
from askboard.persistence.mappers import comment_to_dict, row_to_comment
from askboard.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    async def find_by_answers(self, answer_ids: Sequence[AnswerId]) -> list[Comment]:
        """Find comments on several answers (batch query)."""
        if not answer_ids:
            return []

        stmt = (
            select(comments_table)
            .where(comments_table.c.answer_id.in_(answer_ids))
            .order_by(comments_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create)."""
        stmt = comments_table.insert().values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment
