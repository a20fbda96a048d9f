"""PostgreSQL implementation of Tag repository."""

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from askboard.domain.model import Tag
from askboard.domain.repository import TagRepository
from askboard.domain.value import TagName
from askboard.persistence.database import LIKE_ESCAPE, contains_pattern
from askboard.persistence.mappers import row_to_tag, tag_to_dict
from askboard.persistence.tables import tags_table


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, tag: Tag) -> Tag:
        """Insert a tag, keeping the stored description unless a new one is given.

        Args:
            tag: Tag to save

        Returns:
            Saved tag
        """
        stmt = insert(tags_table).values(**tag_to_dict(tag))
        stmt = stmt.on_conflict_do_update(
            index_elements=[tags_table.c.name],
            set_={
                "description": func.coalesce(
                    stmt.excluded.description, tags_table.c.description
                )
            },
        ).returning(*tags_table.c)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_tag(dict(row)) if row else tag

    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        """Find multiple tags by names in a single query."""
        if not names:
            return []

        stmt = select(tags_table).where(
            tags_table.c.name.in_([name.root for name in names])
        )
        result = await self.session.execute(stmt)
        return [row_to_tag(dict(row)) for row in result.mappings().all()]

    async def search(self, search: Optional[str] = None, limit: int = 20) -> list[Tag]:
        """Find catalog tags ordered by name."""
        stmt = select(tags_table)
        if search:
            stmt = stmt.where(
                tags_table.c.name.ilike(contains_pattern(search), escape=LIKE_ESCAPE)
            )
        stmt = stmt.order_by(tags_table.c.name).limit(limit)

        result = await self.session.execute(stmt)
        return [row_to_tag(dict(row)) for row in result.mappings().all()]
