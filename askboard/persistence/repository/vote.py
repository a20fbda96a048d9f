"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy import and_, case, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from askboard.domain.model import Vote
from askboard.domain.repository import VoteRepository
from askboard.domain.value import UserId, VoteId, VoteTargetType, VoteType
from askboard.persistence.mappers import row_to_vote, vote_to_dict
from askboard.persistence.tables import votes_table

# +1 for UP, -1 for DOWN
_vote_weight = case((votes_table.c.vote_type == VoteType.UP.value, 1), else_=-1)


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_target(
        self,
        user_id: UserId,
        target_type: VoteTargetType,
        target_id: UUID,
        for_update: bool = False,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific item."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.target_type == target_type.value,
                votes_table.c.target_id == target_id,
            )
        )
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_user_and_targets(
        self,
        user_id: UserId,
        target_type: VoteTargetType,
        target_ids: Sequence[UUID],
    ) -> List[Vote]:
        """Find a user's votes on multiple items (batch query)."""
        if not target_ids:
            return []

        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.target_type == target_type.value,
                votes_table.c.target_id.in_(target_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create).

        Runs in a savepoint so a unique_vote violation leaves the request
        transaction usable.

        Raises:
            IntegrityError: If the user already voted on the target
        """
        async with self.session.begin_nested():
            stmt = insert(votes_table).values(**vote_to_dict(vote))
            await self.session.execute(stmt)
        return vote

    async def update_type(self, vote_id: VoteId, vote_type: VoteType) -> Vote:
        """Flip a vote's direction."""
        stmt = (
            update(votes_table)
            .where(votes_table.c.id == vote_id)
            .values(vote_type=vote_type.value)
            .returning(*votes_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_vote(row._asdict())

    async def delete(self, vote_id: VoteId) -> None:
        """Delete a vote."""
        stmt = delete(votes_table).where(votes_table.c.id == vote_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def score(self, target_type: VoteTargetType, target_id: UUID) -> int:
        """Sum vote weights for one target."""
        stmt = select(func.coalesce(func.sum(_vote_weight), 0)).where(
            votes_table.c.target_type == target_type.value,
            votes_table.c.target_id == target_id,
        )
        result = await self.session.execute(stmt)
        return int(result.scalar() or 0)

    async def scores(
        self, target_type: VoteTargetType, target_ids: Sequence[UUID]
    ) -> dict[UUID, int]:
        """Sum vote weights per target with one GROUP BY query."""
        if not target_ids:
            return {}

        stmt = (
            select(votes_table.c.target_id, func.sum(_vote_weight).label("score"))
            .where(
                votes_table.c.target_type == target_type.value,
                votes_table.c.target_id.in_(target_ids),
            )
            .group_by(votes_table.c.target_id)
        )
        result = await self.session.execute(stmt)
        return {row.target_id: int(row.score) for row in result.fetchall()}
