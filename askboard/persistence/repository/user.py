"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import delete, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from askboard.domain.model import User
from askboard.domain.repository import UserRepository
from askboard.domain.value import Email, UserId, VoteTargetType
from askboard.persistence.mappers import row_to_user, user_to_dict
from askboard.persistence.tables import (
    answers_table,
    questions_table,
    users_table,
    votes_table,
)


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email.

        Args:
            email: Email to search for

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.email == email.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        user_dict = user_to_dict(user)

        existing = await self.find_by_id(user.id)
        if existing:
            stmt = (
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
        else:
            stmt = users_table.insert().values(**user_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return user

    async def delete(self, user_id: UserId) -> bool:
        """Delete a user.

        Foreign keys cascade to the user's questions, answers, comments,
        votes and notifications. Votes other users cast on that content
        have no foreign key and are removed first.
        """
        question_ids = select(questions_table.c.id).where(
            questions_table.c.author_id == user_id
        )
        answer_ids = select(answers_table.c.id).where(
            or_(
                answers_table.c.author_id == user_id,
                answers_table.c.question_id.in_(question_ids),
            )
        )
        await self.session.execute(
            delete(votes_table).where(
                or_(
                    (votes_table.c.target_type == VoteTargetType.QUESTION.value)
                    & votes_table.c.target_id.in_(question_ids),
                    (votes_table.c.target_type == VoteTargetType.ANSWER.value)
                    & votes_table.c.target_id.in_(answer_ids),
                )
            )
        )

        result = await self.session.execute(
            delete(users_table).where(users_table.c.id == user_id)
        )
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
