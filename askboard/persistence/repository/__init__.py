"""PostgreSQL repository implementations."""

from askboard.persistence.repository.answer import PostgresAnswerRepository
from askboard.persistence.repository.comment import PostgresCommentRepository
from askboard.persistence.repository.notification import (
    PostgresNotificationRepository,
)
from askboard.persistence.repository.question import PostgresQuestionRepository
from askboard.persistence.repository.tag import PostgresTagRepository
from askboard.persistence.repository.user import PostgresUserRepository
from askboard.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresQuestionRepository",
    "PostgresAnswerRepository",
    "PostgresCommentRepository",
    "PostgresVoteRepository",
    "PostgresNotificationRepository",
    "PostgresTagRepository",
]
