"""Repository interfaces for Askboard domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from askboard.domain.repository.answer import AnswerRepository, AnswerStats
from askboard.domain.repository.comment import CommentRepository
from askboard.domain.repository.notification import NotificationRepository
from askboard.domain.repository.question import QuestionRepository
from askboard.domain.repository.tag import TagRepository
from askboard.domain.repository.user import UserRepository
from askboard.domain.repository.vote import VoteRepository

__all__ = [
    "UserRepository",
    "QuestionRepository",
    "AnswerRepository",
    "AnswerStats",
    "CommentRepository",
    "VoteRepository",
    "NotificationRepository",
    "TagRepository",
]
