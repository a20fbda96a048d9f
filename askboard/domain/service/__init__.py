"""Domain services."""

from .answer_service import AnswerService
from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .notification_service import NotificationService
from .question_service import QuestionService
from .tag_service import TagService, TagUsage
from .user_service import UserService
from .vote_service import VoteResult, VoteService

__all__ = [
    "AnswerService",
    "CommentService",
    "JWTService",
    "NotificationService",
    "QuestionService",
    "Service",
    "TagService",
    "TagUsage",
    "UserService",
    "VoteResult",
    "VoteService",
]
