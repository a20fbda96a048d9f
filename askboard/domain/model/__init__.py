"""Domain model entities for Askboard."""

from askboard.domain.model.answer import Answer
from askboard.domain.model.comment import Comment
from askboard.domain.model.notification import Notification
from askboard.domain.model.question import Question
from askboard.domain.model.tag import Tag
from askboard.domain.model.user import User
from askboard.domain.model.vote import Vote

__all__ = [
    "User",
    "Question",
    "Answer",
    "Comment",
    "Vote",
    "Notification",
    "Tag",
]
