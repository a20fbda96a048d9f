"""Domain value objects for Askboard."""

from askboard.domain.value.identifiers import (
    AnswerId,
    CommentId,
    NotificationId,
    QuestionId,
    TagId,
    UserId,
    VoteId,
)
from askboard.domain.value.types import (
    Email,
    NotificationType,
    QuestionSortOrder,
    TagName,
    UserRole,
    VoteTargetType,
    VoteType,
    parse_tag_list,
)

__all__ = [
    # Identifiers
    "UserId",
    "QuestionId",
    "AnswerId",
    "CommentId",
    "VoteId",
    "NotificationId",
    "TagId",
    # Types
    "Email",
    "NotificationType",
    "QuestionSortOrder",
    "TagName",
    "UserRole",
    "VoteTargetType",
    "VoteType",
    "parse_tag_list",
]
