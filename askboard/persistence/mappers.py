"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from askboard.domain.model import (
    Answer,
    Comment,
    Notification,
    Question,
    Tag,
    User,
    Vote,
)
from askboard.domain.value import (
    AnswerId,
    CommentId,
    Email,
    NotificationId,
    NotificationType,
    QuestionId,
    TagId,
    TagName,
    UserId,
    UserRole,
    VoteId,
    VoteTargetType,
    VoteType,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        name=row["name"],
        email=Email(row["email"]),
        password_hash=row["password_hash"],
        role=UserRole(row["role"]),
        avatar_url=row.get("avatar_url"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = user.model_dump()
    data["role"] = user.role.value
    return data


def row_to_question(row: Dict[str, Any]) -> Question:
    """Convert database row to Question domain model."""
    return Question(
        id=QuestionId(_uuid(row["id"])),
        title=row["title"],
        description=row["description"],
        author_id=UserId(_uuid(row["author_id"])),
        author_name=row["author_name"],
        tag_names=[TagName(name) for name in row["tag_names"]],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    """Convert Question domain model to database dict.

    TagName values dump to plain strings for the ARRAY column.
    """
    return question.model_dump()


def row_to_answer(row: Dict[str, Any]) -> Answer:
    """Convert database row to Answer domain model."""
    return Answer(
        id=AnswerId(_uuid(row["id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        author_name=row["author_name"],
        content=row["content"],
        is_accepted=row["is_accepted"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def answer_to_dict(answer: Answer) -> Dict[str, Any]:
    """Convert Answer domain model to database dict."""
    return answer.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        answer_id=AnswerId(_uuid(row["answer_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        author_name=row["author_name"],
        content=row["content"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        target_type=VoteTargetType(row["target_type"]),
        target_id=_uuid(row["target_id"]),
        vote_type=VoteType(row["vote_type"]),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    data = vote.model_dump()
    data["target_type"] = vote.target_type.value
    data["vote_type"] = vote.vote_type.value
    return data


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model."""
    related_question_id = row.get("related_question_id")
    related_user_id = row.get("related_user_id")
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        type=NotificationType(row["type"]),
        title=row["title"],
        message=row["message"],
        related_question_id=(
            QuestionId(_uuid(related_question_id)) if related_question_id else None
        ),
        related_user_id=UserId(_uuid(related_user_id)) if related_user_id else None,
        is_read=row["is_read"],
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict."""
    data = notification.model_dump()
    data["type"] = notification.type.value
    return data


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model."""
    return Tag(
        id=TagId(_uuid(row["id"])),
        name=TagName(row["name"]),
        description=row.get("description"),
        created_at=row["created_at"],
    )


def tag_to_dict(tag: Tag) -> Dict[str, Any]:
    """Convert Tag domain model to database dict."""
    return tag.model_dump()
