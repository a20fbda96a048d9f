"""Notification entity.

Notifications are written as a side effect of answers, comments and
acceptances. They never trigger anything themselves; the only mutation
after creation is marking them read.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from askboard.domain.model.common import DomainModel
from askboard.domain.value import NotificationId, NotificationType, QuestionId, UserId


class Notification(DomainModel):
    """User-facing event record."""

    id: NotificationId
    user_id: UserId  # Recipient
    type: NotificationType
    title: str = Field(min_length=1, max_length=200)
    message: str
    related_question_id: Optional[QuestionId] = None
    related_user_id: Optional[UserId] = None
    is_read: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
