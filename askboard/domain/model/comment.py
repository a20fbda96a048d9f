"""Comment entity."""

from datetime import datetime

from pydantic import Field

from askboard.domain.model.common import DomainModel
from askboard.domain.value import AnswerId, CommentId, UserId


class Comment(DomainModel):
    """Comment on an answer. Comments are flat, there are no replies."""

    id: CommentId
    answer_id: AnswerId
    author_id: UserId
    author_name: str  # Denormalized from users
    content: str = Field(min_length=10)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
