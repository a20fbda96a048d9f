"""Answer entity."""

from datetime import datetime

from pydantic import Field

from askboard.domain.model.common import DomainModel
from askboard.domain.value import AnswerId, QuestionId, UserId


class Answer(DomainModel):
    """Answer to a question.

    Business rules:
    - Belongs to exactly one question
    - At most one answer per question has is_accepted=True
    - Only the question author can change is_accepted
    """

    id: AnswerId
    question_id: QuestionId
    author_id: UserId
    author_name: str  # Denormalized from users
    content: str = Field(min_length=20)
    is_accepted: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
