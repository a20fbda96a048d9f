"""Question aggregate root."""

from datetime import datetime

from pydantic import Field

from askboard.domain.model.common import DomainModel
from askboard.domain.value import QuestionId, TagName, UserId


class Question(DomainModel):
    """Question aggregate root.

    The description is an opaque HTML blob produced by the client editor.
    Tag names are denormalized strings, not references into the tag catalog.
    The author never changes after creation.
    """

    id: QuestionId
    title: str = Field(min_length=10, max_length=300)
    description: str = Field(min_length=20)
    author_id: UserId
    author_name: str  # Denormalized from users
    tag_names: list[TagName] = Field(min_length=1, max_length=5)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
