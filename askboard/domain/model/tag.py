"""Tag catalog entry."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from askboard.domain.model.common import DomainModel
from askboard.domain.value import TagId, TagName


class Tag(DomainModel):
    """Explicit tag catalog entry.

    Independent of the tag names stored on questions; the two are merged
    by name when tags are listed.
    """

    id: TagId
    name: TagName
    description: Optional[str] = Field(default=None, max_length=200)
    created_at: datetime = Field(default_factory=datetime.now)
