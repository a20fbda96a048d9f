"""User aggregate root.

Users register with email and password and carry a role that gates
moderation.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from askboard.domain.model.common import DomainModel
from askboard.domain.value import Email, UserId, UserRole


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    name: str = Field(min_length=2, max_length=100)
    email: Email
    password_hash: str
    role: UserRole = UserRole.USER
    avatar_url: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
