"""Domain value objects for Askboard.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum
from typing import Optional

from pydantic import field_validator
from pydantic.networks import validate_email

from askboard.domain.value.common import RootValueObject


class UserRole(str, Enum):
    """Role of a user account."""

    USER = "USER"
    ADMIN = "ADMIN"


class VoteTargetType(str, Enum):
    """Type of entity that can be voted on."""

    QUESTION = "QUESTION"
    ANSWER = "ANSWER"


class VoteType(str, Enum):
    """Direction of a vote."""

    UP = "UP"
    DOWN = "DOWN"

    @property
    def weight(self) -> int:
        """Contribution of one vote to a score."""
        return 1 if self is VoteType.UP else -1


class NotificationType(str, Enum):
    """What triggered a notification."""

    ANSWER = "ANSWER"
    COMMENT = "COMMENT"
    ACCEPTED = "ACCEPTED"


class QuestionSortOrder(str, Enum):
    """Sort order for question listings."""

    NEWEST = "newest"
    OLDEST = "oldest"
    POPULAR = "popular"  # Most answers first


class TagName(RootValueObject[str]):
    """Free-form tag name attached to questions.

    Surrounding whitespace is stripped. Commas are rejected because the
    question list filter takes a comma-separated tag list.
    Examples: 'react', 'nextjs', 'machine learning'
    """

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Validate tag name format."""
        v = v.strip()
        if len(v) < 1 or len(v) > 50:
            raise ValueError("Tag name must be 1-50 characters")
        if "," in v:
            raise ValueError("Tag name must not contain commas")
        return v


class Email(RootValueObject[str]):
    """Email address, stored lowercase."""

    @field_validator("root")
    @classmethod
    def check_email(cls, v: str) -> str:
        """Validate with the same checker as ``EmailStr``."""
        _, email = validate_email(v.strip())
        return email.lower()


def parse_tag_list(raw: Optional[str]) -> list[TagName]:
    """Split a comma-separated tag filter into tag names.

    Blank entries are skipped.
    """
    if not raw:
        return []
    return [TagName(part) for part in raw.split(",") if part.strip()]
