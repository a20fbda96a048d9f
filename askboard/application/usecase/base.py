"""Base use case and shared response models."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from askboard.domain.model import User
from askboard.domain.value import UserRole


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


class CamelModel(BaseModel):
    """Model serialized with camelCase keys, accepting either case on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AuthorInfo(CamelModel):
    """Author summary embedded in questions, answers and comments."""

    id: str
    name: str


class UserInfo(CamelModel):
    """Public view of a user account."""

    id: str
    name: str
    email: str
    role: UserRole
    avatar_url: str | None
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserInfo":
        return cls(
            id=str(user.id),
            name=user.name,
            email=user.email.root,
            role=user.role,
            avatar_url=user.avatar_url,
            created_at=user.created_at,
        )
