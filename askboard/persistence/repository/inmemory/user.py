"""In-memory user repository for testing."""

from typing import Optional

from askboard.domain.model import User
from askboard.domain.repository import UserRepository
from askboard.domain.value import Email, UserId

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self.store.users.get(user_id)

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by email."""
        for user in self.store.users.values():
            if user.email == email:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save a user."""
        self.store.users[user.id] = user
        return user

    async def delete(self, user_id: UserId) -> bool:
        """Delete a user with cascades."""
        return self.store.delete_user(user_id)
