"""User domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from askboard.config import AuthSettings
from askboard.domain.error import (
    AuthenticationError,
    BusinessRuleViolationError,
    NotFoundError,
)
from askboard.domain.model import User
from askboard.domain.repository import UserRepository
from askboard.domain.value import Email, UserId, UserRole
from askboard.util.password import check_password, hash_password

from .base import Service


class UserService(Service):
    """Domain service for user accounts and credentials."""

    def __init__(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            auth_settings: Authentication settings (bcrypt cost)
        """
        self.user_repository = user_repository
        self.auth_settings = auth_settings

    async def register(
        self,
        name: str,
        email: Email,
        password: str,
        role: UserRole = UserRole.USER,
    ) -> User:
        """Create a new account.

        Args:
            name: Display name
            email: Normalized email address
            password: Plaintext password
            role: Account role

        Returns:
            Created user

        Raises:
            BusinessRuleViolationError: If the email is already registered
        """
        with logfire.span("user_service.register", email=email.root):
            existing = await self.user_repository.find_by_email(email)
            if existing:
                logfire.warn("Duplicate registration", email=email.root)
                raise BusinessRuleViolationError(
                    "User with this email already exists"
                )

            now = datetime.now()
            user = User(
                id=UserId(uuid4()),
                name=name.strip(),
                email=email,
                password_hash=hash_password(password, self.auth_settings.bcrypt_rounds),
                role=role,
                created_at=now,
                updated_at=now,
            )
            saved = await self.user_repository.save(user)
            logfire.info("User registered", user_id=str(saved.id), role=role.value)
            return saved

    async def authenticate(self, email: Email, password: str) -> User:
        """Check credentials.

        Unknown email and wrong password are reported identically.

        Raises:
            AuthenticationError: If the credentials don't match
        """
        with logfire.span("user_service.authenticate", email=email.root):
            user = await self.user_repository.find_by_email(email)
            if not user or not check_password(password, user.password_hash):
                logfire.warn("Login failed", email=email.root)
                raise AuthenticationError("Invalid email or password")
            logfire.info("User authenticated", user_id=str(user.id))
            return user

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def find_by_id(self, user_id: UserId) -> User | None:
        """Get user by ID, None if it no longer exists."""
        return await self.user_repository.find_by_id(user_id)

    async def delete_user(self, user_id: UserId) -> None:
        """Delete a user and everything they own.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.delete_user", user_id=str(user_id)):
            deleted = await self.user_repository.delete(user_id)
            if not deleted:
                logfire.warn("User to delete not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            logfire.info("User deleted", user_id=str(user_id))
