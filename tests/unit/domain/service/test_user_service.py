"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from askboard.domain.error import (
    AuthenticationError,
    BusinessRuleViolationError,
    NotFoundError,
)
from askboard.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    UserRepository,
)
from askboard.domain.service import UserService
from askboard.domain.value import Email, UserId, UserRole
from tests.conftest import make_answer, make_question, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestRegister:
    """Tests for register method."""

    @pytest.mark.asyncio
    async def test_register_hashes_password(self, unit_env):
        """The stored hash is not the plaintext and verifies on login."""
        # Arrange
        user_service = await unit_env.get(UserService)

        # Act
        user = await user_service.register(
            "Ada Lovelace", Email("Ada@Example.com"), "secret123"
        )

        # Assert
        assert user.email.root == "ada@example.com"
        assert user.role == UserRole.USER
        assert user.password_hash != "secret123"
        authenticated = await user_service.authenticate(
            Email("ada@example.com"), "secret123"
        )
        assert authenticated.id == user.id

    @pytest.mark.asyncio
    async def test_duplicate_email_is_rejected(self, unit_env):
        """Registering the same email twice should raise."""
        # Arrange
        user_service = await unit_env.get(UserService)
        await user_service.register("First", Email("dup@example.com"), "secret123")

        # Act & Assert
        with pytest.raises(
            BusinessRuleViolationError, match="User with this email already exists"
        ):
            await user_service.register(
                "Second", Email("DUP@example.com"), "another123"
            )


class TestAuthenticate:
    """Tests for authenticate method."""

    @pytest.mark.asyncio
    async def test_wrong_password_and_unknown_email_look_the_same(self, unit_env):
        """Both failures raise the same AuthenticationError message."""
        # Arrange
        user_service = await unit_env.get(UserService)
        await user_service.register("Grace", Email("grace@example.com"), "secret123")

        # Act & Assert
        with pytest.raises(AuthenticationError, match="Invalid email or password"):
            await user_service.authenticate(Email("grace@example.com"), "wrong")
        with pytest.raises(AuthenticationError, match="Invalid email or password"):
            await user_service.authenticate(Email("nobody@example.com"), "secret123")


class TestDeleteUser:
    """Tests for delete_user method."""

    @pytest.mark.asyncio
    async def test_delete_removes_users_content(self, unit_env):
        """A deleted user's questions and answers go with them."""
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        doomed = await user_repo.save(make_user("Doomed"))
        other = await user_repo.save(make_user("Other"))
        own_question = await question_repo.save(make_question(doomed))
        other_question = await question_repo.save(make_question(other, minutes=1))
        own_answer = await answer_repo.save(make_answer(other_question, doomed))

        # Act
        await user_service.delete_user(doomed.id)

        # Assert
        assert await user_repo.find_by_id(doomed.id) is None
        assert await question_repo.find_by_id(own_question.id) is None
        assert await answer_repo.find_by_id(own_answer.id) is None
        assert await question_repo.find_by_id(other_question.id) is not None

    @pytest.mark.asyncio
    async def test_delete_missing_user_raises(self, unit_env):
        """Deleting a non-existent user should raise NotFoundError."""
        # Arrange
        user_service = await unit_env.get(UserService)

        # Act & Assert
        with pytest.raises(NotFoundError, match="User not found"):
            await user_service.delete_user(UserId(uuid4()))
