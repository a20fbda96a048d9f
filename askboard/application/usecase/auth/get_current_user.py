"""Get current user use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from askboard.application.usecase.base import CamelModel, UserInfo
from askboard.domain.error import AuthenticationError
from askboard.domain.service import JWTService, UserService
from askboard.domain.value import UserId
from askboard.util.jwt import JWTError


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token


class GetCurrentUserResponse(CamelModel):
    """Get current user response."""

    user: UserInfo


class GetCurrentUserUseCase:
    """Use case for resolving the user behind a session token."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Steps:
        1. Verify JWT token via JWT service
        2. Load user from database
        3. Return user info

        A valid token for a deleted user counts as no session.

        Args:
            request: Request with JWT token

        Returns:
            User information

        Raises:
            AuthenticationError: If the token is invalid or the user is gone
        """
        try:
            payload = self.jwt_service.verify_token(request.token)
            user_id = UserId(UUID(payload.user_id))
        except (JWTError, ValueError) as e:
            raise AuthenticationError() from e

        user = await self.user_service.find_by_id(user_id)
        if not user:
            logfire.warn("Session for deleted user", user_id=str(user_id))
            raise AuthenticationError()

        return GetCurrentUserResponse(user=UserInfo.from_user(user))
