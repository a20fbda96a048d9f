"""Login use case."""

from pydantic import BaseModel, EmailStr, Field

from askboard.application.usecase.base import CamelModel, UserInfo
from askboard.domain.service import JWTService, UserService
from askboard.domain.value import Email


class LoginRequest(BaseModel):
    """Login request."""

    email: EmailStr
    password: str = Field(min_length=1)


class LoginResponse(CamelModel):
    """Login response."""

    success: bool = True
    user: UserInfo
    token: str


class LoginUseCase:
    """Use case for password login."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Args:
            request: Login request

        Returns:
            Authenticated user and session token

        Raises:
            AuthenticationError: If email or password is wrong
        """
        user = await self.user_service.authenticate(
            Email(request.email), request.password
        )
        token = self.jwt_service.create_token(user)
        return LoginResponse(user=UserInfo.from_user(user), token=token)
