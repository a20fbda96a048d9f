"""Register use case."""

from pydantic import BaseModel, EmailStr, Field

from askboard.application.usecase.base import CamelModel, UserInfo
from askboard.domain.service import JWTService, UserService
from askboard.domain.value import Email


class RegisterRequest(BaseModel):
    """Register request."""

    name: str = Field(min_length=2, max_length=100)
    email: EmailStr
    password: str = Field(min_length=6, max_length=128)


class RegisterResponse(CamelModel):
    """Register response."""

    success: bool = True
    user: UserInfo
    token: str


class RegisterUseCase:
    """Use case for creating an account and starting a session."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize register use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Execute registration flow.

        Args:
            request: Register request

        Returns:
            Created user and session token

        Raises:
            BusinessRuleViolationError: If the email is already registered
        """
        user = await self.user_service.register(
            name=request.name,
            email=Email(request.email),
            password=request.password,
        )
        token = self.jwt_service.create_token(user)
        return RegisterResponse(user=UserInfo.from_user(user), token=token)
