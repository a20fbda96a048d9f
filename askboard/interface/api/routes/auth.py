"""Authentication routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, Response, status
from pydantic import BaseModel

from askboard.application.usecase.auth import (
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginResponse,
    LoginUseCase,
    RegisterRequest,
    RegisterResponse,
    RegisterUseCase,
)
from askboard.config import Settings
from askboard.interface.api.session import (
    clear_session_cookie,
    require_user,
    set_session_cookie,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


@router.post(
    "/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED
)
async def register(
    request: RegisterRequest,
    response: Response,
    use_case: FromDishka[RegisterUseCase],
    settings: FromDishka[Settings],
) -> RegisterResponse:
    """Create an account and start a session.

    Sets the session cookie and also returns the token for header-based clients.
    """
    result = await use_case.execute(request)
    set_session_cookie(response, result.token, settings)
    logger.info("User registered: %s", result.user.id)
    return result


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    response: Response,
    use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
) -> LoginResponse:
    """Log in with email and password.

    Unknown email and wrong password both answer 401.
    """
    result = await use_case.execute(request)
    set_session_cookie(response, result.token, settings)
    return result


@router.post("/logout", response_model=LogoutResponse)
async def logout(response: Response, settings: FromDishka[Settings]) -> LogoutResponse:
    """Log out by clearing the session cookie."""
    clear_session_cookie(response, settings)
    return LogoutResponse(success=True, message="Successfully logged out")


@router.get("/me", response_model=GetCurrentUserResponse)
async def get_current_user(
    request: Request,
    use_case: FromDishka[GetCurrentUserUseCase],
    settings: FromDishka[Settings],
) -> GetCurrentUserResponse:
    """Return the logged-in user, 401 without a valid session."""
    user = await require_user(request, use_case, settings)
    return GetCurrentUserResponse(user=user)
