"""Admin user deletion use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from askboard.application.usecase.base import CamelModel
from askboard.domain.error import BusinessRuleViolationError, PermissionDeniedError
from askboard.domain.service import UserService
from askboard.domain.value import UserId


class DeleteUserRequest(BaseModel):
    """Delete user request."""

    user_id: UUID  # Account to delete
    admin_id: str  # User ID from authenticated user


class DeleteUserResponse(CamelModel):
    """Delete user response."""

    success: bool = True


class DeleteUserUseCase:
    """Use case for an admin removing an account and its content."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize delete user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: DeleteUserRequest) -> DeleteUserResponse:
        """Execute delete user flow.

        Raises:
            PermissionDeniedError: If the user is not an admin
            BusinessRuleViolationError: If the admin targets their own account
            NotFoundError: If the target user does not exist
        """
        admin = await self.user_service.get_by_id(UserId(UUID(request.admin_id)))
        if not admin.is_admin:
            logfire.warn("Non-admin moderation attempt", user_id=str(admin.id))
            raise PermissionDeniedError("Admin access required")

        if admin.id == request.user_id:
            raise BusinessRuleViolationError("Admins cannot delete themselves")

        await self.user_service.delete_user(UserId(request.user_id))
        return DeleteUserResponse()
