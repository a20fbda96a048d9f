"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error (e.g. voting on your own content)."""

    pass


class AuthenticationError(DomainError):
    """Raised when a request has no valid session."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class PermissionDeniedError(DomainError):
    """Raised when a user lacks the role or ownership an action needs."""

    def __init__(self, message: str):
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found")
