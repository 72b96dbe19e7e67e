"""Exceptions shared by the profile and comment use cases."""


class ServiceError(Exception):
    """Base class for expected, caller-facing failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ServiceError):
    """Raised when the referenced profile/comment does not exist."""


class InvalidOwnerError(ServiceError):
    """Raised when ownerId does not match any registered user."""


class ForbiddenError(ServiceError):
    """Raised when the acting user does not own the target resource."""
