"""
Domain exceptions raised by the service layer.

Routes never see raw persistence errors for expected failures: services raise
one of these and the handlers registered in ``main.py`` turn them into HTTP
responses.
"""


class AppError(Exception):
    """Base class for all domain errors."""

    def __init__(self, message: str = "Application error"):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ValidationError(AppError):
    """Missing or malformed input."""


class InvalidRangeError(ValidationError):
    """A start date falls after its end date."""


class NotFoundError(AppError):
    """No row matched the request."""


class ConflictError(AppError):
    """A uniqueness or state rule would be violated."""


class NotFriendsError(AppError):
    """The viewer is not an accepted friend of the requested user."""


class ForbiddenError(AppError):
    """The acting user may not perform this operation."""


class AuthError(AppError):
    """Bad credentials or an invalid token."""
