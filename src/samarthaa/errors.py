from abc import ABC


class UserError(ABC, Exception):
    """Base class for user-related errors.

    All errors that inherit from UserError will have their messages
    displayed to the user. These errors should not contain any
    sensitive information.
    """


class NotFoundError(UserError):
    """Raised when a requested resource is not found."""

    def __init__(self, message: str = "Document not found") -> None:
        super().__init__(message)


class AuthenticationError(UserError):
    """Raised when authentication fails."""

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(message)


class AccessDeniedError(UserError):
    """Raised when a user tries to access a resource they do not have permission for."""


class ValidationError(UserError):
    """Raised when user input fails validation."""


class ServiceUnavailableError(UserError):
    """Raised when an optional third-party integration is not configured."""


class UpstreamError(UserError):
    """Raised when a third-party API answers with an error.

    Carries the upstream status code so it can be relayed to the client.
    """

    def __init__(self, message: str, status_code: int = 502, detail: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail
