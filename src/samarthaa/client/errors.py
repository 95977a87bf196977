class ClientError(Exception):
    """Base class for errors raised by the backend and registry clients."""


class RegistryUnavailableError(ClientError):
    """The session registry could not give a definitive answer.

    Covers transport errors, timeouts, non-2xx responses and malformed bodies.
    Never means the session is invalid.
    """


class BackendError(ClientError):
    """The backend answered a request with an error."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class LoginRejectedError(BackendError):
    """The backend refused the email/password combination."""


class SessionActiveError(ClientError):
    """Login was attempted while a session is active or being restored."""
