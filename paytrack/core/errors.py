"""Error taxonomy mapped to HTTP status codes at the request boundary."""


class PaytrackError(Exception):
    """Base error carrying a client-safe message and the HTTP status to return."""

    status_code = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(PaytrackError):
    """Missing or malformed input."""

    status_code = 400


class AuthenticationError(PaytrackError):
    """Bad credentials at login, or a missing/invalid token where one is required."""

    status_code = 401


class AuthorizationError(PaytrackError):
    """Caller is not allowed to perform the operation."""

    status_code = 403


class NotFoundError(PaytrackError):
    status_code = 404


class ConflictError(PaytrackError):
    """Unique constraint violated (e.g. username already taken)."""

    status_code = 409


class InternalError(PaytrackError):
    """Storage or unexpected failure. The message is always generic."""

    status_code = 500

    def __init__(self, message: str = "Internal Server Error") -> None:
        super().__init__(message)
