"""
Application error kinds.

Every error raised on purpose by repositories, services or auth helpers is
one of these. Each kind carries the HTTP status and error label it is
rendered with; the translation to a response happens in app.error_handlers.
No framework imports allowed.
"""


class AppError(Exception):
    """Base error for all application errors."""

    status_code = 500
    error = "Internal Server Error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ValidationError(AppError):
    """Raised when input is malformed."""

    status_code = 400
    error = "Bad Request"


class UnauthorizedError(AppError):
    """Raised when a request carries no usable credentials."""

    status_code = 401
    error = "Unauthorized"


class ForbiddenError(AppError):
    """Raised when the caller is authenticated but not allowed to act."""

    status_code = 403
    error = "Forbidden"


class NotFoundError(AppError):
    """Raised when an identifier does not match any record."""

    status_code = 404
    error = "Not Found"


class ConflictError(AppError):
    """Raised when a write would break a uniqueness constraint."""

    status_code = 409
    error = "Conflict"
