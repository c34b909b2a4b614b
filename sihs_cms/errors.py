"""Error taxonomy.

Every error raised by the services and route handlers derives from
:class:`AppError` and carries the HTTP status it maps to. The exception
handlers in :mod:`sihs_cms.main` render them as ``{"success": false, "message": ...}``.
"""
from typing import Optional


class AppError(Exception):
    """Base class for errors rendered into the JSON envelope"""

    status_code: int = 500
    default_message: str = "Server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """Missing or malformed input"""

    status_code = 400
    default_message = "Invalid request"


class DuplicateEmail(AppError):
    status_code = 400
    default_message = "Admin with this email already exists"


class InvalidCredentials(AppError):
    """No such account or wrong password. The two cases are never distinguished."""

    status_code = 401
    default_message = "Invalid credentials"


class AccountLocked(AppError):
    status_code = 429

    def __init__(self, remaining_minutes: int):
        self.remaining_minutes = remaining_minutes
        unit = "minute" if remaining_minutes == 1 else "minutes"
        super().__init__(
            "Account is temporarily locked due to too many failed login attempts. "
            f"Try again in {remaining_minutes} {unit}."
        )


class Unauthenticated(AppError):
    status_code = 401
    default_message = "Token is not valid"


class InvalidToken(Unauthenticated):
    default_message = "Invalid token"


class TokenExpired(Unauthenticated):
    default_message = "Token expired"


class Forbidden(AppError):
    status_code = 403
    default_message = "Access denied"


class NotFound(AppError):
    status_code = 404
    default_message = "Not found"


class ServerError(AppError):
    status_code = 500
    default_message = "Server error"
