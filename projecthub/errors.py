"""
projecthub/errors.py

Error taxonomy for the API.

Every failure a handler reports is one of these classes. The exception
handlers in main.py render them as `{"success": false, "message": ...}`
with the class's HTTP status.
"""

from __future__ import annotations

from typing import Optional


class ApiError(Exception):
    """Base class for errors that map onto an HTTP response."""
    status_code = 500
    message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(ApiError):
    """Missing or malformed input."""
    status_code = 400
    message = "Invalid request"


class ConflictError(ApiError):
    """Registration with an email that is already taken."""
    status_code = 400
    message = "User already exists"


class AuthError(ApiError):
    """Bad credentials. Never says which field was wrong."""
    status_code = 401
    message = "Invalid credentials"


class MissingTokenError(ApiError):
    status_code = 401
    message = "Authentication required"


class InvalidTokenError(ApiError):
    status_code = 403
    message = "Invalid token"


class ForbiddenError(ApiError):
    """Authenticated, but the role does not allow the operation."""
    status_code = 403
    message = "Access denied"


class NotFoundError(ApiError):
    status_code = 404
    message = "Not found"


class InternalError(ApiError):
    status_code = 500
    message = "Internal server error"
