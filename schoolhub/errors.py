"""
Domain errors raised by the service handlers.

Each error carries the HTTP status and error code the API boundary reports it
with, so handlers stay free of transport concerns.
"""
from typing import Any, Dict, Optional


class SchoolHubError(Exception):
    """Base class for expected, caller-facing failures."""

    status_code = 400
    error_code = "BAD_REQUEST"
    expected = True

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class NotFoundError(SchoolHubError):
    """A referenced user, post or comment does not exist."""

    status_code = 404
    error_code = "NOT_FOUND"


class UniquenessViolation(SchoolHubError):
    """A username or email is already taken by another user."""

    status_code = 409
    error_code = "UNIQUENESS_VIOLATION"


class PermissionDenied(SchoolHubError):
    status_code = 403
    error_code = "FORBIDDEN"


class ConflictError(SchoolHubError):
    """The user has already liked the post."""

    status_code = 409
    error_code = "CONFLICT"
