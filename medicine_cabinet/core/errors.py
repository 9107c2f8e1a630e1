"""API error taxonomy and the JSON bodies they are rendered as."""

from typing import Any

INTERNAL_ERROR_MESSAGE = "Internal server error"


class ApiError(Exception):
    """Base class for errors that map onto an HTTP status and a client-facing message."""

    status_code = 500
    reason = "InternalError"

    def __init__(self, message: str, location: str | None = None) -> None:
        self.message = message
        self.location = location
        super().__init__(message)

    def to_body(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "code": self.status_code,
            "reason": self.reason,
            "message": self.message,
        }
        if self.location is not None:
            body["location"] = self.location
        return body


class ValidationError(ApiError):
    """Client-correctable input problem, located at a single field."""

    status_code = 422
    reason = "ValidationError"


class AuthenticationError(ApiError):
    """Missing, invalid or expired credentials."""

    status_code = 401
    reason = "AuthenticationError"


class NotFoundError(ApiError):
    status_code = 404
    reason = "NotFoundError"
