from typing import Any, Mapping, Optional


class DailyDietError(Exception):
    """Base class for errors raised by the service layer.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field errors, validation info)
        code: optional machine-readable error code
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_message = "Service error"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Mapping[str, Any]] = None,
        code: Optional[str] = None,
    ):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class NotFoundError(DailyDietError):
    """Raised when a requested resource was not found.

    A meal that belongs to another user is reported exactly like a missing one.
    """

    http_status = 404
    default_message = "Not found"


class ConflictError(DailyDietError):
    """Raised when a resource conflict occurs (e.g., duplicate email)."""

    http_status = 409
    default_message = "Conflict"


class UnauthorizedError(DailyDietError):
    """Raised when authentication fails: missing/unknown session or bad credentials."""

    http_status = 401
    default_message = "Unauthorized"
