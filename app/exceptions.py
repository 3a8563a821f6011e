from typing import Any, Mapping, Optional


class PatternsError(Exception):
    """Base class for errors raised by the examples and the catalog around them.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context
        code: optional machine-readable error code
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_message = "Unexpected error"

    def __init__(self, message: Optional[str] = None, details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = dict(self.details)
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(PatternsError):
    """Raised when an example API is used in a way it does not support.

    Covers things like a WHERE clause on an INSERT, an unknown currency pair
    or a strategy that was never set. http_status is 400.
    """

    http_status = 400
    default_message = "Invalid input"


class NotFoundError(PatternsError):
    """Raised when a requested resource (file, example, page) was not found.

    http_status is 404.
    """

    http_status = 404
    default_message = "Not found"
