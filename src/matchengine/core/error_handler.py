"""Error Handling for the MatchEngine SDK

Closed error taxonomy shared by the transport layer and the endpoint groups,
plus helpers for presenting errors to end users.
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorKind(Enum):
    """Closed set of failure kinds a MatchEngine call can produce."""
    AUTHENTICATION_FAILED = "authentication_failed"
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    SLOT_NOT_AVAILABLE = "slot_not_available"
    USER_NOT_FOUND = "user_not_found"
    REQUEST_TIMEOUT = "request_timeout"
    GENERIC = "generic"
    # Raised by higher layers only, never by the transport
    BOOKING_FAILED = "booking_failed"
    PAYMENT_FAILED = "payment_failed"


DEFAULT_MESSAGES: Dict[ErrorKind, str] = {
    ErrorKind.AUTHENTICATION_FAILED: "Invalid or expired API token",
    ErrorKind.NOT_FOUND: "Resource not found",
    ErrorKind.VALIDATION: "Validation failed",
    ErrorKind.SLOT_NOT_AVAILABLE: "Time slot is not available",
    ErrorKind.USER_NOT_FOUND: "User not found",
    ErrorKind.REQUEST_TIMEOUT: "Request timeout",
    ErrorKind.GENERIC: "Unknown error",
    ErrorKind.BOOKING_FAILED: "Booking operation failed",
    ErrorKind.PAYMENT_FAILED: "Payment operation failed",
}

DEFAULT_STATUS_CODES: Dict[ErrorKind, int] = {
    ErrorKind.AUTHENTICATION_FAILED: 401,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.VALIDATION: 400,
    ErrorKind.SLOT_NOT_AVAILABLE: 400,
    ErrorKind.USER_NOT_FOUND: 404,
    ErrorKind.REQUEST_TIMEOUT: 408,
}


class MatchEngineError(Exception):
    """Single exception type for every MatchEngine failure.

    The failure is identified by ``kind`` rather than by subclass, so catch
    sites branch on ``error.kind``.

    Args:
        kind: Failure kind
        message: Human readable message, defaults per kind
        status_code: HTTP status, defaults per kind where one is implied
        response_data: Parsed error body returned by the server
        field_errors: Per-field messages, only set by callers constructing
            validation errors themselves
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
        response_data: Any = None,
        field_errors: Optional[Dict[str, List[str]]] = None,
    ):
        self.kind = kind
        self.message = message or DEFAULT_MESSAGES[kind]
        self.status_code = status_code if status_code is not None else DEFAULT_STATUS_CODES.get(kind)
        self.response_data = response_data
        self.field_errors = field_errors
        super().__init__(self.message)

    def __repr__(self) -> str:
        return (
            f"MatchEngineError(kind={self.kind.value!r}, message={self.message!r}, "
            f"status_code={self.status_code!r})"
        )

    @classmethod
    def validation(cls, message: str, field_errors: Optional[Dict[str, List[str]]] = None,
                   response_data: Any = None) -> 'MatchEngineError':
        """Build a validation error, optionally with per-field messages."""
        return cls(ErrorKind.VALIDATION, message, response_data=response_data,
                   field_errors=field_errors)

    @classmethod
    def timeout(cls) -> 'MatchEngineError':
        return cls(ErrorKind.REQUEST_TIMEOUT)

    @property
    def is_not_found(self) -> bool:
        return self.kind is ErrorKind.NOT_FOUND


class ErrorHandler:
    """Turns MatchEngine errors into summaries suitable for end users."""

    USER_ACTIONS: Dict[ErrorKind, str] = {
        ErrorKind.AUTHENTICATION_FAILED: "Check the API token configured for this client",
        ErrorKind.NOT_FOUND: "The requested item was not found",
        ErrorKind.VALIDATION: "Please check your input and try again",
        ErrorKind.SLOT_NOT_AVAILABLE: "This time slot is no longer available, please pick another one",
        ErrorKind.USER_NOT_FOUND: "Register the user before booking on their behalf",
        ErrorKind.REQUEST_TIMEOUT: "The booking service did not answer in time, please try again",
        ErrorKind.GENERIC: "An error occurred. Please try again or contact support",
        ErrorKind.BOOKING_FAILED: "The booking could not be completed",
        ErrorKind.PAYMENT_FAILED: "The payment could not be completed",
    }

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def get_error_summary(self, error: MatchEngineError) -> Dict[str, Any]:
        """Get a formatted error summary for user display.

        Args:
            error: The error to describe

        Returns:
            Dictionary with kind, message, status code and a suggested action
        """
        summary = {
            'error_kind': error.kind.value,
            'message': error.message,
            'status_code': error.status_code,
            'user_action': self.USER_ACTIONS[error.kind],
        }
        if error.field_errors:
            summary['field_errors'] = error.field_errors
        return summary

    def log_error(self, error: MatchEngineError, context: Optional[str] = None):
        """Log an error with the level its kind warrants."""
        message = str(error)
        if context:
            message = f"{context}: {message}"

        if error.kind in (ErrorKind.GENERIC, ErrorKind.REQUEST_TIMEOUT):
            self.logger.error(message)
        else:
            self.logger.warning(message)
