"""
Custom exceptions and error codes for Travel Map Guide.

Validation, identifier-format and not-found conditions are never raised;
services report them as failed ``Outcome`` values tagged with an
``ErrorCode``. Exceptions are reserved for faults that cross the service
boundary: persistence faults outside create/get-all, malformed bearer
tokens and missing configuration.

Usage:
    from core.errors import ClaimDecodeError, ErrorCode

    raise ClaimDecodeError("Invalid token: Not enough segments")
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for client-facing error messages."""

    # Authentication errors
    INVALID_TOKEN = "INVALID_TOKEN"

    # Travel errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    PERSISTENCE_FAILED = "PERSISTENCE_FAILED"

    # System errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.INVALID_TOKEN: "Your session is invalid. Please sign in again.",
    ErrorCode.VALIDATION_ERROR: "Your request contains invalid information. Please check and try again.",
    ErrorCode.NOT_FOUND: "The requested travel could not be found.",
    ErrorCode.PERSISTENCE_FAILED: "Unable to reach the travel store. Please try again.",
    ErrorCode.INTERNAL_ERROR: "An unexpected error occurred. Please try again.",
}


class TravelMapGuideError(Exception):
    """Base exception for all Travel Map Guide errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR):
        self.message = message
        self.code = code
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])


class PersistenceError(TravelMapGuideError):
    """The travel store reported a fault."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.PERSISTENCE_FAILED):
        super().__init__(message, code)


class ClaimDecodeError(TravelMapGuideError):
    """A bearer token could not be decoded into claims."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INVALID_TOKEN):
        super().__init__(message, code)


class ConfigurationError(TravelMapGuideError):
    """Required configuration is missing."""

    pass
