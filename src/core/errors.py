"""
Error types raised by services and translated to HTTP responses by the API.
"""

from typing import Any


class ErrorCodes:
    """Error code constants."""

    INVALID_REQUEST = "INVALID_REQUEST"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    FILE_TOO_LARGE = "FILE_TOO_LARGE"
    INTEGRATION_NOT_CONFIGURED = "INTEGRATION_NOT_CONFIGURED"
    UPSTREAM_ERROR = "UPSTREAM_ERROR"
    UPSTREAM_UNAVAILABLE = "UPSTREAM_UNAVAILABLE"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class PortalError(Exception):
    """Base error carrying an HTTP status and an error code."""

    status_code = 500
    code = ErrorCodes.INTERNAL_ERROR

    def __init__(self, message: str, details: list[str] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or []


class InvalidRequestError(PortalError):
    status_code = 400
    code = ErrorCodes.INVALID_REQUEST


class NotFoundError(PortalError):
    status_code = 404
    code = ErrorCodes.NOT_FOUND


class ConflictError(PortalError):
    status_code = 409
    code = ErrorCodes.CONFLICT


class PayloadTooLargeError(PortalError):
    status_code = 413
    code = ErrorCodes.FILE_TOO_LARGE


class IntegrationNotConfiguredError(PortalError):
    status_code = 400
    code = ErrorCodes.INTEGRATION_NOT_CONFIGURED


class UpstreamError(PortalError):
    """The spreadsheet web app failed or could not be reached."""

    status_code = 502
    code = ErrorCodes.UPSTREAM_ERROR

    def __init__(self, message: str, upstream: Any = None, code: str | None = None):
        super().__init__(message)
        self.upstream = upstream
        if code:
            self.code = code
