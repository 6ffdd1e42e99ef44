"""WorkOS-specific exceptions for error handling."""
from __future__ import annotations
from typing import Optional


class WorkOSError(Exception):
    """Base exception for all WorkOS operations."""
    pass


class InvalidArgumentError(WorkOSError, ValueError):
    """A call was made with missing or invalid arguments.

    Raised before any request is sent, so it is always safe to fix the
    call site and retry.
    """
    pass


class ConfigurationError(WorkOSError):
    """Required configuration (API key, timeout) is missing or invalid."""
    pass


class APIError(WorkOSError):
    """Error returned by, or decoded from, the WorkOS API.

    Attributes:
        message: Error message from the response body
        http_status: HTTP status code, None when the status is not reported
        request_id: Value of the x-request-id response header
    """

    def __init__(
        self,
        message: str,
        http_status: Optional[int] = None,
        request_id: Optional[str] = None,
    ):
        self.message = message
        self.http_status = http_status
        self.request_id = request_id
        super().__init__(message)

    def __str__(self) -> str:
        parts = []
        if self.http_status is not None:
            parts.append(f"[{self.http_status}]")
        parts.append(self.message)
        if self.request_id:
            parts.append(f"(request_id={self.request_id})")
        return " ".join(parts)


class DecodeError(APIError):
    """Response body could not be decoded into the expected resource."""

    def __init__(self, message: str, request_id: Optional[str] = None):
        super().__init__(message, http_status=None, request_id=request_id)
