"""Coralogix API error classes.

Raised by the client and left to propagate up to the caller.
"""

from __future__ import annotations


class CoralogixError(Exception):
    """Base exception for Coralogix API errors."""

    pass


class CoralogixRequestError(CoralogixError):
    """Raised when a request never got a response (connection error, timeout)."""

    pass


class CoralogixAPIError(CoralogixError):
    """Raised when the API answers with a non-2xx status."""

    def __init__(self, message: str, status_code: int, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class CoralogixResponseError(CoralogixError):
    """Raised when a 2xx response body is not JSON or lacks required fields."""

    pass
