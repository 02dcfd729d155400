"""
Custom exception types for the SedoTMP API client.

These exceptions allow callers to distinguish between failures
occurring during authentication, failures of an API call and
responses whose body cannot be interpreted.
"""
from typing import Optional


class SedoTmpError(Exception):
    """Base exception for all SedoTMP client errors."""


class AuthenticationError(SedoTmpError):
    """Raised when the client-credentials token exchange fails."""


class ResponseFormatError(SedoTmpError):
    """Raised when a JSON response body is not an object or an array."""


class ApiCallError(SedoTmpError):
    """
    Raised when a request to a SedoTMP endpoint fails at transport level
    or returns a non-2xx status.

    The underlying ``requests`` exception is chained as ``__cause__`` and
    also kept on ``cause`` for inspection.
    """

    def __init__(
        self,
        message: str,
        *,
        cause: Optional[BaseException] = None,
        status_code: Optional[int] = None
    ) -> None:
        super().__init__(message)
        self.cause = cause
        self.status_code = status_code
