"""
Exceptions for restexec.

Two families live here:

- ``RestApiError``: the single error type surfaced to callers of
  ``RestApiExecutor.execute``, tagged with an ``ErrorKind``.
- ``RestClientError`` and its subclasses: raised by HTTP client adapters
  and translated by the executor.
"""
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Classification carried by RestApiError."""

    CLIENT_ERROR = 'client_error'
    SERVER_ERROR = 'server_error'
    TRANSPORT_ERROR = 'transport_error'


class RestExecException(Exception):
    """Base exception for all restexec errors."""
    pass


class RestApiError(RestExecException):
    """
    Unified error for a failed request execution.

    Attributes:
        error_code: HTTP status code, or 500 for transport failures
        message: Error message
        kind: Which failure produced the error
    """

    TRANSPORT_ERROR_CODE = 500
    TRANSPORT_ERROR_PREFIX = 'Request execution failed: '

    def __init__(
        self,
        error_code: int,
        message: str,
        kind: Optional[ErrorKind] = None
    ) -> None:
        """
        Initialize the exception.

        Args:
            error_code: HTTP status code or 500 sentinel
            message: Error message
            kind: Error classification, derived from error_code if omitted
        """
        self.error_code = error_code
        self.message = message
        if kind is None:
            kind = ErrorKind.CLIENT_ERROR if 400 <= error_code < 500 else ErrorKind.SERVER_ERROR
        self.kind = kind
        super().__init__(message)

    @classmethod
    def transport(cls, message: str) -> 'RestApiError':
        """Create a transport error with the 500 sentinel code."""
        return cls(
            cls.TRANSPORT_ERROR_CODE,
            f"{cls.TRANSPORT_ERROR_PREFIX}{message}",
            ErrorKind.TRANSPORT_ERROR
        )

    @property
    def is_client_error(self) -> bool:
        return self.kind is ErrorKind.CLIENT_ERROR

    @property
    def is_server_error(self) -> bool:
        return self.kind is ErrorKind.SERVER_ERROR

    @property
    def is_transport_error(self) -> bool:
        return self.kind is ErrorKind.TRANSPORT_ERROR

    def __repr__(self) -> str:
        return (
            f"RestApiError(error_code={self.error_code}, "
            f"message={self.message!r}, kind={self.kind.value})"
        )


class BuilderError(RestExecException, ValueError):
    """Exception raised for invalid request builder input."""
    pass


class RestClientError(RestExecException):
    """Exception raised by HTTP client adapters for failed exchanges."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class HttpStatusError(RestClientError):
    """
    Exception raised when the server answers with an error status.

    Use ``from_status`` to get the 4xx/5xx specific subclass.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        reason: str = '',
        body: Optional[str] = None
    ) -> None:
        """
        Initialize the exception.

        Args:
            status_code: HTTP status code
            message: Error message
            reason: HTTP reason phrase
            body: Response body text (if available)
        """
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(message)

    @staticmethod
    def from_status(
        status_code: int,
        message: str,
        reason: str = '',
        body: Optional[str] = None
    ) -> 'HttpStatusError':
        """Create the error class matching the status code range."""
        if 400 <= status_code < 500:
            return HttpClientError(status_code, message, reason, body)
        if status_code >= 500:
            return HttpServerError(status_code, message, reason, body)
        return HttpStatusError(status_code, message, reason, body)


class HttpClientError(HttpStatusError):
    """Exception raised for 4xx responses."""
    pass


class HttpServerError(HttpStatusError):
    """Exception raised for 5xx responses."""
    pass


class ResponseDecodeError(RestClientError):
    """Exception raised when a response body cannot be decoded."""
    pass
