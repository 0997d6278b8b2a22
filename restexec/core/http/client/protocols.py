"""
HTTP client protocols.

Any object with a matching ``exchange`` method can run a RestApiExecutor.
Implementations raise HttpClientError for 4xx responses, HttpServerError
for 5xx responses and RestClientError for every other failure.
"""
from typing import TYPE_CHECKING, Any, Optional, Protocol, runtime_checkable

from ..response import ResponseEntity

if TYPE_CHECKING:
    from ..request.request_spec import RequestSpec


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for synchronous HTTP clients."""

    def exchange(self, request: 'RequestSpec', response_type: Optional[Any]) -> ResponseEntity:
        """
        Send request and decode the response body.

        Args:
            request: Request to send
            response_type: Type the body is decoded into

        Returns:
            ResponseEntity with status, headers and decoded body
        """
        ...


@runtime_checkable
class AsyncHttpClient(Protocol):
    """Protocol for asynchronous HTTP clients."""

    async def exchange(self, request: 'RequestSpec', response_type: Optional[Any]) -> ResponseEntity:
        """Send request and decode the response body asynchronously."""
        ...
