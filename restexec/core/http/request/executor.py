"""Request executor translating client failures into RestApiError."""
import asyncio
from typing import Any, Generic, Optional, Type, TypeVar

import aiohttp
import requests

from ...exceptions import (
    ErrorKind,
    HttpClientError,
    HttpServerError,
    HttpStatusError,
    RestApiError,
    RestClientError,
)
from ...logging import get_logger
from ..client.protocols import AsyncHttpClient, HttpClient
from ..headers import HttpHeaders
from ..methods import HttpMethod
from ..response import ResponseEntity
from .request_spec import RequestSpec

T = TypeVar('T')
R = TypeVar('R')

# HTTP errors raised by the client libraries themselves
LIBRARY_STATUS_ERRORS = (
    requests.HTTPError,
    aiohttp.ClientResponseError,
)

# Failures that did not produce a classified HTTP status
TRANSPORT_ERRORS = (
    RestClientError,
    requests.RequestException,
    aiohttp.ClientError,
    asyncio.TimeoutError,
    OSError,
)


class RestApiExecutor(Generic[T, R]):
    """
    Executes one built request through an HTTP client.

    Instances come from the staged builder:

    Example:
        >>> executor = (RestApiExecutor.new_request()
        ...     .url('https://example.com/api')
        ...     .method(HttpMethod.POST)
        ...     .add_header('Content-Type', 'application/json')
        ...     .headers_done()
        ...     .set_body({'key': 'value'})
        ...     .body_done()
        ...     .build())
        >>> response = executor.execute(RequestsHttpClient(), str)

    Every call is a single attempt. Failures surface as RestApiError:
    4xx and 5xx errors keep their status code and message, anything else
    becomes code 500 with a 'Request execution failed: ' message.
    """

    def __init__(self, request: RequestSpec[T]):
        self._request = request
        self._logger = get_logger('restexec.executor')

    @staticmethod
    def new_request():
        """
        Start a staged builder chain.

        Returns:
            UrlStep, the first builder stage
        """
        from .request_builder import new_request
        return new_request()

    @property
    def request(self) -> RequestSpec[T]:
        return self._request

    @property
    def url(self) -> str:
        return self._request.url

    @property
    def method(self) -> HttpMethod:
        return self._request.method

    @property
    def headers(self) -> HttpHeaders:
        return self._request.headers

    @property
    def body(self) -> Optional[T]:
        return self._request.body

    def execute(self, client: HttpClient, response_type: Optional[Type[R]] = str) -> ResponseEntity[R]:
        """
        Send the request through client.

        Args:
            client: Object with an ``exchange(request, response_type)`` method
            response_type: Type the response body is decoded into

        Returns:
            ResponseEntity with the decoded body

        Raises:
            RestApiError: On any HTTP or transport failure
        """
        self._logger.debug(f"{self._request.method} {self._request.url}")
        try:
            return client.exchange(self._request, response_type)
        except (HttpClientError, HttpServerError) as e:
            raise self._status_error(e) from e
        except LIBRARY_STATUS_ERRORS as e:
            raise self._library_error(e) from e
        except TRANSPORT_ERRORS as e:
            raise self._transport_error(e) from e

    async def execute_async(
        self,
        client: AsyncHttpClient,
        response_type: Optional[Type[R]] = str
    ) -> ResponseEntity[R]:
        """
        Send the request through an asynchronous client.

        Same translation rules as ``execute``.

        Raises:
            RestApiError: On any HTTP or transport failure
        """
        self._logger.debug(f"{self._request.method} {self._request.url} (async)")
        try:
            return await client.exchange(self._request, response_type)
        except (HttpClientError, HttpServerError) as e:
            raise self._status_error(e) from e
        except LIBRARY_STATUS_ERRORS as e:
            raise self._library_error(e) from e
        except TRANSPORT_ERRORS as e:
            raise self._transport_error(e) from e

    def _status_error(self, error: HttpStatusError) -> RestApiError:
        kind = ErrorKind.CLIENT_ERROR if isinstance(error, HttpClientError) else ErrorKind.SERVER_ERROR
        return self._http_error(error.status_code, _message_of(error), kind)

    def _library_error(self, error: BaseException) -> RestApiError:
        status = _library_status(error)
        if status is None or status < 400:
            return self._transport_error(error)
        kind = ErrorKind.CLIENT_ERROR if status < 500 else ErrorKind.SERVER_ERROR
        return self._http_error(status, _message_of(error), kind)

    def _http_error(self, status: int, message: str, kind: ErrorKind) -> RestApiError:
        self._logger.warning(
            f"{self._request.method} {self._request.url} failed with HTTP {status}"
        )
        return RestApiError(status, message, kind)

    def _transport_error(self, error: BaseException) -> RestApiError:
        self._logger.warning(
            f"{self._request.method} {self._request.url} failed: {type(error).__name__}: {error}"
        )
        return RestApiError.transport(_message_of(error))

    def __repr__(self) -> str:
        return f"RestApiExecutor({self._request.method} {self._request.url})"


def _library_status(error: BaseException) -> Optional[int]:
    """Status code carried by a requests or aiohttp HTTP error, if any."""
    if isinstance(error, aiohttp.ClientResponseError):
        return error.status
    response = getattr(error, 'response', None)
    return getattr(response, 'status_code', None)


def _message_of(error: BaseException) -> str:
    message: Any = getattr(error, 'message', None)
    if not isinstance(message, str):
        message = str(error)
    return message or type(error).__name__
