"""Synchronous HTTP client adapter over requests."""
import logging
from typing import TYPE_CHECKING, Any, Optional

import requests

from ...exceptions import RestClientError
from ...logging import get_logger
from ..config import ClientConfig
from ..events import EventEmitter
from ..headers import HttpHeaders
from ..response import ResponseEntity, ResponseHandler
from ..session import SessionFactory
from .serialization import prepare_request

if TYPE_CHECKING:
    from ..request.request_spec import RequestSpec


class RequestsHttpClient(EventEmitter):
    """
    HttpClient backed by a ``requests.Session``.

    Emits 'request' before sending and 'response' after a successful
    exchange.

    Example:
        >>> with RequestsHttpClient() as client:
        ...     response = executor.execute(client, dict)
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        config: Optional[ClientConfig] = None
    ):
        """
        Initialize client.

        Args:
            session: Existing session to use; it is not closed by this client
            config: Client configuration (uses defaults if not provided)
        """
        super().__init__()
        self._config = config or ClientConfig.default()
        self._owns_session = session is None
        self._session = session or SessionFactory.create_sync_session(self._config)
        self._logger = get_logger('restexec.client.requests')
        if not logging.getLogger().handlers:
            self._logger.setLevel(self._config.log_level)

    @property
    def session(self) -> requests.Session:
        return self._session

    @property
    def config(self) -> ClientConfig:
        return self._config

    def exchange(self, request: 'RequestSpec', response_type: Optional[Any] = str) -> ResponseEntity:
        """
        Send request and decode the response body into response_type.

        Raises:
            HttpClientError: For 4xx responses
            HttpServerError: For 5xx responses
            RestClientError: For network failures
            ResponseDecodeError: If the body does not fit response_type
        """
        self.emit('request', request)
        headers, payload = prepare_request(request.headers, request.body)

        kwargs = {
            'headers': headers.to_single_value_dict(),
            'data': payload,
            'timeout': self._config.timeout.to_requests_timeout(),
        }
        if self._config.proxy:
            kwargs['proxies'] = self._config.proxy.to_requests_proxies()

        self._logger.debug(f"{request.method} {request.url}")
        try:
            response = self._session.request(request.method.value, request.url, **kwargs)
        except requests.RequestException as e:
            self._logger.error(f"Network error for {request.method} {request.url}: {e}")
            raise RestClientError(str(e)) from e

        reason = response.reason or ''
        self._logger.debug(f"Response {response.status_code} {reason} from {request.url}")
        if response.status_code >= 400:
            ResponseHandler.check_status(response.status_code, reason, response.text)

        entity = ResponseEntity(
            status_code=response.status_code,
            headers=HttpHeaders(response.headers.items()),
            body=ResponseHandler.decode_body(response.content, response_type, _announced_charset(response)),
            reason=reason
        )
        self.emit('response', entity)
        return entity

    def close(self):
        """Close the session if this client created it."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> 'RequestsHttpClient':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def _announced_charset(response: requests.Response) -> Optional[str]:
    """
    Charset from the Content-Type header, or None.

    requests falls back to ISO-8859-1 for text/* without a charset; the
    response handler falls back to utf-8 instead.
    """
    content_type = response.headers.get('Content-Type', '')
    if 'charset=' not in content_type.lower():
        return None
    return response.encoding
