"""
Asynchronous HTTP client adapter over aiohttp.

Use with ``RestApiExecutor.execute_async``.
"""
import asyncio
import logging
from typing import TYPE_CHECKING, Any, Optional

import aiohttp

from ...exceptions import HttpStatusError, RestClientError
from ...logging import get_logger
from ..config import ClientConfig
from ..events import EventEmitter
from ..headers import HttpHeaders
from ..response import ResponseEntity, ResponseHandler
from ..session import SessionFactory
from .serialization import prepare_request

if TYPE_CHECKING:
    from ..request.request_spec import RequestSpec


class AiohttpHttpClient(EventEmitter):
    """
    AsyncHttpClient backed by an ``aiohttp.ClientSession``.

    The session is created lazily on first use when none is given.
    Duplicate header names are sent as separate header lines.

    Example:
        >>> async with AiohttpHttpClient() as client:
        ...     response = await executor.execute_async(client, dict)
    """

    def __init__(
        self,
        session: Optional[aiohttp.ClientSession] = None,
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
        self._session = session
        self._owns_session = session is None
        self._logger = get_logger('restexec.client.aiohttp')
        if not logging.getLogger().handlers:
            self._logger.setLevel(self._config.log_level)

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def __aenter__(self) -> 'AiohttpHttpClient':
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure session is created and open."""
        if self._session is None or self._session.closed:
            if not self._owns_session:
                raise RestClientError("Session is closed")
            self._session = await SessionFactory.create_async_session(self._config)
        return self._session

    async def close(self):
        """Close the session if this client created it."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()
        if self._owns_session:
            self._session = None

    async def exchange(self, request: 'RequestSpec', response_type: Optional[Any] = str) -> ResponseEntity:
        """
        Send request and decode the response body into response_type.

        Raises:
            HttpClientError: For 4xx responses
            HttpServerError: For 5xx responses
            RestClientError: For network failures and timeouts
            ResponseDecodeError: If the body does not fit response_type
        """
        session = await self._ensure_session()
        self.emit('request', request)
        headers, payload = prepare_request(request.headers, request.body)
        proxy = self._config.proxy.to_url() if self._config.proxy else None

        self._logger.debug(f"{request.method} {request.url}")
        try:
            async with session.request(
                request.method.value,
                request.url,
                headers=headers.to_multidict(),
                data=payload,
                proxy=proxy
            ) as response:
                content = await response.read()
                status = response.status
                reason = response.reason or ''
                encoding = response.charset
                response_headers = HttpHeaders(response.headers.items())
        except aiohttp.ClientResponseError as e:
            # raised by sessions created with raise_for_status=True
            if e.status >= 400:
                message = ResponseHandler.error_message(e.status, e.message or '')
                raise HttpStatusError.from_status(e.status, message, e.message or '') from e
            self._logger.error(f"Response error for {request.method} {request.url}: {e}")
            raise RestClientError(str(e) or type(e).__name__) from e
        except aiohttp.ClientError as e:
            self._logger.error(f"Network error for {request.method} {request.url}: {e}")
            raise RestClientError(str(e) or type(e).__name__) from e
        except asyncio.TimeoutError as e:
            self._logger.error(f"Timeout for {request.method} {request.url}")
            raise RestClientError("Request timed out") from e

        self._logger.debug(f"Response {status} {reason} from {request.url}")
        if status >= 400:
            text = content.decode(encoding or 'utf-8', errors='replace')
            ResponseHandler.check_status(status, reason, text)

        entity = ResponseEntity(
            status_code=status,
            headers=response_headers,
            body=ResponseHandler.decode_body(content, response_type, encoding),
            reason=reason
        )
        self.emit('response', entity)
        return entity
