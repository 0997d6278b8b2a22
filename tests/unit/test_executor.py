"""Tests for RestApiExecutor error translation."""
import asyncio
from unittest.mock import Mock

import aiohttp
import pytest
import requests

from restexec import (
    ErrorKind,
    HttpClientError,
    HttpServerError,
    HttpStatusError,
    ResponseDecodeError,
    ResponseEntity,
    RestApiError,
    RestClientError,
)


class TestExecute:
    """Test suite for synchronous execution."""

    def test_returns_client_response(self, post_executor, fake_client):
        """Test a 200 'ok' response comes back unchanged."""
        response = post_executor.execute(fake_client, str)

        assert response.status_code == 200
        assert response.body == 'ok'

    def test_passes_request_and_response_type(self, post_executor, fake_client):
        """Test the client receives the built descriptor and the type."""
        post_executor.execute(fake_client, dict)

        request, response_type = fake_client.calls[0]
        assert request is post_executor.request
        assert response_type is dict

    def test_non_error_status_is_returned(self, post_executor, client_factory):
        """Test statuses the client does not raise for are returned as-is."""
        client = client_factory(response=ResponseEntity(status_code=304, reason='Not Modified'))

        response = post_executor.execute(client, str)

        assert response.status_code == 304

    def test_single_attempt(self, post_executor, client_factory):
        """Test a failing request is not retried."""
        client = client_factory(error=RestClientError('timeout'))

        with pytest.raises(RestApiError):
            post_executor.execute(client, str)

        assert len(client.calls) == 1

    def test_client_error(self, post_executor, client_factory):
        """Test 404 keeps its code and message."""
        client = client_factory(error=HttpClientError(404, 'Not Found'))

        with pytest.raises(RestApiError) as exc_info:
            post_executor.execute(client, str)

        error = exc_info.value
        assert error.error_code == 404
        assert error.message == 'Not Found'
        assert str(error) == 'Not Found'
        assert error.kind is ErrorKind.CLIENT_ERROR
        assert error.is_client_error

    def test_server_error(self, post_executor, client_factory):
        """Test 503 keeps its code and message."""
        client = client_factory(error=HttpServerError(503, '503 Service Unavailable'))

        with pytest.raises(RestApiError) as exc_info:
            post_executor.execute(client, str)

        assert exc_info.value.error_code == 503
        assert exc_info.value.message == '503 Service Unavailable'
        assert exc_info.value.is_server_error

    def test_connection_failure(self, post_executor, client_factory):
        """Test transport failures become 500 with a prefixed message."""
        client = client_factory(error=RestClientError('timeout'))

        with pytest.raises(RestApiError) as exc_info:
            post_executor.execute(client, str)

        error = exc_info.value
        assert error.error_code == 500
        assert error.message == 'Request execution failed: timeout'
        assert error.is_transport_error

    @pytest.mark.parametrize('failure', [
        requests.ConnectionError('timeout'),
        requests.Timeout('timeout'),
        aiohttp.ClientConnectionError('timeout'),
        ConnectionRefusedError('timeout'),
        TimeoutError('timeout'),
    ])
    def test_library_transport_errors(self, post_executor, client_factory, failure):
        """Test raw library and OS errors are normalized too."""
        client = client_factory(error=failure)

        with pytest.raises(RestApiError) as exc_info:
            post_executor.execute(client, str)

        assert exc_info.value.error_code == 500
        assert exc_info.value.message == 'Request execution failed: timeout'

    def test_decode_error_is_transport_error(self, post_executor, client_factory):
        """Test body decoding failures are reported as 500."""
        client = client_factory(error=ResponseDecodeError('bad json'))

        with pytest.raises(RestApiError) as exc_info:
            post_executor.execute(client, dict)

        assert exc_info.value.error_code == 500
        assert exc_info.value.message == 'Request execution failed: bad json'

    def test_unclassified_status_error_is_transport_error(self, post_executor, client_factory):
        """Test a status error outside 4xx/5xx is treated as a transport failure."""
        client = client_factory(error=HttpStatusError(302, '302 Found'))

        with pytest.raises(RestApiError) as exc_info:
            post_executor.execute(client, str)

        assert exc_info.value.error_code == 500

    def test_empty_message_uses_exception_name(self, post_executor, client_factory):
        """Test an error without text still yields a readable message."""
        client = client_factory(error=TimeoutError())

        with pytest.raises(RestApiError) as exc_info:
            post_executor.execute(client, str)

        assert exc_info.value.message == 'Request execution failed: TimeoutError'

    def test_original_error_is_chained(self, post_executor, client_factory):
        """Test the client exception is kept as __cause__."""
        original = HttpClientError(400, 'Bad Request')
        client = client_factory(error=original)

        with pytest.raises(RestApiError) as exc_info:
            post_executor.execute(client, str)

        assert exc_info.value.__cause__ is original

    def test_programming_errors_propagate(self, post_executor, client_factory):
        """Test unrelated exceptions are not swallowed."""
        client = client_factory(error=KeyError('missing'))

        with pytest.raises(KeyError):
            post_executor.execute(client, str)

    def test_executor_can_run_twice(self, post_executor, fake_client):
        """Test the immutable descriptor can be sent more than once."""
        post_executor.execute(fake_client, str)
        post_executor.execute(fake_client, str)

        assert len(fake_client.calls) == 2
        assert fake_client.calls[0][0] is fake_client.calls[1][0]


class TestLibraryStatusErrors:
    """Test suite for HTTP errors raised by requests and aiohttp directly."""

    @staticmethod
    def _requests_error(status, reason):
        response = requests.Response()
        response.status_code = status
        response.reason = reason
        return requests.HTTPError(f"{status} Client Error: {reason}", response=response)

    @staticmethod
    def _aiohttp_error(status, reason):
        return aiohttp.ClientResponseError(Mock(), (), status=status, message=reason)

    def test_requests_http_error_keeps_status(self, post_executor, client_factory):
        """Test raise_for_status() errors keep their 4xx code."""
        client = client_factory(error=self._requests_error(404, 'Not Found'))

        with pytest.raises(RestApiError) as exc_info:
            post_executor.execute(client, str)

        assert exc_info.value.error_code == 404
        assert exc_info.value.message == '404 Client Error: Not Found'
        assert exc_info.value.is_client_error

    def test_requests_http_error_server_status(self, post_executor, client_factory):
        """Test 5xx requests errors are server errors."""
        client = client_factory(error=self._requests_error(503, 'Service Unavailable'))

        with pytest.raises(RestApiError) as exc_info:
            post_executor.execute(client, str)

        assert exc_info.value.error_code == 503
        assert exc_info.value.is_server_error

    def test_requests_http_error_without_response(self, post_executor, client_factory):
        """Test an HTTPError with no response is a transport failure."""
        client = client_factory(error=requests.HTTPError('boom'))

        with pytest.raises(RestApiError) as exc_info:
            post_executor.execute(client, str)

        assert exc_info.value.error_code == 500
        assert exc_info.value.message == 'Request execution failed: boom'

    def test_aiohttp_response_error_keeps_status(self, post_executor, client_factory):
        """Test aiohttp status errors keep their code and reason."""
        client = client_factory(error=self._aiohttp_error(404, 'Not Found'))

        with pytest.raises(RestApiError) as exc_info:
            post_executor.execute(client, str)

        assert exc_info.value.error_code == 404
        assert exc_info.value.message == 'Not Found'

    @pytest.mark.asyncio
    async def test_aiohttp_response_error_async(self, post_executor, async_client_factory):
        """Test async execution maps aiohttp status errors too."""
        client = async_client_factory(error=self._aiohttp_error(502, 'Bad Gateway'))

        with pytest.raises(RestApiError) as exc_info:
            await post_executor.execute_async(client, str)

        assert exc_info.value.error_code == 502
        assert exc_info.value.is_server_error


class TestExecuteAsync:
    """Test suite for asynchronous execution."""

    @pytest.mark.asyncio
    async def test_returns_client_response(self, post_executor, async_client_factory, ok_response):
        """Test async execution returns the client response."""
        client = async_client_factory(response=ok_response)

        response = await post_executor.execute_async(client, str)

        assert response.body == 'ok'

    @pytest.mark.asyncio
    async def test_client_error(self, post_executor, async_client_factory):
        """Test async 404 translation."""
        client = async_client_factory(error=HttpClientError(404, 'Not Found'))

        with pytest.raises(RestApiError) as exc_info:
            await post_executor.execute_async(client, str)

        assert exc_info.value.error_code == 404
        assert exc_info.value.message == 'Not Found'

    @pytest.mark.asyncio
    async def test_timeout(self, post_executor, async_client_factory):
        """Test asyncio timeouts become 500 transport errors."""
        client = async_client_factory(error=asyncio.TimeoutError('timeout'))

        with pytest.raises(RestApiError) as exc_info:
            await post_executor.execute_async(client, str)

        assert exc_info.value.error_code == 500
        assert exc_info.value.message == 'Request execution failed: timeout'


class TestRestApiError:
    """Test suite for the unified error type."""

    def test_kind_derived_from_code(self):
        """Test kind defaults from the status range."""
        assert RestApiError(418, 'teapot').kind is ErrorKind.CLIENT_ERROR
        assert RestApiError(502, 'bad gateway').kind is ErrorKind.SERVER_ERROR

    def test_transport_factory(self):
        """Test transport() builds the 500 sentinel error."""
        error = RestApiError.transport('connection refused')

        assert error.error_code == 500
        assert error.message == 'Request execution failed: connection refused'
        assert error.kind is ErrorKind.TRANSPORT_ERROR

    def test_status_error_factory(self):
        """Test from_status picks the class by range."""
        assert isinstance(HttpStatusError.from_status(404, 'x'), HttpClientError)
        assert isinstance(HttpStatusError.from_status(500, 'x'), HttpServerError)
        assert type(HttpStatusError.from_status(302, 'x')) is HttpStatusError
