"""Pytest fixtures for restexec tests."""
import pytest

from restexec import HttpMethod, RestApiExecutor, ResponseEntity


class FakeClient:
    """Synchronous client that records requests and returns or raises a canned result."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def exchange(self, request, response_type):
        self.calls.append((request, response_type))
        if self.error is not None:
            raise self.error
        return self.response


class AsyncFakeClient(FakeClient):
    """Asynchronous variant of FakeClient."""

    async def exchange(self, request, response_type):
        return FakeClient.exchange(self, request, response_type)


@pytest.fixture
def ok_response():
    """Returns a 200 response with body 'ok'."""
    return ResponseEntity(status_code=200, body='ok', reason='OK')


@pytest.fixture
def fake_client(ok_response):
    """Returns a client answering every request with ok_response."""
    return FakeClient(response=ok_response)


@pytest.fixture
def post_executor():
    """Returns the executor for a JSON POST to https://example.com/api."""
    return (RestApiExecutor.new_request()
            .url('https://example.com/api')
            .method(HttpMethod.POST)
            .add_header('Content-Type', 'application/json')
            .headers_done()
            .set_body({'key': 'value'})
            .body_done()
            .build())


@pytest.fixture
def client_factory():
    """Returns the FakeClient class for tests needing custom results."""
    return FakeClient


@pytest.fixture
def async_client_factory():
    """Returns the AsyncFakeClient class."""
    return AsyncFakeClient
