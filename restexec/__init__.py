"""
restexec - staged HTTP request builder with unified error handling.

Usage:
    >>> from restexec import RestApiExecutor, HttpMethod, RequestsHttpClient
    >>>
    >>> executor = (RestApiExecutor.new_request()
    ...     .url("https://example.com/api")
    ...     .method(HttpMethod.POST)
    ...     .add_header("Content-Type", "application/json")
    ...     .headers_done()
    ...     .set_body({"key": "value"})
    ...     .body_done()
    ...     .build())
    >>> with RequestsHttpClient() as client:
    ...     response = executor.execute(client, str)
"""
import logging

from .core.exceptions import (
    ErrorKind,
    RestExecException,
    RestApiError,
    BuilderError,
    RestClientError,
    HttpStatusError,
    HttpClientError,
    HttpServerError,
    ResponseDecodeError,
)
from .core.http import (
    RestApiExecutor,
    RequestSpec,
    UrlStep,
    MethodStep,
    HeadersStep,
    BodyStep,
    BuildStep,
    HttpMethod,
    HttpHeaders,
    ResponseEntity,
    HttpClient,
    AsyncHttpClient,
    RequestsHttpClient,
    AiohttpHttpClient,
    SessionFactory,
    ClientConfig,
    ProxyConfig,
    SSLConfig,
    TimeoutConfig,
)

__version__ = '1.0.0'


def setup_logging(level=logging.INFO):
    """
    Configure logging for restexec modules.

    Args:
        level: Logging level (default: logging.INFO)
    """
    loggers = [
        'restexec',
        'restexec.executor',
        'restexec.client.requests',
        'restexec.client.aiohttp',
    ]

    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True


__all__ = [
    'RestApiExecutor',
    'RequestSpec',
    'UrlStep',
    'MethodStep',
    'HeadersStep',
    'BodyStep',
    'BuildStep',
    'HttpMethod',
    'HttpHeaders',
    'ResponseEntity',
    'HttpClient',
    'AsyncHttpClient',
    'RequestsHttpClient',
    'AiohttpHttpClient',
    'SessionFactory',
    'ClientConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',
    'ErrorKind',
    'RestExecException',
    'RestApiError',
    'BuilderError',
    'RestClientError',
    'HttpStatusError',
    'HttpClientError',
    'HttpServerError',
    'ResponseDecodeError',
    'setup_logging',
]
