"""HTTP request building and execution."""
from .methods import HttpMethod
from .headers import HttpHeaders
from .config import ClientConfig, ProxyConfig, SSLConfig, TimeoutConfig
from .events import EventEmitter
from .response import ResponseEntity, ResponseHandler, decode_body
from .client import HttpClient, AsyncHttpClient, RequestsHttpClient, AiohttpHttpClient
from .request import (
    RequestSpec,
    RestApiExecutor,
    UrlStep,
    MethodStep,
    HeadersStep,
    BodyStep,
    BuildStep,
)
from .session import SessionFactory

__all__ = [
    # Builder and executor
    'RestApiExecutor',
    'RequestSpec',
    'UrlStep',
    'MethodStep',
    'HeadersStep',
    'BodyStep',
    'BuildStep',

    # Model
    'HttpMethod',
    'HttpHeaders',
    'ResponseEntity',
    'ResponseHandler',
    'decode_body',

    # Clients
    'HttpClient',
    'AsyncHttpClient',
    'RequestsHttpClient',
    'AiohttpHttpClient',
    'SessionFactory',

    # Configuration
    'ClientConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',

    # Events
    'EventEmitter',
]
