"""HTTP client adapters."""
from .protocols import HttpClient, AsyncHttpClient
from .requests_client import RequestsHttpClient
from .aiohttp_client import AiohttpHttpClient

__all__ = [
    'HttpClient',
    'AsyncHttpClient',
    'RequestsHttpClient',
    'AiohttpHttpClient',
]
