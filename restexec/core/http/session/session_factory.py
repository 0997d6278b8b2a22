"""Session factory using Factory Pattern."""
from typing import Optional

import aiohttp
import requests
from requests.adapters import HTTPAdapter

from ..config import ClientConfig


class SessionFactory:
    """Factory for creating HTTP sessions from a ClientConfig."""
    
    @staticmethod
    def create_sync_session(config: Optional[ClientConfig] = None) -> requests.Session:
        """
        Creates a synchronous HTTP session.

        Adapters are mounted with ``max_retries=0``: every request gets a
        single attempt.
        """
        config = config or ClientConfig.default()
        session = requests.Session()
        adapter = HTTPAdapter(
            pool_connections=config.limit_per_host,
            pool_maxsize=config.limit,
            max_retries=0
        )
        session.mount('http://', adapter)
        session.mount('https://', adapter)
        session.headers.update(config.get_session_headers())
        session.verify = config.ssl.to_requests_verify()
        cert = config.ssl.to_requests_cert()
        if cert:
            session.cert = cert
        if config.proxy:
            session.proxies.update(config.proxy.to_requests_proxies() or {})
        return session
    
    @staticmethod
    async def create_async_session(config: Optional[ClientConfig] = None) -> aiohttp.ClientSession:
        """Creates an asynchronous HTTP session (must run inside an event loop)."""
        config = config or ClientConfig.default()
        connector = aiohttp.TCPConnector(**config.get_connector_kwargs())
        return aiohttp.ClientSession(
            connector=connector,
            **config.get_session_kwargs()
        )
