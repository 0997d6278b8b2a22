"""
HTTP client configuration module.

Provides configuration for the bundled requests and aiohttp client adapters.
The executor itself reads no configuration: timeouts, proxies and TLS belong
to the client that runs the request.
"""
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, Tuple, Union
import ssl


@dataclass
class ProxyConfig:
    """
    Proxy configuration.

    Supports HTTP, HTTPS, and SOCKS proxies.
    """
    url: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None

    def to_url(self) -> Optional[str]:
        """Proxy URL with credentials inserted, if any."""
        if not self.url:
            return None

        if self.username and self.password:
            if '://' in self.url:
                protocol, rest = self.url.split('://', 1)
                return f"{protocol}://{self.username}:{self.password}@{rest}"

        return self.url

    def to_requests_proxies(self) -> Optional[Dict[str, str]]:
        """Convert to requests proxies mapping."""
        url = self.to_url()
        if not url:
            return None
        return {'http': url, 'https': url}


@dataclass
class SSLConfig:
    """
    SSL/TLS configuration.

    Allows customization of SSL behavior for security requirements.
    """
    verify: bool = True
    cert_file: Optional[str] = None
    key_file: Optional[str] = None
    ca_file: Optional[str] = None
    check_hostname: bool = True

    def create_ssl_context(self) -> Union[ssl.SSLContext, bool]:
        """Create SSL context for aiohttp (False disables verification)."""
        if not self.verify:
            return False

        context = ssl.create_default_context()

        if self.ca_file:
            context.load_verify_locations(self.ca_file)

        if self.cert_file:
            context.load_cert_chain(
                self.cert_file,
                keyfile=self.key_file
            )

        context.check_hostname = self.check_hostname

        return context

    def to_requests_verify(self) -> Union[bool, str]:
        """Convert to requests ``verify`` argument."""
        if not self.verify:
            return False
        return self.ca_file or True

    def to_requests_cert(self) -> Optional[Union[str, Tuple[str, str]]]:
        """Convert to requests ``cert`` argument."""
        if not self.cert_file:
            return None
        if self.key_file:
            return (self.cert_file, self.key_file)
        return self.cert_file


@dataclass
class TimeoutConfig:
    """
    Timeout configuration.

    Granular control over different timeout types.
    """
    total: float = 300.0  # Total request timeout
    connect: float = 30.0  # Connection timeout
    sock_read: float = 60.0  # Socket read timeout
    sock_connect: float = 30.0  # Socket connect timeout

    def to_requests_timeout(self) -> Tuple[float, float]:
        """Convert to requests (connect, read) timeout tuple."""
        return (self.connect, self.sock_read)

    def to_aiohttp_timeout(self):
        """Convert to aiohttp ClientTimeout."""
        import aiohttp
        return aiohttp.ClientTimeout(
            total=self.total,
            connect=self.connect,
            sock_read=self.sock_read,
            sock_connect=self.sock_connect
        )


@dataclass
class ClientConfig:
    """
    Complete HTTP client configuration.

    Shared by RequestsHttpClient and AiohttpHttpClient.
    """
    # User agent
    user_agent: str = 'restexec/1.0.0'

    # Sub-configurations
    proxy: Optional[ProxyConfig] = None
    ssl: SSLConfig = field(default_factory=SSLConfig)
    timeout: TimeoutConfig = field(default_factory=TimeoutConfig)

    # Headers sent with every request, before request headers
    extra_headers: Dict[str, str] = field(default_factory=dict)

    # Logging
    log_level: int = 30  # logging.WARNING

    # Connection pool settings
    limit_per_host: int = 10
    limit: int = 100

    @classmethod
    def default(cls) -> 'ClientConfig':
        """Create default configuration."""
        return cls()

    @classmethod
    def with_proxy(cls, proxy_url: str, **kwargs) -> 'ClientConfig':
        """Create configuration with proxy."""
        return cls(
            proxy=ProxyConfig(url=proxy_url),
            **kwargs
        )

    @classmethod
    def insecure(cls, **kwargs) -> 'ClientConfig':
        """Create configuration with SSL verification disabled."""
        return cls(
            ssl=SSLConfig(verify=False, check_hostname=False),
            **kwargs
        )

    def get_session_headers(self) -> Dict[str, str]:
        """Default headers installed on created sessions."""
        return {
            'User-Agent': self.user_agent,
            **self.extra_headers
        }

    def get_connector_kwargs(self) -> Dict[str, Any]:
        """Get kwargs for aiohttp TCPConnector."""
        return {
            'limit': self.limit,
            'limit_per_host': self.limit_per_host,
            'ssl': self.ssl.create_ssl_context(),
        }

    def get_session_kwargs(self) -> Dict[str, Any]:
        """Get kwargs for aiohttp ClientSession."""
        return {
            'headers': self.get_session_headers(),
            'timeout': self.timeout.to_aiohttp_timeout(),
        }
