"""
HTTP transport builder

Collects headers, timeouts, pool and socket options and turns them into a
configured ``httpx.AsyncClient`` for ``HttpTransport``. None of these options
affect the JSON-RPC protocol logic.
"""

import base64
import logging
import socket
from typing import Any, List, Mapping, Optional, Tuple

import httpx

from seam_rpc.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_POOL_IDLE_TIMEOUT = 90.0


class HttpTransportBuilder:
    """Builds an ``HttpTransport`` with custom configuration

    Every option method returns the builder so calls can be chained::

        transport = (
            HttpTransport.builder()
            .bearer_auth(token)
            .timeout(10.0)
            .build("https://node.example.com/rpc")
        )
    """

    def __init__(self):
        self._headers = httpx.Headers()
        self._timeout: Optional[float] = None
        self._connect_timeout: Optional[float] = None
        self._pool_idle_timeout: Optional[float] = DEFAULT_POOL_IDLE_TIMEOUT
        self._pool_max_idle_per_host: Optional[int] = None
        self._tcp_keepalive: Optional[float] = None
        self._tcp_nodelay = False
        self._https_only = False
        self._transport: Optional[httpx.AsyncBaseTransport] = None

    @property
    def default_headers(self) -> httpx.Headers:
        """Headers sent with every request"""
        return self._headers

    # HTTP header options

    def basic_auth(self, username: Any, password: Optional[Any] = None) -> "HttpTransportBuilder":
        """Enable basic authentication."""
        if password is not None:
            credentials = f"{username}:{password}"
        else:
            credentials = f"{username}:"
        token = base64.b64encode(credentials.encode("utf-8")).decode("ascii")
        return self.header("Authorization", f"Basic {token}")

    def bearer_auth(self, token: Any) -> "HttpTransportBuilder":
        """Enable bearer authentication."""
        return self.header("Authorization", f"Bearer {token}")

    def header(self, name: str, value: str) -> "HttpTransportBuilder":
        """Set a header for every request, replacing an existing value."""
        self._headers[name] = value
        return self

    def headers(self, headers: Mapping[str, str]) -> "HttpTransportBuilder":
        """Add headers for every request."""
        self._headers.update(headers)
        return self

    # Timeout options

    def timeout(self, seconds: float) -> "HttpTransportBuilder":
        """Enable a request timeout.

        Applied from when the request starts connecting until the response
        body has finished. Default is no timeout.
        """
        self._timeout = seconds
        return self

    def connect_timeout(self, seconds: float) -> "HttpTransportBuilder":
        """Set a timeout for only the connect phase. Default is None."""
        self._connect_timeout = seconds
        return self

    def pool_idle_timeout(self, seconds: Optional[float]) -> "HttpTransportBuilder":
        """Set a timeout for idle sockets being kept alive.

        Pass None to keep idle sockets forever. Default is 90 seconds.
        """
        self._pool_idle_timeout = seconds
        return self

    def pool_max_idle_per_host(self, maximum: int) -> "HttpTransportBuilder":
        """Set the maximum number of idle connections kept in the pool."""
        self._pool_max_idle_per_host = maximum
        return self

    # TCP options

    def tcp_nodelay(self, enabled: bool) -> "HttpTransportBuilder":
        """Set whether sockets have ``TCP_NODELAY`` enabled. Default is False."""
        self._tcp_nodelay = enabled
        return self

    def tcp_keepalive(self, seconds: Optional[float]) -> "HttpTransportBuilder":
        """Enable ``SO_KEEPALIVE`` with the given probe interval.

        If None, the option is not set.
        """
        self._tcp_keepalive = seconds
        return self

    # TLS options

    def https_only(self, enabled: bool) -> "HttpTransportBuilder":
        """Restrict the transport to HTTPS requests. Default is False."""
        self._https_only = enabled
        return self

    def transport(self, transport: httpx.AsyncBaseTransport) -> "HttpTransportBuilder":
        """Use a custom httpx transport instead of the default connection pool.

        Pool and socket options are ignored when a custom transport is set.
        """
        self._transport = transport
        return self

    def build(self, url: str):
        """Return an ``HttpTransport`` posting to ``url`` with this configuration

        Raises:
            ConfigError: ``https_only`` is set and ``url`` is not https
        """
        from seam_rpc.transports.http.client import HttpTransport

        url = str(url)
        return HttpTransport(url, client=self.build_client(url))

    def build_client(self, url: str) -> httpx.AsyncClient:
        """Create the ``httpx.AsyncClient`` for ``url``."""
        if self._https_only and httpx.URL(url).scheme != "https":
            raise ConfigError(f"https_only is enabled but url is not https: {url}")

        event_hooks = {"request": [_reject_plain_http]} if self._https_only else {}

        if self._transport is not None:
            transport = self._transport
        else:
            transport = httpx.AsyncHTTPTransport(
                limits=self._limits(),
                socket_options=self._socket_options() or None,
            )

        logger.debug(
            f"Building HTTP client for {url}: timeout={self._timeout}, "
            f"connect_timeout={self._connect_timeout}, https_only={self._https_only}"
        )
        return httpx.AsyncClient(
            headers=self._headers,
            timeout=self._timeouts(),
            transport=transport,
            event_hooks=event_hooks,
        )

    def _timeouts(self) -> httpx.Timeout:
        if self._connect_timeout is None:
            return httpx.Timeout(self._timeout)
        return httpx.Timeout(self._timeout, connect=self._connect_timeout)

    def _limits(self) -> httpx.Limits:
        return httpx.Limits(
            max_connections=None,
            max_keepalive_connections=self._pool_max_idle_per_host,
            keepalive_expiry=self._pool_idle_timeout,
        )

    def _socket_options(self) -> List[Tuple[int, int, int]]:
        options = []
        if self._tcp_nodelay:
            options.append((socket.IPPROTO_TCP, socket.TCP_NODELAY, 1))
        if self._tcp_keepalive is not None:
            interval = max(1, int(self._tcp_keepalive))
            options.append((socket.SOL_SOCKET, socket.SO_KEEPALIVE, 1))
            if hasattr(socket, "TCP_KEEPIDLE"):
                options.append((socket.IPPROTO_TCP, socket.TCP_KEEPIDLE, interval))
            if hasattr(socket, "TCP_KEEPINTVL"):
                options.append((socket.IPPROTO_TCP, socket.TCP_KEEPINTVL, interval))
        return options


async def _reject_plain_http(request: httpx.Request) -> None:
    if request.url.scheme != "https":
        raise httpx.UnsupportedProtocol(
            f"https_only transport refused {request.url.scheme} request", request=request
        )
