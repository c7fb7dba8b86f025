"""
Tests for HttpTransportBuilder options
"""
import socket

import httpx
import pytest

from seam_rpc.errors import ConfigError
from seam_rpc.transports.http import HttpTransport, HttpTransportBuilder


class TestAuthHeaders:
    """Test authentication header construction"""

    def test_basic_auth_with_password(self):
        builder = HttpTransportBuilder().basic_auth("username", "password")
        assert builder.default_headers["Authorization"] == "Basic dXNlcm5hbWU6cGFzc3dvcmQ="

    def test_basic_auth_without_password(self):
        builder = HttpTransportBuilder().basic_auth("username", None)
        assert builder.default_headers["Authorization"] == "Basic dXNlcm5hbWU6"

    def test_basic_auth_empty_username(self):
        builder = HttpTransportBuilder().basic_auth("", "password")
        assert builder.default_headers["Authorization"] == "Basic OnBhc3N3b3Jk"

    def test_bearer_auth(self):
        builder = HttpTransportBuilder().bearer_auth("Hold my bear")
        assert builder.default_headers["Authorization"] == "Bearer Hold my bear"

    def test_later_auth_replaces_earlier(self):
        builder = HttpTransportBuilder().basic_auth("username", "password").bearer_auth("t")
        assert builder.default_headers.get_list("Authorization") == ["Bearer t"]


class TestHeaders:
    """Test arbitrary header injection"""

    def test_header_and_headers(self):
        builder = (
            HttpTransportBuilder()
            .header("X-Api-Key", "k1")
            .headers({"X-Trace": "on", "X-Api-Key": "k2"})
        )
        assert builder.default_headers["X-Api-Key"] == "k2"
        assert builder.default_headers["X-Trace"] == "on"

    def test_options_chain(self):
        builder = HttpTransportBuilder()
        assert builder.timeout(1.0) is builder
        assert builder.connect_timeout(0.5) is builder
        assert builder.pool_idle_timeout(None) is builder
        assert builder.pool_max_idle_per_host(4) is builder
        assert builder.tcp_keepalive(30) is builder
        assert builder.tcp_nodelay(True) is builder
        assert builder.https_only(False) is builder


class TestClientOptions:
    """Test translation into httpx configuration"""

    def test_default_timeouts_disabled(self):
        timeout = HttpTransportBuilder()._timeouts()
        assert timeout.read is None
        assert timeout.connect is None

    def test_timeouts(self):
        timeout = HttpTransportBuilder().timeout(10.0).connect_timeout(2.0)._timeouts()
        assert timeout.read == 10.0
        assert timeout.connect == 2.0

    def test_pool_limits(self):
        limits = HttpTransportBuilder().pool_max_idle_per_host(8)._limits()
        assert limits.max_keepalive_connections == 8
        assert limits.keepalive_expiry == 90.0

        limits = HttpTransportBuilder().pool_idle_timeout(None)._limits()
        assert limits.keepalive_expiry is None
        assert limits.max_keepalive_connections is None

    def test_socket_options(self):
        assert HttpTransportBuilder()._socket_options() == []

        options = HttpTransportBuilder().tcp_nodelay(True).tcp_keepalive(15)._socket_options()
        assert (socket.IPPROTO_TCP, socket.TCP_NODELAY, 1) in options
        assert (socket.SOL_SOCKET, socket.SO_KEEPALIVE, 1) in options

    @pytest.mark.asyncio
    async def test_default_headers_reach_server(self, rpc_server):
        rpc_server.reply("/auth", {"jsonrpc": "2.0", "id": 1, "result": True})
        transport = (
            HttpTransport.builder()
            .bearer_auth("Hold my bear")
            .header("X-Client", "seam")
            .transport(httpx.MockTransport(rpc_server.handle))
            .build("http://rpc.test/auth")
        )
        async with transport:
            await transport.send("ping")

        request = rpc_server.requests[0]
        assert request.headers["Authorization"] == "Bearer Hold my bear"
        assert request.headers["X-Client"] == "seam"
        assert request.headers["Content-Type"] == "application/json"


class TestHttpsOnly:
    """Test the HTTPS-only restriction"""

    def test_plain_http_url_rejected(self):
        with pytest.raises(ConfigError):
            HttpTransportBuilder().https_only(True).build("http://rpc.test/")

    @pytest.mark.asyncio
    async def test_https_url_allowed(self, rpc_server):
        rpc_server.reply("/secure", {"jsonrpc": "2.0", "id": 1, "result": "ok"})
        transport = (
            HttpTransportBuilder()
            .https_only(True)
            .transport(httpx.MockTransport(rpc_server.handle))
            .build("https://rpc.test/secure")
        )
        async with transport:
            response = await transport.send("foo")
        assert response.outcome.result == "ok"
