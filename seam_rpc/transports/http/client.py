"""
HTTP transport

JSON-RPC 2.0 over HTTP POST. Single calls are posted as one object, batches
as one array. Connection pooling, TLS and timeouts belong to the
``httpx.AsyncClient`` created by ``HttpTransportBuilder``.
"""

import logging
import time
from typing import Any, Iterable, Optional

import httpx

from seam_rpc.errors import DecodeError, TransportError
from seam_rpc.protocol.codec import decode_response, encode_request
from seam_rpc.protocol.types import (
    BatchRequest,
    MethodCall,
    MethodCallRequest,
    Params,
    Response,
    SingleRequest,
    SingleResponse,
)
from seam_rpc.telemetry.metrics import increment_counter, record_latency, record_outcomes
from seam_rpc.telemetry.tracer import create_span, inject_trace_headers
from seam_rpc.transports.http.builder import HttpTransportBuilder
from seam_rpc.transports.transport_interface import BatchTransport, RequestIdCounter

logger = logging.getLogger(__name__)

BATCH_METHOD_LABEL = "<batch>"


class HttpTransport(BatchTransport):
    """
    HTTP transport, implements single and batch execution
    """

    def __init__(self, url: str, client: Optional[httpx.AsyncClient] = None):
        """Create an HTTP transport

        Args:
            url: JSON-RPC endpoint
            client: Preconfigured client, one with default options is built
                if None (same as ``HttpTransport.builder().build(url)``)
        """
        self.url = str(url)
        self._ids = RequestIdCounter()
        self._client = client if client is not None else HttpTransportBuilder().build_client(self.url)
        logger.info(f"HTTP transport created for {self.url}")

    @staticmethod
    def builder() -> HttpTransportBuilder:
        """Return an ``HttpTransportBuilder`` to configure a transport."""
        return HttpTransportBuilder()

    def prepare(self, method: Any, params: Optional[Params] = None) -> MethodCall:
        return MethodCall(method=str(method), params=params, id=self._ids.next())

    async def execute(self, call: MethodCall) -> Response:
        return await self._send_request(SingleRequest(call), call.method)

    async def execute_batch(self, calls: Iterable[MethodCall]) -> Response:
        calls = list(calls)
        if not calls:
            raise ValueError("execute_batch requires at least one call")
        return await self._send_request(BatchRequest(tuple(calls)), BATCH_METHOD_LABEL)

    async def close(self) -> None:
        """Close the connection pool"""
        await self._client.aclose()

    async def _send_request(self, request: MethodCallRequest, method: str) -> Response:
        body = encode_request(request)
        batch_size = len(request.calls) if isinstance(request, BatchRequest) else 1
        attributes = {"rpc.system": "jsonrpc", "rpc.method": method, "rpc.batch_size": batch_size}

        with create_span(f"jsonrpc {method}", attributes):
            headers = inject_trace_headers({"Content-Type": "application/json"})
            start_time = time.time()
            increment_counter("rpc.client.requests", 1, {"method": method})

            try:
                logger.debug(f"Sending request to {self.url}: {body[:200]!r}")
                http_response = await self._client.post(self.url, content=body, headers=headers)
            except httpx.TimeoutException as e:
                latency_ms = (time.time() - start_time) * 1000
                logger.error(f"Request timed out after {latency_ms:.2f}ms: {e}")
                increment_counter("rpc.client.errors", 1, {"type": "timeout", "method": method})
                raise TransportError(f"HTTP request to {self.url} timed out", kind="timeout") from e
            except httpx.HTTPError as e:
                logger.error(f"HTTP error calling {method}: {e}")
                increment_counter("rpc.client.errors", 1, {"type": "http_error", "method": method})
                raise TransportError(f"HTTP request to {self.url} failed: {e}") from e

            latency_ms = (time.time() - start_time) * 1000
            record_latency("rpc.client.latency", latency_ms, {"method": method})
            logger.debug(f"Received HTTP {http_response.status_code}, latency: {latency_ms:.2f}ms")

            try:
                response = decode_response(http_response.content)
            except DecodeError:
                logger.error(f"Invalid JSON-RPC reply (HTTP {http_response.status_code}): {http_response.content[:200]!r}")
                increment_counter("rpc.client.errors", 1, {"type": "invalid_response", "method": method})
                raise

            if isinstance(request, SingleRequest) and not isinstance(response, SingleResponse):
                logger.error(f"Batch reply to single call {request.call.id}: {http_response.content[:200]!r}")
                increment_counter("rpc.client.errors", 1, {"type": "invalid_response", "method": method})
                raise DecodeError(
                    f"expected a single response for call {request.call.id}, got a batch",
                    http_response.content,
                )

        record_outcomes(response, method)
        return response

