"""
ZeroMQ客户端传输

实现基于ZeroMQ REQ套接字的JSON-RPC 2.0传输。
仅提供基础能力：单个调用，不支持批量调用。
"""

import asyncio
import logging
import time
from typing import Any, Optional

import zmq
import zmq.asyncio

from seam_rpc.errors import DecodeError, TransportError
from seam_rpc.protocol.codec import decode_response, encode_request
from seam_rpc.protocol.types import MethodCall, Params, Response, SingleRequest, SingleResponse
from seam_rpc.telemetry.metrics import increment_counter, record_latency, record_outcomes
from seam_rpc.transports.transport_interface import RequestIdCounter, Transport

logger = logging.getLogger(__name__)


class ZeroMQTransport(Transport):
    """
    ZeroMQ传输，基于REQ套接字
    REQ套接字严格交替发送和接收，同一时间只有一个请求在途；
    并发调用者在asyncio锁上排队
    """

    def __init__(self,
                 server_address: str = "tcp://localhost:5555",
                 timeout_ms: int = 5000,
                 context: Optional[zmq.asyncio.Context] = None):
        """初始化ZeroMQ传输

        Args:
            server_address: ZeroMQ服务器地址
            timeout_ms: 请求超时时间(毫秒)
            context: 共享的asyncio上下文，为None时新建
        """
        self.server_address = server_address
        self.timeout_ms = timeout_ms
        self._ids = RequestIdCounter()
        self._owns_context = context is None
        self.context = context if context is not None else zmq.asyncio.Context()
        self._lock = asyncio.Lock()
        self.socket = None
        self._connect()
        logger.info(f"ZeroMQ传输连接到 {server_address}")

    def _connect(self):
        self.socket = self.context.socket(zmq.REQ)
        self.socket.setsockopt(zmq.LINGER, 0)
        self.socket.connect(self.server_address)

    def _reset_socket(self):
        # 未收到响应的REQ套接字无法再次发送
        if self.socket is not None:
            self.socket.close()
        self._connect()

    def prepare(self, method: Any, params: Optional[Params] = None) -> MethodCall:
        return MethodCall(method=str(method), params=params, id=self._ids.next())

    async def execute(self, call: MethodCall) -> Response:
        """发送单个调用并等待响应

        Args:
            call: 已准备好的调用

        Returns:
            SingleResponse: 成功或协议错误结果

        Raises:
            TransportError: 请求超时或ZeroMQ错误
            DecodeError: 响应无效
        """
        body = encode_request(SingleRequest(call))
        start_time = time.time()

        # 增加请求计数指标
        increment_counter("rpc.client.requests", 1, {"method": call.method})

        async with self._lock:
            try:
                logger.debug(f"发送请求: {body[:200]!r}")
                reply = await asyncio.wait_for(self._round_trip(body), self.timeout_ms / 1000.0)
            except asyncio.CancelledError:
                # 调用被取消时REQ套接字仍在等待响应
                self._reset_socket()
                logger.warning(f"请求 {call.id} 已取消，重置套接字")
                raise
            except asyncio.TimeoutError as e:
                self._reset_socket()
                logger.error(f"请求超时，已等待 {self.timeout_ms}ms")
                increment_counter("rpc.client.errors", 1, {"type": "timeout", "method": call.method})
                raise TransportError(f"ZeroMQ请求超时 ({self.timeout_ms}ms)", kind="timeout") from e
            except zmq.ZMQError as e:
                self._reset_socket()
                logger.error(f"ZeroMQ错误: {str(e)}")
                increment_counter("rpc.client.errors", 1, {"type": "zmq_error", "method": call.method})
                raise TransportError(f"ZeroMQ连接错误: {str(e)}") from e

        # 记录延迟指标
        latency_ms = (time.time() - start_time) * 1000
        record_latency("rpc.client.latency", latency_ms, {"method": call.method})
        logger.debug(f"收到响应，延迟: {latency_ms:.2f}ms")

        try:
            response = decode_response(reply)
        except DecodeError:
            logger.error(f"无效的JSON-RPC 2.0响应: {reply[:200]!r}")
            increment_counter("rpc.client.errors", 1, {"type": "invalid_response", "method": call.method})
            raise

        if not isinstance(response, SingleResponse):
            increment_counter("rpc.client.errors", 1, {"type": "invalid_response", "method": call.method})
            raise DecodeError(f"单个调用 {call.id} 收到了批量响应", reply)

        record_outcomes(response, call.method)
        return response

    async def _round_trip(self, body: bytes) -> bytes:
        await self.socket.send(body)
        return await self.socket.recv()

    async def close(self) -> None:
        """关闭套接字和上下文"""
        if self.socket is not None:
            self.socket.close()
            self.socket = None
        if self._owns_context:
            self.context.term()
