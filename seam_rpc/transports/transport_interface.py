"""
Transport interface

Every network transport implements ``Transport`` (prepare a call, execute it).
Transports that can ship several calls in one message also implement
``BatchTransport``. Upper layers only depend on these two capabilities, so the
network collaborator can be swapped without touching caller code.
"""

import abc
import itertools
import threading
from typing import Any, Iterable, Optional, Tuple

from seam_rpc.protocol.types import MethodCall, Params, Response


class RequestIdCounter:
    """Process-local source of request identifiers

    Starts at 1 and only moves forward. ``next()`` is a single
    fetch-and-increment step, so callers on different threads or tasks never
    observe the same value.
    """

    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            return next(self._counter)


class Transport(abc.ABC):
    """Basic capability: prepare and execute single calls"""

    @abc.abstractmethod
    def prepare(self, method: Any, params: Optional[Params] = None) -> MethodCall:
        """Build a call with a fresh request identifier

        Args:
            method: Method name, converted with ``str``
            params: Positional (list) or named (dict) parameters, None to omit

        Returns:
            MethodCall: Call ready for ``execute``
        """

    @abc.abstractmethod
    async def execute(self, call: MethodCall) -> Response:
        """Send one call and wait for its reply

        Args:
            call: Prepared call

        Returns:
            SingleResponse: Success or protocol error outcome

        Raises:
            TransportError: The network collaborator failed
            DecodeError: The reply has an unexpected shape
        """

    async def send(self, method: Any, params: Optional[Params] = None) -> Response:
        """Prepare and execute a call in one step."""
        return await self.execute(self.prepare(method, params))

    async def close(self) -> None:
        """Release network resources"""

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()


class BatchTransport(Transport):
    """Extended capability: execute several calls in one message"""

    @abc.abstractmethod
    async def execute_batch(self, calls: Iterable[MethodCall]) -> Response:
        """Send calls as one batch and wait for the reply

        The returned outcomes keep the server's order. Use
        ``seam_rpc.protocol.correlate`` to match them to ``calls``.

        Args:
            calls: Non-empty iterable of prepared calls

        Returns:
            Response: BatchResponse, or SingleResponse when the server
            rejects the batch as a whole

        Raises:
            ValueError: ``calls`` is empty
            TransportError: The network collaborator failed
            DecodeError: The reply has an unexpected shape
        """

    async def send_batch(self, requests: Iterable[Tuple[Any, Optional[Params]]]) -> Response:
        """Prepare every (method, params) pair in order and execute them as a batch."""
        calls = [self.prepare(method, params) for method, params in requests]
        return await self.execute_batch(calls)
