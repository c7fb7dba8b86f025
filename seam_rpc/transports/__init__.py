"""
Transports Module

Network transports sharing one interface:
- http: JSON-RPC 2.0 over HTTP POST (single and batch), backed by httpx
- zeromq: JSON-RPC 2.0 over a ZeroMQ REQ socket (single calls only)
"""

from .transport_interface import BatchTransport, RequestIdCounter, Transport
from .http import HttpTransport, HttpTransportBuilder
from .zeromq import ZeroMQTransport
from .transport_factory import TransportFactory, TransportType

__all__ = [
    "Transport",
    "BatchTransport",
    "RequestIdCounter",
    "HttpTransport",
    "HttpTransportBuilder",
    "ZeroMQTransport",
    "TransportFactory",
    "TransportType"
]
