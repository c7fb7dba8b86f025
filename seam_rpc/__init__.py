"""
seam-rpc: client-side JSON-RPC 2.0 transports

Turns method names and parameters into JSON-RPC 2.0 request envelopes, sends
them over a network channel and hands back typed outcomes:

1. protocol: call/outcome types, wire codec, batch correlation
2. transports: HTTP (single + batch) and ZeroMQ (single) transports behind a
   common interface
3. telemetry: OpenTelemetry metrics and trace propagation
"""

__version__ = "0.1.0"

from seam_rpc.errors import ConfigError, DecodeError, SeamRpcError, TransportError
from seam_rpc.protocol import (
    BatchResponse,
    ErrorObject,
    Failure,
    MethodCall,
    SingleResponse,
    Success,
    correlate,
)
from seam_rpc.transports import (
    BatchTransport,
    HttpTransport,
    HttpTransportBuilder,
    Transport,
    TransportFactory,
    TransportType,
    ZeroMQTransport,
)
from seam_rpc.config import TransportConfig

__all__ = [
    "SeamRpcError",
    "TransportError",
    "DecodeError",
    "ConfigError",
    "MethodCall",
    "ErrorObject",
    "Success",
    "Failure",
    "SingleResponse",
    "BatchResponse",
    "correlate",
    "Transport",
    "BatchTransport",
    "HttpTransport",
    "HttpTransportBuilder",
    "ZeroMQTransport",
    "TransportFactory",
    "TransportType",
    "TransportConfig",
]
