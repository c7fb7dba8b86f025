"""
Error taxonomy for seam-rpc transports.

A failed round trip raises one of these exceptions. A JSON-RPC error object
returned by the server is not an exception: it is delivered as a
``Failure`` outcome.
"""

from typing import Optional, Union


class SeamRpcError(Exception):
    """Base class for all errors raised by seam-rpc."""


class TransportError(SeamRpcError):
    """The network collaborator failed to connect, send or receive.

    The collaborator's own exception is chained as ``__cause__``.
    """

    def __init__(self, message: str, kind: str = "transport"):
        super().__init__(message)
        self.kind = kind


class DecodeError(SeamRpcError):
    """The reply could not be parsed into a single or batch response."""

    def __init__(self, message: str, body: Optional[Union[bytes, str]] = None):
        super().__init__(message)
        self.body = body


class ConfigError(SeamRpcError, ValueError):
    """Invalid transport configuration."""
