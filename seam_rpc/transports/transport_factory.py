"""
Transport factory

Creates transport instances (HTTP, ZeroMQ) from a type name and a
configuration dictionary.
"""

from typing import Dict, Any

from seam_rpc.config import TransportConfig
from seam_rpc.transports.transport_interface import Transport
from seam_rpc.transports.zeromq.client import ZeroMQTransport


class TransportType:
    """Transport type constants"""
    HTTP = "http"
    ZEROMQ = "zeromq"


class TransportFactory:
    """Factory for transport instances"""

    @staticmethod
    def create_transport(transport_type: str, config: Dict[str, Any] = None) -> Transport:
        """Create a transport

        Args:
            transport_type: Transport type, "http" or "zeromq"
            config: Transport configuration; for "http" the keys of
                ``TransportConfig``, for "zeromq" ``server_address`` and
                ``timeout_ms``

        Returns:
            Transport: Transport instance (``BatchTransport`` for HTTP)

        Raises:
            ValueError: Invalid transport type
        """
        if config is None:
            config = {}

        if transport_type.lower() == TransportType.HTTP:
            return TransportConfig.from_dict(config).build()
        elif transport_type.lower() == TransportType.ZEROMQ:
            return ZeroMQTransport(
                server_address=config.get("server_address", "tcp://localhost:5555"),
                timeout_ms=config.get("timeout_ms", 5000)
            )
        else:
            raise ValueError(f"Invalid transport type: {transport_type}")
