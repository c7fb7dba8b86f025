"""
ZeroMQ Transport Package

ZeroMQ REQ-socket transport with the basic (single call) capability.
"""

from seam_rpc.transports.zeromq.client import ZeroMQTransport

__all__ = ["ZeroMQTransport"]
