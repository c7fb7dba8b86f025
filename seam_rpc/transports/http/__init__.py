"""
HTTP Transport Package

JSON-RPC 2.0 over HTTP POST with single and batch execution, backed by httpx.
"""

from seam_rpc.transports.http.builder import HttpTransportBuilder
from seam_rpc.transports.http.client import HttpTransport

__all__ = ["HttpTransport", "HttpTransportBuilder"]
