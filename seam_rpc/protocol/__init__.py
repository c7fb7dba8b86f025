"""
JSON-RPC 2.0 protocol layer

- types: calls, outcomes, single/batch request and response wrappers
- codec: wire encoding and reply decoding
- correlation: identifier-based matching of batch outcomes to calls
"""

from .types import (
    PARSE_ERROR,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    INVALID_PARAMS,
    INTERNAL_ERROR,
    Version,
    MethodCall,
    ErrorObject,
    Success,
    Failure,
    Outcome,
    SingleResponse,
    BatchResponse,
    Response,
    SingleRequest,
    BatchRequest,
    MethodCallRequest,
)
from .codec import encode_request, decode_response, decode_outcome
from .correlation import Correlation, correlate

__all__ = [
    "PARSE_ERROR",
    "INVALID_REQUEST",
    "METHOD_NOT_FOUND",
    "INVALID_PARAMS",
    "INTERNAL_ERROR",
    "Version",
    "MethodCall",
    "ErrorObject",
    "Success",
    "Failure",
    "Outcome",
    "SingleResponse",
    "BatchResponse",
    "Response",
    "SingleRequest",
    "BatchRequest",
    "MethodCallRequest",
    "encode_request",
    "decode_response",
    "decode_outcome",
    "Correlation",
    "correlate",
]
