"""
JSON-RPC 2.0 wire codec

Encodes outbound single/batch payloads as compact JSON and decodes replies
into ``SingleResponse`` / ``BatchResponse``. Any reply that does not have the
expected shape is rejected as a whole with ``DecodeError``.
"""

import json
from typing import Any, Union

from seam_rpc.errors import DecodeError
from seam_rpc.protocol.types import (
    BatchResponse,
    ErrorObject,
    Failure,
    MethodCallRequest,
    Outcome,
    Response,
    SingleResponse,
    Success,
    Version,
)


def encode_request(request: MethodCallRequest) -> bytes:
    """Serialize a single or batch request

    Args:
        request: SingleRequest or BatchRequest

    Returns:
        bytes: UTF-8 JSON body, batch calls kept in submission order
    """
    return json.dumps(
        request.to_json_value(), ensure_ascii=False, separators=(",", ":")
    ).encode("utf-8")


def decode_response(body: Union[bytes, str]) -> Response:
    """Parse a reply body into a response

    Args:
        body: Raw reply body

    Returns:
        Response: SingleResponse for an object, BatchResponse for an array

    Raises:
        DecodeError: Body is not JSON, or has an unexpected shape
    """
    try:
        raw = json.loads(body)
    except (ValueError, TypeError) as e:
        raise DecodeError(f"reply is not valid JSON: {e}", body) from e

    if isinstance(raw, dict):
        return SingleResponse(_decode_outcome(raw, body))
    if isinstance(raw, list):
        return BatchResponse(tuple(_decode_outcome(item, body) for item in raw))

    raise DecodeError(f"reply must be an object or an array, got {type(raw).__name__}", body)


def decode_outcome(obj: Any) -> Outcome:
    """Decode one response object into a Success or Failure."""
    return _decode_outcome(obj, None)


def _decode_outcome(obj: Any, body) -> Outcome:
    if not isinstance(obj, dict):
        raise DecodeError(f"response item must be an object, got {type(obj).__name__}", body)

    if obj.get("jsonrpc") != Version.V2_0.value:
        raise DecodeError("response item must carry jsonrpc '2.0'", body)

    has_result = "result" in obj
    has_error = "error" in obj
    if has_result == has_error:
        raise DecodeError("response item must contain exactly one of 'result' or 'error'", body)

    req_id = obj.get("id")
    if req_id is not None and (isinstance(req_id, bool) or not isinstance(req_id, (int, str))):
        raise DecodeError(f"invalid response id: {req_id!r}", body)

    if has_result:
        if req_id is None:
            raise DecodeError("success response must carry an id", body)
        return Success(result=obj["result"], id=req_id)

    return Failure(error=_decode_error(obj["error"], body), id=req_id)


def _decode_error(err: Any, body) -> ErrorObject:
    if not isinstance(err, dict):
        raise DecodeError("error member must be an object", body)

    code = err.get("code")
    message = err.get("message")
    if isinstance(code, bool) or not isinstance(code, int):
        raise DecodeError(f"error code must be an integer, got {code!r}", body)
    if not isinstance(message, str):
        raise DecodeError("error message must be a string", body)

    return ErrorObject(code=code, message=message, data=err.get("data"))

