"""
JSON-RPC wire codec tests

Encoding must be bit-exact; decoding must reject any reply that is not a
well-formed single or batch response.
"""

import json

import pytest

from seam_rpc.errors import DecodeError
from seam_rpc.protocol.codec import decode_outcome, decode_response, encode_request
from seam_rpc.protocol.types import (
    METHOD_NOT_FOUND,
    BatchRequest,
    BatchResponse,
    ErrorObject,
    Failure,
    MethodCall,
    SingleRequest,
    SingleResponse,
    Success,
)


def test_encode_single_without_params():
    call = MethodCall(method="foo", id=1)
    assert encode_request(SingleRequest(call)) == b'{"jsonrpc":"2.0","method":"foo","id":1}'


def test_encode_single_with_empty_params():
    call = MethodCall(method="bar", params=[], id=1)
    assert encode_request(SingleRequest(call)) == b'{"jsonrpc":"2.0","method":"bar","params":[],"id":1}'


def test_encode_batch_keeps_submission_order():
    calls = [MethodCall(method="foo", id=1), MethodCall(method="bar", params=[], id=2)]
    body = encode_request(BatchRequest(calls))
    assert body == (
        b'[{"jsonrpc":"2.0","method":"foo","id":1},'
        b'{"jsonrpc":"2.0","method":"bar","params":[],"id":2}]'
    )


def test_encode_non_ascii_is_utf8():
    call = MethodCall(method="echo", params=["héllo"], id=3)
    body = encode_request(SingleRequest(call))
    assert body.decode("utf-8") == '{"jsonrpc":"2.0","method":"echo","params":["héllo"],"id":3}'


def test_success_round_trip_keeps_identifier():
    call = MethodCall(method="foo", params=[1, 2], id=42)
    sent = json.loads(encode_request(SingleRequest(call)))
    reply = json.dumps({"jsonrpc": "2.0", "id": sent["id"], "result": 3})

    response = decode_response(reply)

    assert isinstance(response, SingleResponse)
    assert response.outcome == Success(result=3, id=42)
    assert response.outcome.id == call.id


def test_decode_error_outcome():
    response = decode_response(
        '{"jsonrpc":"2.0","id":7,"error":{"code":-32601,"message":"Method not found","data":{"m":"x"}}}'
    )
    outcome = response.outcome
    assert isinstance(outcome, Failure)
    assert outcome.is_failure
    assert outcome.id == 7
    assert outcome.error == ErrorObject(code=METHOD_NOT_FOUND, message="Method not found", data={"m": "x"})


def test_decode_error_without_id():
    response = decode_response(b'{"jsonrpc":"2.0","id":null,"error":{"code":-32700,"message":"Parse error"}}')
    assert response.outcome.id is None
    assert response.outcome.error.data is None


def test_decode_mixed_batch_keeps_server_order():
    response = decode_response(json.dumps([
        {"jsonrpc": "2.0", "id": 2, "result": "y"},
        {"jsonrpc": "2.0", "id": 1, "error": {"code": -32602, "message": "Invalid params"}},
    ]))
    assert isinstance(response, BatchResponse)
    assert len(response) == 2
    assert response[0] == Success(result="y", id=2)
    assert response[1].is_failure and response[1].id == 1


def test_decode_null_result_is_success():
    response = decode_response('{"jsonrpc":"2.0","id":1,"result":null}')
    assert response.outcome == Success(result=None, id=1)


@pytest.mark.parametrize("body", [
    "42",
    '"x"',
    "null",
    "true",
    "not json",
    "",
])
def test_decode_rejects_non_object_non_array(body):
    with pytest.raises(DecodeError):
        decode_response(body)


@pytest.mark.parametrize("item", [
    {"id": 1, "result": "x"},
    {"jsonrpc": "1.0", "id": 1, "result": "x"},
    {"jsonrpc": "2.0", "id": 1},
    {"jsonrpc": "2.0", "id": 1, "result": "x", "error": {"code": 1, "message": "m"}},
    {"jsonrpc": "2.0", "result": "x"},
    {"jsonrpc": "2.0", "id": [1], "result": "x"},
    {"jsonrpc": "2.0", "id": 1, "error": "boom"},
    {"jsonrpc": "2.0", "id": 1, "error": {"code": "x", "message": "m"}},
    {"jsonrpc": "2.0", "id": 1, "error": {"code": 1}},
])
def test_decode_rejects_malformed_items(item):
    with pytest.raises(DecodeError):
        decode_outcome(item)


def test_malformed_batch_item_rejects_whole_reply():
    body = json.dumps([{"jsonrpc": "2.0", "id": 1, "result": "x"}, 5])
    with pytest.raises(DecodeError) as e:
        decode_response(body)
    assert e.value.body == body
