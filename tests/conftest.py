"""
Shared fixtures

``rpc_server`` simulates a JSON-RPC HTTP endpoint on top of
``httpx.MockTransport``: routes are keyed by URL path, every request body is
recorded for wire-format assertions.
"""

import json
from typing import Any, Callable, Dict, List, Union

import httpx
import pytest

from seam_rpc.transports.http import HttpTransport

Route = Callable[[httpx.Request], httpx.Response]


class FakeRpcServer:
    """Path-routed JSON-RPC endpoint for HttpTransport tests"""

    def __init__(self):
        self.routes: Dict[str, Route] = {}
        self.requests: List[httpx.Request] = []

    def reply(self, path: str, body: Union[str, bytes, Any], status_code: int = 200):
        """Answer every request on ``path`` with a fixed body."""
        if isinstance(body, str):
            content = body.encode("utf-8")
        elif isinstance(body, bytes):
            content = body
        else:
            content = json.dumps(body).encode("utf-8")
        self.routes[path] = lambda request: httpx.Response(status_code, content=content)

    def route(self, path: str, handler: Route):
        self.routes[path] = handler

    def echo(self, path: str):
        """Answer each call with its own params, keeping the request's shape."""
        self.routes[path] = _echo

    def bodies(self, path: str = None) -> List[str]:
        return [
            r.content.decode("utf-8") for r in self.requests
            if path is None or r.url.path == path
        ]

    def handle(self, request: httpx.Request) -> httpx.Response:
        assert request.method == "POST"
        self.requests.append(request)
        handler = self.routes.get(request.url.path)
        if handler is None:
            return httpx.Response(404, content=b"not found")
        return handler(request)

    def transport(self, path: str, base_url: str = "http://rpc.test") -> HttpTransport:
        """HttpTransport posting to ``path`` on this server"""
        return (
            HttpTransport.builder()
            .transport(httpx.MockTransport(self.handle))
            .build(base_url + path)
        )


def _echo(request: httpx.Request) -> httpx.Response:
    payload = json.loads(request.content)

    def answer(call):
        return {"jsonrpc": "2.0", "id": call["id"], "result": call.get("params")}

    if isinstance(payload, list):
        return httpx.Response(200, json=[answer(call) for call in payload])
    return httpx.Response(200, json=answer(payload))


@pytest.fixture
def rpc_server() -> FakeRpcServer:
    return FakeRpcServer()

