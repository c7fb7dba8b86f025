"""
JSON-RPC 2.0 message types

Calls, outcomes and the single/batch wrappers used on both sides of the wire.
All types are immutable once constructed.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

# JSON-RPC 2.0 standard error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603

Params = Union[List[Any], Dict[str, Any]]
Id = Union[int, str]


class Version(str, Enum):
    """Protocol version tag"""
    V2_0 = "2.0"


@dataclass(frozen=True)
class MethodCall:
    """A prepared call carrying its request identifier"""
    method: str
    id: Id
    params: Optional[Params] = None
    jsonrpc: Version = Version.V2_0

    def to_dict(self) -> Dict[str, Any]:
        """Wire representation; ``params`` is omitted when absent."""
        d: Dict[str, Any] = {"jsonrpc": self.jsonrpc.value, "method": self.method}
        if self.params is not None:
            d["params"] = self.params
        d["id"] = self.id
        return d


@dataclass(frozen=True)
class ErrorObject:
    code: int
    message: str
    data: Optional[Any] = None

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {"code": self.code, "message": self.message}
        if self.data is not None:
            d["data"] = self.data
        return d


@dataclass(frozen=True)
class Success:
    """Successful outcome of one call"""
    result: Any
    id: Id
    jsonrpc: Version = Version.V2_0

    is_success = True
    is_failure = False

    def to_dict(self) -> Dict[str, Any]:
        return {"jsonrpc": self.jsonrpc.value, "id": self.id, "result": self.result}


@dataclass(frozen=True)
class Failure:
    """Error outcome of one call

    ``id`` is None when the server could not read the identifier of the
    original call.
    """
    error: ErrorObject
    id: Optional[Id] = None
    jsonrpc: Version = Version.V2_0

    is_success = False
    is_failure = True

    def to_dict(self) -> Dict[str, Any]:
        return {"jsonrpc": self.jsonrpc.value, "id": self.id, "error": self.error.to_dict()}


Outcome = Union[Success, Failure]


@dataclass(frozen=True)
class SingleResponse:
    outcome: Outcome

    is_batch = False


@dataclass(frozen=True)
class BatchResponse:
    """Outcomes of a batch, in the order the server returned them"""
    outcomes: Tuple[Outcome, ...] = field(default_factory=tuple)

    is_batch = True

    def __post_init__(self):
        object.__setattr__(self, "outcomes", tuple(self.outcomes))

    def __iter__(self) -> Iterator[Outcome]:
        return iter(self.outcomes)

    def __len__(self) -> int:
        return len(self.outcomes)

    def __getitem__(self, index: int) -> Outcome:
        return self.outcomes[index]


Response = Union[SingleResponse, BatchResponse]


@dataclass(frozen=True)
class SingleRequest:
    call: MethodCall

    def to_json_value(self) -> Dict[str, Any]:
        return self.call.to_dict()


@dataclass(frozen=True)
class BatchRequest:
    calls: Tuple[MethodCall, ...]

    def __post_init__(self):
        object.__setattr__(self, "calls", tuple(self.calls))

    def to_json_value(self) -> List[Dict[str, Any]]:
        return [call.to_dict() for call in self.calls]


MethodCallRequest = Union[SingleRequest, BatchRequest]
