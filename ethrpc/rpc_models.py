"""Pydantic models for JSON-RPC requests and responses."""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from ethrpc.errors import ProtocolError
from ethrpc.helpers.constants import JSONRPC_VERSION


class CallState(StrEnum):
    """Lifecycle of one logical RPC call."""

    BUILDING = "building"
    DISPATCHED = "dispatched"
    AWAITING_RESPONSE = "awaiting_response"
    DECODED = "decoded"
    FAILED_TRANSPORT = "failed_transport"
    FAILED_DECODE = "failed_decode"
    FAILED_RPC_ERROR = "failed_rpc_error"
    FAILED_NOT_FOUND = "failed_not_found"


class JsonRpcRequest(BaseModel):
    """JSON-RPC 2.0 request model."""

    jsonrpc: str = Field(default=JSONRPC_VERSION, description="JSON-RPC version")
    method: str = Field(..., description="Method name to call")
    params: list[Any] = Field(
        default_factory=list, description="Method parameters"
    )
    id: int = Field(default=1, description="Request ID")

    model_config = ConfigDict(frozen=True)


class JsonRpcError(BaseModel):
    """Error object carried by a failed JSON-RPC response."""

    code: int = Field(..., description="Error code")
    message: str = Field(default="", description="Error message")
    data: Any = Field(default=None, description="Optional error payload")


class JsonRpcResponse(BaseModel):
    """JSON-RPC 2.0 response model.

    ``result`` is kept as raw JSON; decoding it is the decoder's job.
    """

    jsonrpc: str = Field(default=JSONRPC_VERSION, description="JSON-RPC version")
    id: int | str | None = Field(default=None, description="Request ID")
    result: Any = Field(default=None, description="Raw JSON result")
    error: JsonRpcError | None = Field(default=None, description="Error object")

    model_config = ConfigDict(extra="ignore")


def make_request(method: str, *params: Any, request_id: int = 1) -> JsonRpcRequest:
    """Build a request with positional params.

    Args:
        method: RPC method name (e.g., "eth_blockNumber")
        *params: Positional parameters
        request_id: Request ID

    Returns:
        Request envelope

    Example:
        ```python
        requests = [
            make_request("eth_blockNumber", request_id=1),
            make_request("eth_getBalance", "0xabc...", "latest", request_id=2),
        ]
        results = await provider.batch_call(requests)
        ```
    """
    return JsonRpcRequest(method=method, params=list(params), id=request_id)


_batch_adapter: TypeAdapter[list[JsonRpcResponse]] = TypeAdapter(list[JsonRpcResponse])


def parse_response(body: bytes) -> JsonRpcResponse:
    """Parse a single response envelope.

    Raises:
        ProtocolError: If the body is not a JSON-RPC response object
    """
    try:
        return JsonRpcResponse.model_validate_json(body)
    except ValidationError as e:
        msg = f"malformed JSON-RPC response: {body[:200]!r}"
        raise ProtocolError(msg) from e


def parse_batch_response(body: bytes) -> list[JsonRpcResponse]:
    """Parse a batch response (a JSON array of envelopes).

    Raises:
        ProtocolError: If the body is not an array of response objects
    """
    try:
        return _batch_adapter.validate_json(body)
    except ValidationError as e:
        msg = f"malformed JSON-RPC batch response: {body[:200]!r}"
        raise ProtocolError(msg) from e


def unwrap_result(response: JsonRpcResponse) -> Any:
    """Return the raw result, raising if the envelope carries an error.

    Raises:
        ProtocolError: With the JSON-RPC error code and message preserved,
            or if the envelope carries neither result nor error
    """
    if response.error is not None:
        raise ProtocolError.from_rpc_error(response.error.code, response.error.message)
    # An explicit null result is a valid answer; an absent one is not
    if "result" not in response.model_fields_set:
        msg = f"JSON-RPC response {response.id!r} has neither result nor error"
        raise ProtocolError(msg)
    return response.result


__all__ = [
    "CallState",
    "JsonRpcError",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "make_request",
    "parse_batch_response",
    "parse_response",
    "unwrap_result",
]
