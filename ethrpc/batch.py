"""Batch JSON-RPC calls correlated by request id."""

from collections import Counter
from collections.abc import Awaitable, Callable, Sequence
from typing import Any

from ethrpc.errors import ProtocolError
from ethrpc.helpers.http_models import JsonValue
from ethrpc.helpers.logging import get_logger
from ethrpc.rpc_models import (
    JsonRpcRequest,
    JsonRpcResponse,
    parse_batch_response,
    unwrap_result,
)


logger = get_logger(__name__)


def check_unique_ids(requests: Sequence[JsonRpcRequest]) -> None:
    """Reject a batch whose requests reuse an id.

    Raises:
        ProtocolError: If any id appears more than once
    """
    duplicates = sorted(
        request_id
        for request_id, count in Counter(r.id for r in requests).items()
        if count > 1
    )
    if duplicates:
        msg = f"duplicate request ids in batch: {duplicates}"
        raise ProtocolError(msg)


def correlate(
    requests: Sequence[JsonRpcRequest],
    responses: Sequence[JsonRpcResponse],
) -> list[Any]:
    """Match responses to requests by id.

    Args:
        requests: Requests in the caller's order
        responses: Responses in whatever order the node sent them

    Returns:
        Raw results in request order

    Raises:
        ProtocolError: If a request has no response, a response id is
            duplicated or was never requested, or any response is an error
    """
    by_id: dict[Any, JsonRpcResponse] = {}
    for response in responses:
        if response.id in by_id:
            msg = f"duplicate response id {response.id!r} in batch"
            raise ProtocolError(msg)
        by_id[response.id] = response

    requested = {request.id for request in requests}
    unexpected = [rid for rid in by_id if rid not in requested]
    if unexpected:
        msg = f"unexpected response ids in batch: {unexpected!r}"
        raise ProtocolError(msg)

    missing = [request.id for request in requests if request.id not in by_id]
    if missing:
        msg = f"no response for request ids {missing}"
        raise ProtocolError(msg)

    return [unwrap_result(by_id[request.id]) for request in requests]


class BatchCaller:
    """Send several calls in one round trip and re-associate the replies.

    The whole batch succeeds or fails together; no partial results are
    returned.
    """

    def __init__(self, post: Callable[[JsonValue], Awaitable[bytes]]) -> None:
        """Initialize the batch caller.

        Args:
            post: Sends a JSON payload to the endpoint and returns the body
        """
        self.post = post

    async def call(self, requests: Sequence[JsonRpcRequest]) -> list[Any]:
        """Send the requests as one JSON array.

        Args:
            requests: Requests with caller-chosen, unique ids

        Returns:
            Raw results ordered as ``requests``

        Raises:
            ProtocolError: On duplicate ids, correlation failure or any
                JSON-RPC error in the batch
        """
        if not requests:
            return []

        check_unique_ids(requests)
        body = await self.post([request.model_dump() for request in requests])
        responses = parse_batch_response(body)

        logger.debug("Batch of %d requests got %d responses", len(requests), len(responses))
        return correlate(requests, responses)


__all__ = ["BatchCaller", "check_unique_ids", "correlate"]
