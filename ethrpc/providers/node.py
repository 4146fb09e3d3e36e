"""Direct node backend: JSON-RPC 2.0 over POST with positional params."""

from collections.abc import Sequence
from typing import Any

from ethrpc.batch import BatchCaller
from ethrpc.helpers.constants import DEFAULT_TIMEOUT
from ethrpc.helpers.http import Transport
from ethrpc.helpers.http_models import HttpRequest, JsonValue
from ethrpc.providers.base import EthProvider
from ethrpc.retry import send_once
from ethrpc.rpc_models import (
    JsonRpcRequest,
    parse_response,
    unwrap_result,
)


class NodeProvider(EthProvider):
    """Ethereum JSON-RPC client for a node reachable at one URL.

    Example:
        ```python
        async with NodeProvider("http://localhost:8545") as node:
            height = await node.eth_block_number()
            block = await node.eth_get_block_by_number(height, with_transactions=True)
        ```
    """

    def __init__(
        self,
        rpc_url: str,
        transport: Transport | None = None,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        debug: bool = False,
    ) -> None:
        """Initialize the node provider.

        Args:
            rpc_url: Ethereum JSON-RPC endpoint URL
            transport: Optional transport override
            timeout: Default timeout for requests in seconds
            debug: Log every request and raw response

        Raises:
            ValueError: If rpc_url is empty or None
        """
        if not rpc_url:
            msg = "RPC URL cannot be empty"
            raise ValueError(msg)

        super().__init__(transport, timeout=timeout, debug=debug)
        self.rpc_url = rpc_url

    def __str__(self) -> str:
        return f"node-{self.rpc_url}"

    async def _post(self, payload: JsonValue) -> bytes:
        """POST a JSON payload and return the raw body."""
        return await send_once(
            self.transport,
            HttpRequest(method="POST", url=self.rpc_url, json_body=payload),
        )

    async def _send(
        self, method: str, params: list[Any], named: dict[str, str]
    ) -> Any:
        request = JsonRpcRequest(method=method, params=params, id=1)
        payload = request.model_dump()
        body = await self._post(payload)
        self._log_exchange(method, payload, body)
        return unwrap_result(parse_response(body))

    async def _send_batch(self, requests: Sequence[JsonRpcRequest]) -> list[Any]:
        return await BatchCaller(self._post).call(requests)


__all__ = ["NodeProvider"]
