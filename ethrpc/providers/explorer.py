"""Block explorer proxy backend (Etherscan-style ``module=proxy`` API)."""

from collections.abc import Sequence
from typing import Any, ClassVar

from pydantic import ValidationError

from ethrpc.errors import ProtocolError
from ethrpc.helpers.constants import DEFAULT_EXPLORER_URL, DEFAULT_TIMEOUT, RATE_LIMIT_BACKOFF
from ethrpc.helpers.http import Transport
from ethrpc.helpers.http_models import HttpRequest
from ethrpc.providers.base import BATCH_OPERATION, EthProvider
from ethrpc.retry import RetryableCaller, require_credentials
from ethrpc.rpc_models import JsonRpcResponse, unwrap_result


class ExplorerEnvelope(JsonRpcResponse):
    """JSON-RPC envelope plus the explorer's own status fields.

    The explorer answers API-level failures (bad key, unknown action) with
    ``{"status": "0", "message": "NOTOK", "result": "<reason>"}`` instead
    of a JSON-RPC error object.
    """

    status: str | None = None
    message: str | None = None


class ExplorerProvider(EthProvider):
    """Client for a block explorer's JSON-RPC proxy.

    Calls are GET requests whose query carries ``module=proxy``, the method
    as ``action``, the API key and the method's named parameters. Every
    request goes through credential rotation.
    """

    unsupported_methods: ClassVar[frozenset[str]] = frozenset({
        "web3_clientVersion",
        "net_version",
        "net_listening",
        "net_peerCount",
        "eth_protocolVersion",
        "eth_syncing",
        "eth_getBalance",
        "eth_getLogs",
        BATCH_OPERATION,
    })
    named_params: ClassVar[bool] = True

    def __init__(
        self,
        credentials: Sequence[str],
        transport: Transport | None = None,
        *,
        url: str = DEFAULT_EXPLORER_URL,
        timeout: float = DEFAULT_TIMEOUT,
        backoff: float = RATE_LIMIT_BACKOFF,
        debug: bool = False,
    ) -> None:
        """Initialize the explorer provider.

        Args:
            credentials: Ordered API keys to rotate through
            transport: Optional transport override
            url: Explorer API endpoint
            timeout: Default timeout for requests in seconds
            backoff: Seconds to wait after a throttled attempt
            debug: Log every request and raw response

        Raises:
            ValueError: If no credential is given
        """
        credentials = require_credentials(credentials)
        super().__init__(transport, timeout=timeout, debug=debug)
        self.url = url
        self.caller = RetryableCaller(self.transport, credentials, backoff=backoff)

    def __str__(self) -> str:
        return "explorer"

    def _build_request(
        self, method: str, named: dict[str, str], credential: str
    ) -> HttpRequest:
        params = {"module": "proxy", "action": method, **named, "apikey": credential}
        return HttpRequest(method="GET", url=self.url, params=params)

    async def _send(
        self, method: str, params: list[Any], named: dict[str, str]
    ) -> Any:
        body = await self.caller.call(
            lambda credential: self._build_request(method, named, credential)
        )
        self._log_exchange(method, named, body)

        try:
            envelope = ExplorerEnvelope.model_validate_json(body)
        except ValidationError as e:
            msg = f"malformed explorer response: {body[:200]!r}"
            raise ProtocolError(msg) from e

        if envelope.status == "0" and envelope.error is None:
            msg = f"explorer error: {envelope.message} ({envelope.result})"
            raise ProtocolError(msg, rpc_message=str(envelope.result))

        return unwrap_result(envelope)


__all__ = ["ExplorerEnvelope", "ExplorerProvider"]
