"""Capability interface shared by every backend variant."""

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from types import TracebackType
from typing import Any, ClassVar, Self, TypeVar

from ethrpc import decoder
from ethrpc.errors import (
    DecodeError,
    NotFoundError,
    ProtocolError,
    RetryExhaustedError,
    TransportError,
    UnsupportedOperationError,
)
from ethrpc.helpers.constants import DEFAULT_BLOCK_TAG, DEFAULT_TIMEOUT
from ethrpc.helpers.hexcodec import format_hex
from ethrpc.helpers.http import HttpTransport, Transport
from ethrpc.helpers.logging import get_logger
from ethrpc.models import (
    Block,
    FilterParams,
    Log,
    Syncing,
    Transaction,
    TransactionReceipt,
    UncleBlock,
)
from ethrpc.rpc_models import CallState, JsonRpcRequest


logger = get_logger(__name__)

T = TypeVar("T")

BATCH_OPERATION = "batch"
"""Pseudo method name under which batch support is declared"""


class EthProvider(ABC):
    """Ethereum JSON-RPC client over one backend.

    Subclasses decide how a call is put on the wire (``_send``) and declare
    the RPC methods they cannot serve in ``unsupported_methods``. Everything
    else, decoding included, is shared, so every backend returns identical
    entities for identical node data.
    """

    unsupported_methods: ClassVar[frozenset[str]] = frozenset()
    named_params: ClassVar[bool] = False
    """True if raw calls are encoded from named params, False for positional"""

    def __init__(
        self,
        transport: Transport | None = None,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        debug: bool = False,
    ) -> None:
        """Initialize the provider.

        Args:
            transport: Transport to use; an HttpTransport is created (and
                owned) if None
            timeout: Request timeout for the created transport
            debug: Log every request and raw response
        """
        self._owns_transport = transport is None
        self.transport: Transport = transport or HttpTransport(timeout=timeout)
        self.debug = debug

    @abstractmethod
    async def _send(
        self, method: str, params: list[Any], named: dict[str, str]
    ) -> Any:
        """Put one call on the wire and return its raw JSON result.

        Args:
            method: RPC method name
            params: Positional params, used by JSON-RPC backends
            named: Named params, used by query-string backends
        """

    async def _send_batch(self, requests: Sequence[JsonRpcRequest]) -> list[Any]:
        """Send a batch and return raw results in request order."""
        raise UnsupportedOperationError(str(self), BATCH_OPERATION)

    def supports(self, method: str) -> bool:
        """Whether this backend can serve an RPC method (or "batch")."""
        return method not in self.unsupported_methods

    def _require(self, method: str) -> None:
        if not self.supports(method):
            raise UnsupportedOperationError(str(self), method)

    async def _invoke(
        self,
        method: str,
        params: list[Any] | None = None,
        named: dict[str, str] | None = None,
    ) -> Any:
        self._require(method)
        logger.debug("%s %s: %s", self, method, CallState.BUILDING)
        logger.debug("%s %s: %s", self, method, CallState.DISPATCHED)
        try:
            logger.debug("%s %s: %s", self, method, CallState.AWAITING_RESPONSE)
            return await self._send(method, params or [], named or {})
        except (TransportError, RetryExhaustedError):
            logger.debug("%s %s: %s", self, method, CallState.FAILED_TRANSPORT)
            raise
        except ProtocolError:
            logger.debug("%s %s: %s", self, method, CallState.FAILED_RPC_ERROR)
            raise

    def _decode(self, method: str, decode: Callable[[Any], T], raw: Any) -> T:
        try:
            result = decode(raw)
        except NotFoundError:
            logger.debug("%s %s: %s", self, method, CallState.FAILED_NOT_FOUND)
            raise
        except DecodeError:
            logger.debug("%s %s: %s", self, method, CallState.FAILED_DECODE)
            raise
        logger.debug("%s %s: %s", self, method, CallState.DECODED)
        return result

    async def _fetch(
        self,
        method: str,
        decode: Callable[[Any], T],
        params: list[Any] | None = None,
        named: dict[str, str] | None = None,
    ) -> T:
        raw = await self._invoke(method, params, named)
        return self._decode(method, decode, raw)

    def _log_exchange(self, method: str, request: Any, response: bytes) -> None:
        if self.debug:
            logger.info("request %s %s response %s", method, request, response)

    async def call(self, method: str, *params: Any, **named: str) -> Any:
        """Make a raw call and return the undecoded JSON result.

        Args:
            method: RPC method name (e.g., "eth_chainId")
            *params: Positional params (JSON-RPC backends)
            **named: Named params (query-string backends)

        Returns:
            Raw JSON result

        Raises:
            ValueError: If given a param style the backend cannot encode
            UnsupportedOperationError: If the backend cannot serve method
            TransportError: On network failure or unexpected HTTP status
            ProtocolError: On a malformed envelope or JSON-RPC error
        """
        if self.named_params and params:
            msg = f"{self} takes named params only, got positional {list(params)!r}"
            raise ValueError(msg)
        if not self.named_params and named:
            msg = f"{self} takes positional params only, got named {sorted(named)!r}"
            raise ValueError(msg)
        return await self._invoke(method, list(params), dict(named))

    async def batch_call(self, requests: Sequence[JsonRpcRequest]) -> list[Any]:
        """Send several calls in one round trip.

        Args:
            requests: Requests with unique, caller-chosen ids

        Returns:
            Raw results ordered as ``requests``

        Raises:
            UnsupportedOperationError: If the backend cannot batch
            ProtocolError: If the responses cannot be fully correlated or
                any call failed
        """
        self._require(BATCH_OPERATION)
        return await self._send_batch(requests)

    async def web3_client_version(self) -> str:
        """Return the current client version."""
        return await self._fetch("web3_clientVersion", decoder.decode_string)

    async def net_version(self) -> str:
        """Return the current network id."""
        return await self._fetch("net_version", decoder.decode_string)

    async def net_listening(self) -> bool:
        """Return True if the client is listening for network connections."""
        return await self._fetch("net_listening", decoder.decode_bool)

    async def net_peer_count(self) -> int:
        """Return the number of peers connected to the client."""
        return await self._fetch("net_peerCount", decoder.decode_quantity)

    async def eth_protocol_version(self) -> str:
        """Return the current Ethereum protocol version."""
        return await self._fetch("eth_protocolVersion", decoder.decode_string)

    async def eth_syncing(self) -> Syncing:
        """Return the sync status of the node."""
        return await self._fetch("eth_syncing", decoder.decode_syncing)

    async def eth_gas_price(self) -> int:
        """Return the current price per gas in wei."""
        return await self._fetch("eth_gasPrice", decoder.decode_big_quantity)

    async def eth_block_number(self) -> int:
        """Return the number of the most recent block."""
        return await self._fetch("eth_blockNumber", decoder.decode_quantity)

    async def eth_get_balance(
        self, address: str, block: str = DEFAULT_BLOCK_TAG
    ) -> int:
        """Return the balance of an address in wei.

        Args:
            address: Account address
            block: Block tag or hex block number
        """
        return await self._fetch(
            "eth_getBalance",
            decoder.decode_big_quantity,
            [address, block],
            {"address": address, "tag": block},
        )

    async def eth_get_storage_at(
        self, address: str, position: int, tag: str = DEFAULT_BLOCK_TAG
    ) -> str:
        """Return the 32-byte storage word at a slot of a contract.

        Args:
            address: Contract address
            position: Storage slot index
            tag: Block tag or hex block number
        """
        slot = format_hex(position)
        return await self._fetch(
            "eth_getStorageAt",
            decoder.decode_string,
            [address, slot, tag],
            {"address": address, "position": slot, "tag": tag},
        )

    async def eth_get_transaction_count(
        self, address: str, block: str = DEFAULT_BLOCK_TAG
    ) -> int:
        """Return the number of transactions sent from an address."""
        return await self._fetch(
            "eth_getTransactionCount",
            decoder.decode_quantity,
            [address, block],
            {"address": address, "tag": block},
        )

    async def eth_get_block_transaction_count_by_number(self, number: int) -> int:
        """Return the number of transactions in a block."""
        tag = format_hex(number)
        return await self._fetch(
            "eth_getBlockTransactionCountByNumber",
            decoder.decode_quantity,
            [tag],
            {"tag": tag},
        )

    async def eth_get_block_by_number(
        self, number: int, with_transactions: bool
    ) -> Block:
        """Return a block by height.

        Args:
            number: Block height
            with_transactions: True for full transaction objects, False for
                hash-only stubs

        Raises:
            NotFoundError: If the block does not exist
        """
        tag = format_hex(number)
        return await self._fetch(
            "eth_getBlockByNumber",
            lambda raw: decoder.decode_block(raw, with_transactions=with_transactions),
            [tag, with_transactions],
            {"tag": tag, "boolean": "true" if with_transactions else "false"},
        )

    async def eth_get_uncle_by_block_number_and_index(
        self, number: int, index: int
    ) -> UncleBlock:
        """Return an uncle of a block by its position.

        Raises:
            NotFoundError: If the block has no uncle at that position
        """
        tag, position = format_hex(number), format_hex(index)
        return await self._fetch(
            "eth_getUncleByBlockNumberAndIndex",
            decoder.decode_uncle,
            [tag, position],
            {"tag": tag, "index": position},
        )

    async def eth_get_transaction_by_hash(self, tx_hash: str) -> Transaction:
        """Return a transaction by hash.

        Raises:
            NotFoundError: If the transaction is unknown to the node
        """
        return await self._fetch(
            "eth_getTransactionByHash",
            decoder.decode_transaction,
            [tx_hash],
            {"txhash": tx_hash},
        )

    async def eth_get_transaction_by_block_number_and_index(
        self, block_number: int, index: int
    ) -> Transaction:
        """Return a transaction by block height and position."""
        tag, position = format_hex(block_number), format_hex(index)
        return await self._fetch(
            "eth_getTransactionByBlockNumberAndIndex",
            decoder.decode_transaction,
            [tag, position],
            {"tag": tag, "index": position},
        )

    async def eth_get_transaction_receipt(self, tx_hash: str) -> TransactionReceipt:
        """Return the receipt of a transaction.

        Receipts are not available for pending transactions.

        Raises:
            NotFoundError: If there is no receipt for the hash
        """
        return await self._fetch(
            "eth_getTransactionReceipt",
            decoder.decode_receipt,
            [tx_hash],
            {"txhash": tx_hash},
        )

    async def eth_get_logs(self, params: FilterParams) -> list[Log]:
        """Return all logs matching a filter."""
        return await self._fetch(
            "eth_getLogs", decoder.decode_logs, [params.to_params()]
        )

    async def aclose(self) -> None:
        """Close the transport if this provider created it."""
        if self._owns_transport:
            await self.transport.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()


__all__ = ["BATCH_OPERATION", "EthProvider"]
