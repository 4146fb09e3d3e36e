"""Decode raw JSON-RPC results into canonical entities.

Decoding is two-staged: the raw JSON is validated into a wire shape from
``ethrpc.wire`` (which parses every quantity through the hex codec) and the
wire shape is then lifted into its canonical model. Lookups that come back
as ``null``, or lift to an entity without its identifying hash, raise
NotFoundError.
"""

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from ethrpc.errors import DecodeError, NotFoundError
from ethrpc.helpers.hexcodec import parse_big_int, parse_int
from ethrpc.models import (
    Block,
    Log,
    Syncing,
    Transaction,
    TransactionReceipt,
    UncleBlock,
)
from ethrpc.wire import (
    WireBlock,
    WireBlockWithHashes,
    WireBlockWithTransactions,
    WireLog,
    WireSyncing,
    WireTransaction,
    WireTransactionReceipt,
    WireUncleBlock,
)


W = TypeVar("W", bound=BaseModel)

# Selected by the caller's with_transactions flag, never by payload shape.
BLOCK_SHAPES: dict[bool, type[WireBlock]] = {
    True: WireBlockWithTransactions,
    False: WireBlockWithHashes,
}


def _validate(shape: type[W], raw: Any, what: str) -> W:
    try:
        return shape.model_validate(raw)
    except ValidationError as e:
        msg = f"invalid {what}: {e}"
        raise DecodeError(msg) from e


def _require_result(raw: Any, what: str) -> None:
    if raw is None:
        msg = f"{what} not found"
        raise NotFoundError(msg)


def _require_hash(value: str, what: str) -> None:
    if not value:
        msg = f"{what} not found"
        raise NotFoundError(msg)


def decode_quantity(raw: Any) -> int:
    """Decode a quantity result that must fit the native integer range.

    Raises:
        DecodeError: If raw is not a valid hex quantity
    """
    return parse_int(raw)


def decode_big_quantity(raw: Any) -> int:
    """Decode an arbitrary-precision quantity result (balances, gas price)."""
    return parse_big_int(raw)


def decode_string(raw: Any) -> str:
    """Decode an opaque string result (versions, storage words)."""
    if not isinstance(raw, str):
        msg = f"expected string result, got {type(raw).__name__}"
        raise DecodeError(msg)
    return raw


def decode_bool(raw: Any) -> bool:
    """Decode a boolean result."""
    if not isinstance(raw, bool):
        msg = f"expected boolean result, got {type(raw).__name__}"
        raise DecodeError(msg)
    return raw


def decode_syncing(raw: Any) -> Syncing:
    """Decode an eth_syncing result.

    Args:
        raw: JSON ``false`` or a sync progress object

    Returns:
        Syncing with is_syncing False and zero heights for ``false``,
        otherwise is_syncing True with the decoded heights

    Raises:
        DecodeError: If raw is neither ``false`` nor a valid progress object
    """
    if raw is False:
        return Syncing(is_syncing=False)
    if not isinstance(raw, dict):
        msg = f"invalid syncing result: {raw!r}"
        raise DecodeError(msg)
    return _validate(WireSyncing, raw, "syncing status").to_entity()


def decode_block(raw: Any, *, with_transactions: bool) -> Block:
    """Decode an eth_getBlockBy* result.

    Args:
        raw: Raw JSON result
        with_transactions: The flag sent with the request; True expects full
            transaction objects, False expects transaction hashes

    Returns:
        Block whose transactions are full entities or hash-only stubs

    Raises:
        NotFoundError: If the node returned null or a block without hash
        DecodeError: If the payload does not match the requested shape
    """
    _require_result(raw, "block")
    block = _validate(BLOCK_SHAPES[with_transactions], raw, "block").to_entity()
    _require_hash(block.hash, "block")
    return block


def decode_uncle(raw: Any) -> UncleBlock:
    """Decode an eth_getUncleBy* result."""
    _require_result(raw, "uncle block")
    uncle = _validate(WireUncleBlock, raw, "uncle block").to_entity()
    _require_hash(uncle.hash, "uncle block")
    return uncle


def decode_transaction(raw: Any) -> Transaction:
    """Decode an eth_getTransactionBy* result."""
    _require_result(raw, "transaction")
    transaction = _validate(WireTransaction, raw, "transaction").to_entity()
    _require_hash(transaction.hash, "transaction")
    return transaction


def decode_receipt(raw: Any) -> TransactionReceipt:
    """Decode an eth_getTransactionReceipt result.

    Receipts are unavailable for pending transactions, which the node
    reports as null.
    """
    _require_result(raw, "receipt")
    receipt = _validate(WireTransactionReceipt, raw, "receipt").to_entity()
    _require_hash(receipt.transaction_hash, "receipt")
    return receipt


def decode_logs(raw: Any) -> list[Log]:
    """Decode an eth_getLogs result; null means no matching logs."""
    if raw is None:
        return []
    if not isinstance(raw, list):
        msg = f"expected list of logs, got {type(raw).__name__}"
        raise DecodeError(msg)
    return [_validate(WireLog, item, "log").to_entity() for item in raw]


__all__ = [
    "BLOCK_SHAPES",
    "decode_big_quantity",
    "decode_block",
    "decode_bool",
    "decode_logs",
    "decode_quantity",
    "decode_receipt",
    "decode_string",
    "decode_syncing",
    "decode_transaction",
    "decode_uncle",
]
