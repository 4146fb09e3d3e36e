"""Canonical Ethereum entities returned by the client.

All numeric fields are plain ints; the hex wire form never reaches these
models. Instances are frozen and sequences are tuples, so an entity cannot
change after it is decoded.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ethrpc.helpers.hexcodec import format_hex


class Entity(BaseModel):
    """Base for immutable entities."""

    model_config = ConfigDict(frozen=True)


class Transaction(Entity):
    """Ethereum transaction.

    Hash-only listings (blocks fetched without full transactions) produce
    stubs where only ``hash`` is set.
    """

    hash: str
    nonce: int = 0
    block_hash: str | None = None
    block_number: int | None = None
    transaction_index: int | None = None
    from_address: str = ""
    to_address: str | None = None
    value: int = 0
    gas: int = 0
    gas_price: int = 0
    input: str = ""


class Block(Entity):
    """Ethereum block."""

    number: int
    hash: str
    parent_hash: str
    nonce: str
    sha3_uncles: str
    logs_bloom: str
    transactions_root: str
    state_root: str
    miner: str
    difficulty: int
    total_difficulty: int
    extra_data: str
    size: int
    gas_limit: int
    gas_used: int
    timestamp: int
    uncles: tuple[str, ...] = ()
    transactions: tuple[Transaction, ...] = ()


class UncleBlock(Entity):
    """Uncle block header: a Block without transactions or size."""

    number: int
    hash: str
    parent_hash: str
    nonce: str
    sha3_uncles: str
    logs_bloom: str
    transactions_root: str
    state_root: str
    miner: str
    difficulty: int
    extra_data: str
    gas_limit: int
    gas_used: int
    timestamp: int
    uncles: tuple[str, ...] = ()


class Log(Entity):
    """Event record emitted during contract execution."""

    removed: bool
    log_index: int
    transaction_index: int
    transaction_hash: str
    block_number: int
    block_hash: str
    address: str
    data: str
    topics: tuple[str, ...] = ()


class TransactionReceipt(Entity):
    """Receipt of a mined transaction.

    ``status`` is None for pre-Byzantium receipts, which carry ``root``
    instead.
    """

    transaction_hash: str
    transaction_index: int
    block_hash: str
    block_number: int
    cumulative_gas_used: int
    gas_used: int
    contract_address: str | None = None
    logs: tuple[Log, ...] = ()
    logs_bloom: str = ""
    root: str = ""
    status: int | None = None


class Syncing(Entity):
    """Sync status; heights are 0 when the node is not syncing."""

    is_syncing: bool
    starting_block: int = 0
    current_block: int = 0
    highest_block: int = 0


class FilterParams(Entity):
    """Log filter: block range, address set and topic matrix.

    Only ever encoded. A ``None`` row in ``topics`` matches any topic at
    that position.
    """

    from_block: int | str | None = None
    to_block: int | str | None = None
    address: tuple[str, ...] = ()
    topics: tuple[tuple[str, ...] | None, ...] = ()
    block_hash: str | None = Field(
        default=None, description="Restrict to one block (excludes the range)"
    )

    def to_params(self) -> dict[str, Any]:
        """Encode as the eth_getLogs filter object, omitting empty members.

        Returns:
            JSON-ready filter object with camelCase keys
        """
        params: dict[str, Any] = {}
        if self.from_block is not None:
            params["fromBlock"] = _encode_block(self.from_block)
        if self.to_block is not None:
            params["toBlock"] = _encode_block(self.to_block)
        if self.block_hash is not None:
            params["blockHash"] = self.block_hash
        if self.address:
            params["address"] = list(self.address)
        if self.topics:
            params["topics"] = [
                list(row) if row is not None else None for row in self.topics
            ]
        return params


def _encode_block(block: int | str) -> str:
    return format_hex(block) if isinstance(block, int) else block


__all__ = [
    "Block",
    "FilterParams",
    "Log",
    "Syncing",
    "Transaction",
    "TransactionReceipt",
    "UncleBlock",
]
