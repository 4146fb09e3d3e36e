"""Hex-aware wire shapes of JSON-RPC results.

Each model mirrors the JSON a node sends: camelCase keys and hex strings for
every quantity. Quantities are parsed by the hex codec while validating, and
``to_entity()`` lifts the shape into its canonical model field by field.
"""

from collections.abc import Callable
from typing import Annotated, Any, TypeAlias

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from ethrpc.helpers.hexcodec import parse_big_int, parse_int
from ethrpc.models import (
    Block,
    Log,
    Syncing,
    Transaction,
    TransactionReceipt,
    UncleBlock,
)


def _nullable(parse: Callable[[Any], Any], default: Any) -> Callable[[Any], Any]:
    def parse_or_default(value: Any) -> Any:
        return default if value is None else parse(value)

    return parse_or_default


HexInt = Annotated[int, BeforeValidator(parse_int)]
HexBig = Annotated[int, BeforeValidator(parse_big_int)]
# null on the wire means "not applicable" (pending tx, post-merge difficulty)
OptionalHexInt = Annotated[int | None, BeforeValidator(_nullable(parse_int, None))]
ZeroIfNullHexInt = Annotated[int, BeforeValidator(_nullable(parse_int, 0))]
ZeroIfNullHexBig = Annotated[int, BeforeValidator(_nullable(parse_big_int, 0))]
WireStr = Annotated[str, BeforeValidator(_nullable(lambda value: value, ""))]


class WireModel(BaseModel):
    """Base for wire shapes: camelCase aliases, unknown keys ignored."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


class WireTransaction(WireModel):
    hash: WireStr = ""
    nonce: HexInt
    block_hash: str | None = Field(default=None, alias="blockHash")
    block_number: OptionalHexInt = Field(default=None, alias="blockNumber")
    transaction_index: OptionalHexInt = Field(default=None, alias="transactionIndex")
    from_address: WireStr = Field(default="", alias="from")
    to_address: str | None = Field(default=None, alias="to")
    value: HexBig
    gas: HexInt
    gas_price: ZeroIfNullHexBig = Field(default=0, alias="gasPrice")
    input: WireStr = ""

    def to_entity(self) -> Transaction:
        return Transaction(
            hash=self.hash,
            nonce=self.nonce,
            block_hash=self.block_hash,
            block_number=self.block_number,
            transaction_index=self.transaction_index,
            from_address=self.from_address,
            to_address=self.to_address,
            value=self.value,
            gas=self.gas,
            gas_price=self.gas_price,
            input=self.input,
        )


class WireBlockHeader(WireModel):
    """Fields shared by both eth_getBlockByNumber result shapes."""

    number: HexInt
    hash: WireStr = ""
    parent_hash: WireStr = Field(default="", alias="parentHash")
    nonce: WireStr = ""
    sha3_uncles: WireStr = Field(default="", alias="sha3Uncles")
    logs_bloom: WireStr = Field(default="", alias="logsBloom")
    transactions_root: WireStr = Field(default="", alias="transactionsRoot")
    state_root: WireStr = Field(default="", alias="stateRoot")
    miner: WireStr = ""
    difficulty: ZeroIfNullHexBig = 0
    total_difficulty: ZeroIfNullHexBig = Field(default=0, alias="totalDifficulty")
    extra_data: WireStr = Field(default="", alias="extraData")
    size: ZeroIfNullHexInt = 0
    gas_limit: HexInt = Field(alias="gasLimit")
    gas_used: HexInt = Field(alias="gasUsed")
    timestamp: HexInt
    uncles: list[str] = Field(default_factory=list)

    def _lift(self, transactions: tuple[Transaction, ...]) -> Block:
        return Block(
            number=self.number,
            hash=self.hash,
            parent_hash=self.parent_hash,
            nonce=self.nonce,
            sha3_uncles=self.sha3_uncles,
            logs_bloom=self.logs_bloom,
            transactions_root=self.transactions_root,
            state_root=self.state_root,
            miner=self.miner,
            difficulty=self.difficulty,
            total_difficulty=self.total_difficulty,
            extra_data=self.extra_data,
            size=self.size,
            gas_limit=self.gas_limit,
            gas_used=self.gas_used,
            timestamp=self.timestamp,
            uncles=tuple(self.uncles),
            transactions=transactions,
        )


class WireBlockWithTransactions(WireBlockHeader):
    """Block fetched with full transaction objects."""

    transactions: list[WireTransaction] = Field(default_factory=list)

    def to_entity(self) -> Block:
        return self._lift(tuple(tx.to_entity() for tx in self.transactions))


class WireBlockWithHashes(WireBlockHeader):
    """Block fetched with transaction hashes only."""

    transactions: list[str] = Field(default_factory=list)

    def to_entity(self) -> Block:
        return self._lift(tuple(Transaction(hash=tx_hash) for tx_hash in self.transactions))


WireBlock: TypeAlias = WireBlockWithTransactions | WireBlockWithHashes


class WireUncleBlock(WireModel):
    number: HexInt
    hash: WireStr = ""
    parent_hash: WireStr = Field(default="", alias="parentHash")
    nonce: WireStr = ""
    sha3_uncles: WireStr = Field(default="", alias="sha3Uncles")
    logs_bloom: WireStr = Field(default="", alias="logsBloom")
    transactions_root: WireStr = Field(default="", alias="transactionsRoot")
    state_root: WireStr = Field(default="", alias="stateRoot")
    miner: WireStr = ""
    difficulty: ZeroIfNullHexBig = 0
    extra_data: WireStr = Field(default="", alias="extraData")
    gas_limit: HexInt = Field(alias="gasLimit")
    gas_used: HexInt = Field(alias="gasUsed")
    timestamp: HexInt
    uncles: list[str] = Field(default_factory=list)

    def to_entity(self) -> UncleBlock:
        return UncleBlock(
            number=self.number,
            hash=self.hash,
            parent_hash=self.parent_hash,
            nonce=self.nonce,
            sha3_uncles=self.sha3_uncles,
            logs_bloom=self.logs_bloom,
            transactions_root=self.transactions_root,
            state_root=self.state_root,
            miner=self.miner,
            difficulty=self.difficulty,
            extra_data=self.extra_data,
            gas_limit=self.gas_limit,
            gas_used=self.gas_used,
            timestamp=self.timestamp,
            uncles=tuple(self.uncles),
        )


class WireLog(WireModel):
    removed: bool = False
    log_index: HexInt = Field(alias="logIndex")
    transaction_index: HexInt = Field(alias="transactionIndex")
    transaction_hash: WireStr = Field(default="", alias="transactionHash")
    block_number: HexInt = Field(alias="blockNumber")
    block_hash: WireStr = Field(default="", alias="blockHash")
    address: WireStr = ""
    data: WireStr = ""
    topics: list[str] = Field(default_factory=list)

    def to_entity(self) -> Log:
        return Log(
            removed=self.removed,
            log_index=self.log_index,
            transaction_index=self.transaction_index,
            transaction_hash=self.transaction_hash,
            block_number=self.block_number,
            block_hash=self.block_hash,
            address=self.address,
            data=self.data,
            topics=tuple(self.topics),
        )


class WireTransactionReceipt(WireModel):
    transaction_hash: WireStr = Field(default="", alias="transactionHash")
    transaction_index: HexInt = Field(alias="transactionIndex")
    block_hash: WireStr = Field(default="", alias="blockHash")
    block_number: HexInt = Field(alias="blockNumber")
    cumulative_gas_used: HexInt = Field(alias="cumulativeGasUsed")
    gas_used: HexInt = Field(alias="gasUsed")
    contract_address: str | None = Field(default=None, alias="contractAddress")
    logs: list[WireLog] = Field(default_factory=list)
    logs_bloom: WireStr = Field(default="", alias="logsBloom")
    root: WireStr = ""
    status: OptionalHexInt = None

    def to_entity(self) -> TransactionReceipt:
        return TransactionReceipt(
            transaction_hash=self.transaction_hash,
            transaction_index=self.transaction_index,
            block_hash=self.block_hash,
            block_number=self.block_number,
            cumulative_gas_used=self.cumulative_gas_used,
            gas_used=self.gas_used,
            contract_address=self.contract_address,
            logs=tuple(log.to_entity() for log in self.logs),
            logs_bloom=self.logs_bloom,
            root=self.root,
            status=self.status,
        )


class WireSyncing(WireModel):
    """Object form of eth_syncing; its presence alone means syncing."""

    starting_block: HexInt = Field(alias="startingBlock")
    current_block: HexInt = Field(alias="currentBlock")
    highest_block: HexInt = Field(alias="highestBlock")

    def to_entity(self) -> Syncing:
        return Syncing(
            is_syncing=True,
            starting_block=self.starting_block,
            current_block=self.current_block,
            highest_block=self.highest_block,
        )


__all__ = [
    "HexBig",
    "HexInt",
    "WireBlock",
    "WireBlockHeader",
    "WireBlockWithHashes",
    "WireBlockWithTransactions",
    "WireLog",
    "WireSyncing",
    "WireTransaction",
    "WireTransactionReceipt",
    "WireUncleBlock",
]
