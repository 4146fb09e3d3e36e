"""Pytest configuration and shared fixtures for client tests."""

import json

import pytest

from typing import Any

from ethrpc.helpers.http_models import HttpRequest


class FakeTransport:
    """Transport replaying queued (status, body) pairs and recording requests."""

    def __init__(self) -> None:
        self.responses: list[tuple[int, bytes]] = []
        self.requests: list[HttpRequest] = []
        self.closed = False

    def add_json(self, payload: Any, status: int = 200) -> None:
        """Queue a JSON response body."""
        self.responses.append((status, json.dumps(payload).encode()))

    def add_result(self, result: Any, request_id: int = 1) -> None:
        """Queue a successful JSON-RPC envelope."""
        self.add_json({"jsonrpc": "2.0", "id": request_id, "result": result})

    def add_status(self, status: int, body: bytes = b"") -> None:
        """Queue a bare HTTP status."""
        self.responses.append((status, body))

    async def send(self, request: HttpRequest) -> tuple[int, bytes]:
        self.requests.append(request)
        if not self.responses:
            msg = f"unexpected request {request.method} {request.url}"
            raise AssertionError(msg)
        return self.responses.pop(0)

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def fake_transport() -> FakeTransport:
    """Provide a fresh fake transport."""
    return FakeTransport()


@pytest.fixture
def tx_payload() -> dict[str, Any]:
    """Full transaction object as returned by eth_getTransactionByHash."""
    return {
        "blockHash": "0xef7fa50f455e5c40f3435f2e1ede71fabf670f265ad623fb804ae2eb3c1d0db3",
        "blockNumber": "0x5dd091",
        "from": "0x5a0b54d5dc17e0aadc383d2db43b0a0d3e029c4c",
        "gas": "0x5208",
        "gasPrice": "0x4a817c800",
        "hash": "0x7c7e8a2e3d1f1bd2b6b8d0f4d3e1c3a8d9e8f3b2a1c0d9e8f7a6b5c4d3e2f1a0",
        "input": "0x",
        "nonce": "0x15",
        "to": "0x3e2f1a0b5c4d3e2f1a07c7e8a2e3d1f1bd2b6b8d",
        "transactionIndex": "0x0",
        "value": "0xde0b6b3a7640000",
        "v": "0x25",
        "r": "0x1",
        "s": "0x2",
    }


@pytest.fixture
def block_header_payload() -> dict[str, Any]:
    """Block fields shared by both transaction listing modes."""
    return {
        "difficulty": "0xcb5d1dadda318",
        "extraData": "0x737061726b706f6f6c2d636e2d6e6f64652d3032",
        "gasLimit": "0x79b6ea",
        "gasUsed": "0x5bff7f",
        "hash": "0xef7fa50f455e5c40f3435f2e1ede71fabf670f265ad623fb804ae2eb3c1d0db3",
        "logsBloom": "0x00",
        "miner": "0x5a0b54d5dc17e0aadc383d2db43b0a0d3e029c4c",
        "mixHash": "0xbe59def406d63402e08374dea3bc803aaa1f341f3fc50b66f38a1cea85401ab5",
        "nonce": "0xe764982ec0e9a94e",
        "number": "0x5dd091",
        "parentHash": "0x0bc5f310f4017a7add06b1b0419beeb0cf2bd667be1f25e7aa348b4dd51ab4a5",
        "receiptsRoot": "0xa2cef1828213fa7c2fd568e10fe42cef90194889167f6faf12dc1efb4524ac28",
        "sha3Uncles": "0x1dcc4de8dec75d7aab85b567b6ccd41ad312451b948a7413f0a142fd40d49347",
        "size": "0x21d",
        "stateRoot": "0xad23b36dbaf20fe8387307b733e1279e7aa41e4ffc14cff8a08da88df65885b0",
        "timestamp": "0x5b734e23",
        "totalDifficulty": "0x1a0e5a2ee25b0583f63",
        "transactionsRoot": "0xf4ce86641f301d2ee4be3397d22dec3dd101edb9dce0cb8baed213b083bd9e55",
        "uncles": ["0x52fa126b7bbad9a6f9235bc57163881e17eece47bd743f6021ea57eddc6de5d2"],
    }


@pytest.fixture
def full_block_payload(
    block_header_payload: dict[str, Any], tx_payload: dict[str, Any]
) -> dict[str, Any]:
    """Block fetched with full transaction objects."""
    return {**block_header_payload, "transactions": [tx_payload]}


@pytest.fixture
def hash_block_payload(
    block_header_payload: dict[str, Any], tx_payload: dict[str, Any]
) -> dict[str, Any]:
    """The same block fetched with transaction hashes only."""
    return {**block_header_payload, "transactions": [tx_payload["hash"]]}


@pytest.fixture
def log_payload() -> dict[str, Any]:
    """Log object as found in receipts and eth_getLogs results."""
    return {
        "address": "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2",
        "blockHash": "0xef7fa50f455e5c40f3435f2e1ede71fabf670f265ad623fb804ae2eb3c1d0db3",
        "blockNumber": "0x5dd091",
        "data": "0x0000000000000000000000000000000000000000000000000de0b6b3a7640000",
        "logIndex": "0x3",
        "removed": False,
        "topics": [
            "0xddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef",
            "0x0000000000000000000000005a0b54d5dc17e0aadc383d2db43b0a0d3e029c4c",
        ],
        "transactionHash": "0x7c7e8a2e3d1f1bd2b6b8d0f4d3e1c3a8d9e8f3b2a1c0d9e8f7a6b5c4d3e2f1a0",
        "transactionIndex": "0x0",
    }


@pytest.fixture
def receipt_payload(log_payload: dict[str, Any]) -> dict[str, Any]:
    """Receipt object as returned by eth_getTransactionReceipt."""
    return {
        "blockHash": "0xef7fa50f455e5c40f3435f2e1ede71fabf670f265ad623fb804ae2eb3c1d0db3",
        "blockNumber": "0x5dd091",
        "contractAddress": None,
        "cumulativeGasUsed": "0x1f7b8",
        "gasUsed": "0x5208",
        "logs": [log_payload],
        "logsBloom": "0x00",
        "status": "0x1",
        "transactionHash": "0x7c7e8a2e3d1f1bd2b6b8d0f4d3e1c3a8d9e8f3b2a1c0d9e8f7a6b5c4d3e2f1a0",
        "transactionIndex": "0x0",
    }


@pytest.fixture
def uncle_payload() -> dict[str, Any]:
    """Uncle block as returned by eth_getUncleByBlockNumberAndIndex."""
    return {
        "author": "0xf35074bbd0a9aee46f4ea137971feec024ab704e",
        "difficulty": "0xae765ab687703",
        "extraData": "0x736f6c6f706f6f6c2e6f7267",
        "gasLimit": "0x7a121d",
        "gasUsed": "0x79e444",
        "hash": "0x52fa126b7bbad9a6f9235bc57163881e17eece47bd743f6021ea57eddc6de5d2",
        "logsBloom": "0x0a",
        "miner": "0xf35074bbd0a9aee46f4ea137971feec024ab704e",
        "nonce": "0x7cd838000635bb78",
        "number": "0x65b64f",
        "parentHash": "0xfe76b816fc985a131a8e4a9bf77be997e89a3b7433324f9b0d783950a6a1f836",
        "sha3Uncles": "0x1dcc4de8dec75d7aab85b567b6ccd41ad312451b948a7413f0a142fd40d49347",
        "size": None,
        "stateRoot": "0xe9340e24e817e41353e94145a8c807d7b96284f761900c94da88cb73f1e65549",
        "timestamp": "0x5be412f4",
        "totalDifficulty": "0x1a0e5a2ee25b0583f63",
        "transactions": [],
        "transactionsRoot": "0x74824e98fe52018ed3269bb4483197ed1155186a4ad36b923632a76d0b257480",
        "uncles": [],
    }
