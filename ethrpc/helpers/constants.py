"""Common configuration constants used across the client."""

# HTTP and Network Constants
DEFAULT_TIMEOUT = 30.0
"""Default HTTP request timeout in seconds"""

# Retry Configuration
MAX_ATTEMPTS = 6
"""Maximum number of attempts for a rate-limited call (initial + 5 retries)"""

RATE_LIMIT_BACKOFF = 0.3
"""Fixed delay before retrying a rate-limited call, in seconds"""

RATE_LIMIT_STATUSES = frozenset({403, 429})
"""HTTP statuses meaning the credential was denied or throttled"""

# Hex Codec
MAX_NATIVE_INT = 2**63 - 1
"""Largest value accepted by parse_int (signed 64-bit range)"""

# JSON-RPC
JSONRPC_VERSION = "2.0"
"""JSON-RPC protocol version tag"""

DEFAULT_BLOCK_TAG = "latest"
"""Block tag used when the caller does not name a block"""

# Backend Endpoints
DEFAULT_GATEWAY_URL = "https://mainnet.infura.io/v3/{credential}"
"""Gateway URL template, the project credential is substituted per attempt"""

DEFAULT_EXPLORER_URL = "https://api.etherscan.io/api"
"""Block explorer proxy API endpoint"""

# HTTP Connection Pooling
MAX_KEEPALIVE_CONNECTIONS = 5
"""Maximum number of keepalive connections in pool"""

MAX_CONNECTIONS = 10
"""Maximum total number of connections"""


__all__ = [
    "DEFAULT_BLOCK_TAG",
    "DEFAULT_EXPLORER_URL",
    "DEFAULT_GATEWAY_URL",
    "DEFAULT_TIMEOUT",
    "JSONRPC_VERSION",
    "MAX_ATTEMPTS",
    "MAX_CONNECTIONS",
    "MAX_KEEPALIVE_CONNECTIONS",
    "MAX_NATIVE_INT",
    "RATE_LIMIT_BACKOFF",
    "RATE_LIMIT_STATUSES",
]
