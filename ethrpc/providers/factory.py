"""Build providers from environment configuration."""

from ethrpc.helpers.config import (
    get_credentials,
    get_eth_rpc_url,
    get_explorer_url,
    get_gateway_url,
)
from ethrpc.helpers.constants import DEFAULT_TIMEOUT
from ethrpc.helpers.logging import get_logger
from ethrpc.providers.base import EthProvider
from ethrpc.providers.explorer import ExplorerProvider
from ethrpc.providers.gateway import GatewayProvider
from ethrpc.providers.node import NodeProvider


logger = get_logger(__name__)

BACKENDS = ("node", "gateway", "explorer")


def provider_from_env(
    backend: str = "node",
    *,
    timeout: float = DEFAULT_TIMEOUT,
    debug: bool = False,
) -> EthProvider:
    """Create a provider configured from environment variables.

    - ``node``: ETH_RPC_URL
    - ``gateway``: GATEWAY_PROJECT_IDS (comma-separated), optional GATEWAY_URL
    - ``explorer``: EXPLORER_API_KEYS (comma-separated), optional EXPLORER_URL

    Args:
        backend: One of "node", "gateway", "explorer"
        timeout: Request timeout in seconds
        debug: Log every request and raw response

    Returns:
        Configured provider owning its transport

    Raises:
        ValueError: If the backend is unknown or its variables are missing

    Example:
        ```python
        from ethrpc.providers.factory import provider_from_env

        async with provider_from_env("explorer") as explorer:
            tx = await explorer.eth_get_transaction_by_hash("0x...")
        ```
    """
    if backend == "node":
        provider: EthProvider = NodeProvider(
            get_eth_rpc_url(), timeout=timeout, debug=debug
        )
    elif backend == "gateway":
        provider = GatewayProvider(
            get_credentials("GATEWAY_PROJECT_IDS"),
            url_template=get_gateway_url(),
            timeout=timeout,
            debug=debug,
        )
    elif backend == "explorer":
        provider = ExplorerProvider(
            get_credentials("EXPLORER_API_KEYS"),
            url=get_explorer_url(),
            timeout=timeout,
            debug=debug,
        )
    else:
        msg = f"Unknown backend {backend!r}, expected one of {', '.join(BACKENDS)}"
        raise ValueError(msg)

    logger.info("Using %s backend", provider)
    return provider


__all__ = ["BACKENDS", "provider_from_env"]
