"""Configuration management and environment variable utilities."""

import os

from dotenv import load_dotenv

from ethrpc.helpers.constants import DEFAULT_EXPLORER_URL, DEFAULT_GATEWAY_URL


# Load environment variables from .env file
load_dotenv()


def get_required_env(key: str) -> str:
    """Get a required environment variable.

    Args:
        key: Environment variable name

    Returns:
        Environment variable value

    Raises:
        ValueError: If the environment variable is not set

    Example:
        ```python
        from ethrpc.helpers.config import get_required_env

        rpc_url = get_required_env("ETH_RPC_URL")
        ```
    """
    value = os.getenv(key)
    if not value:
        msg = f"{key} environment variable is not set"
        raise ValueError(msg)
    return value


def get_optional_env(key: str, default: str | None = None) -> str | None:
    """Get an optional environment variable with a default value.

    Args:
        key: Environment variable name
        default: Default value if not set

    Returns:
        Environment variable value or default
    """
    return os.getenv(key, default)


def get_eth_rpc_url(rpc_url: str | None = None) -> str:
    """Get Ethereum node RPC URL from parameter or environment.

    Args:
        rpc_url: Optional RPC URL to use directly

    Returns:
        Ethereum RPC URL

    Raises:
        ValueError: If RPC URL is not provided and ETH_RPC_URL env var is not set
    """
    if rpc_url:
        return rpc_url

    env_rpc_url = os.getenv("ETH_RPC_URL")
    if not env_rpc_url:
        msg = "ETH_RPC_URL must be provided or set in environment variables"
        raise ValueError(msg)

    return env_rpc_url


def get_credentials(key: str) -> tuple[str, ...]:
    """Get an ordered list of credentials from a comma-separated variable.

    Blank entries are dropped and surrounding whitespace is stripped, so
    ``"key1, key2,"`` yields ``("key1", "key2")``.

    Args:
        key: Environment variable name

    Returns:
        Credentials in the order they were listed

    Raises:
        ValueError: If the variable is unset or holds no credential

    Example:
        ```python
        from ethrpc.helpers.config import get_credentials

        api_keys = get_credentials("EXPLORER_API_KEYS")
        ```
    """
    raw = get_required_env(key)
    credentials = tuple(part.strip() for part in raw.split(",") if part.strip())
    if not credentials:
        msg = f"{key} does not contain any credential"
        raise ValueError(msg)
    return credentials


def get_gateway_url(gateway_url: str | None = None) -> str:
    """Get the gateway URL template.

    The template must contain a ``{credential}`` placeholder.

    Args:
        gateway_url: Optional template to use directly

    Returns:
        Gateway URL template (GATEWAY_URL or the Infura mainnet default)

    Raises:
        ValueError: If the template has no {credential} placeholder
    """
    template = gateway_url or os.getenv("GATEWAY_URL") or DEFAULT_GATEWAY_URL
    if "{credential}" not in template:
        msg = "Gateway URL must contain a {credential} placeholder"
        raise ValueError(msg)
    return template


def get_explorer_url(explorer_url: str | None = None) -> str:
    """Get the block explorer proxy API URL.

    Args:
        explorer_url: Optional URL to use directly

    Returns:
        Explorer URL (EXPLORER_URL or the Etherscan default)
    """
    return explorer_url or os.getenv("EXPLORER_URL") or DEFAULT_EXPLORER_URL


__all__ = [
    "get_credentials",
    "get_eth_rpc_url",
    "get_explorer_url",
    "get_gateway_url",
    "get_optional_env",
    "get_required_env",
]
