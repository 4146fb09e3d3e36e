"""Tests for configuration and environment variable helpers."""

import os

import pytest

from collections.abc import Generator

from ethrpc.helpers.config import (
    get_credentials,
    get_eth_rpc_url,
    get_explorer_url,
    get_gateway_url,
    get_optional_env,
    get_required_env,
)
from ethrpc.helpers.constants import DEFAULT_EXPLORER_URL, DEFAULT_GATEWAY_URL


ENV_KEYS = (
    "TEST_KEY",
    "ETH_RPC_URL",
    "GATEWAY_URL",
    "GATEWAY_PROJECT_IDS",
    "EXPLORER_URL",
    "EXPLORER_API_KEYS",
)


@pytest.fixture
def clean_env() -> Generator[None]:
    """Clean environment variables before and after test."""
    saved_env = {key: os.environ.get(key) for key in ENV_KEYS}

    for key in saved_env:
        if key in os.environ:
            del os.environ[key]

    yield

    for key, value in saved_env.items():
        if value is not None:
            os.environ[key] = value
        elif key in os.environ:
            del os.environ[key]


@pytest.mark.usefixtures("clean_env")
class TestGetRequiredEnv:
    """Tests for get_required_env function."""

    def test_returns_env_value_when_set(self) -> None:
        """Test that get_required_env returns value when set."""
        os.environ["TEST_KEY"] = "test_value"
        assert get_required_env("TEST_KEY") == "test_value"

    def test_raises_when_not_set(self) -> None:
        """Test that get_required_env raises ValueError when not set."""
        with pytest.raises(
            ValueError, match="TEST_KEY environment variable is not set"
        ):
            get_required_env("TEST_KEY")

    def test_raises_when_empty_string(self) -> None:
        """Test that get_required_env raises ValueError when empty."""
        os.environ["TEST_KEY"] = ""
        with pytest.raises(ValueError, match="TEST_KEY"):
            get_required_env("TEST_KEY")


@pytest.mark.usefixtures("clean_env")
class TestGetOptionalEnv:
    """Tests for get_optional_env function."""

    def test_returns_none_when_not_set(self) -> None:
        """Test that get_optional_env returns None when not set."""
        assert get_optional_env("TEST_KEY") is None

    def test_returns_default_when_not_set(self) -> None:
        """Test that get_optional_env returns default when not set."""
        assert get_optional_env("TEST_KEY", "default") == "default"

    def test_returns_env_value_over_default(self) -> None:
        """Test that get_optional_env prefers env value over default."""
        os.environ["TEST_KEY"] = "env_value"
        assert get_optional_env("TEST_KEY", "default") == "env_value"


@pytest.mark.usefixtures("clean_env")
class TestGetEthRpcUrl:
    """Tests for get_eth_rpc_url function."""

    def test_parameter_takes_precedence(self) -> None:
        """Test that the parameter wins over ETH_RPC_URL."""
        os.environ["ETH_RPC_URL"] = "http://from-env:8545"
        assert get_eth_rpc_url("http://param:8545") == "http://param:8545"

    def test_reads_env(self) -> None:
        """Test that ETH_RPC_URL is used when no parameter is given."""
        os.environ["ETH_RPC_URL"] = "http://from-env:8545"
        assert get_eth_rpc_url() == "http://from-env:8545"

    def test_raises_when_missing(self) -> None:
        """Test that a missing URL raises ValueError."""
        with pytest.raises(ValueError, match="ETH_RPC_URL must be provided"):
            get_eth_rpc_url()


@pytest.mark.usefixtures("clean_env")
class TestGetCredentials:
    """Tests for get_credentials function."""

    def test_splits_and_strips(self) -> None:
        """Test that entries are split on commas and stripped."""
        os.environ["EXPLORER_API_KEYS"] = " key1, key2 ,key3"
        assert get_credentials("EXPLORER_API_KEYS") == ("key1", "key2", "key3")

    def test_drops_blank_entries(self) -> None:
        """Test that empty entries are ignored."""
        os.environ["EXPLORER_API_KEYS"] = "key1,,key2,"
        assert get_credentials("EXPLORER_API_KEYS") == ("key1", "key2")

    def test_single_credential(self) -> None:
        """Test a variable holding one credential."""
        os.environ["GATEWAY_PROJECT_IDS"] = "abc123"
        assert get_credentials("GATEWAY_PROJECT_IDS") == ("abc123",)

    def test_raises_when_not_set(self) -> None:
        """Test that an unset variable raises ValueError."""
        with pytest.raises(ValueError, match="environment variable is not set"):
            get_credentials("EXPLORER_API_KEYS")

    def test_raises_when_only_separators(self) -> None:
        """Test that a variable without any credential raises ValueError."""
        os.environ["EXPLORER_API_KEYS"] = " , ,"
        with pytest.raises(ValueError, match="does not contain any credential"):
            get_credentials("EXPLORER_API_KEYS")


@pytest.mark.usefixtures("clean_env")
class TestGetGatewayUrl:
    """Tests for get_gateway_url function."""

    def test_default(self) -> None:
        """Test the default template."""
        assert get_gateway_url() == DEFAULT_GATEWAY_URL

    def test_reads_env(self) -> None:
        """Test that GATEWAY_URL overrides the default."""
        os.environ["GATEWAY_URL"] = "https://goerli.infura.io/v3/{credential}"
        assert get_gateway_url() == "https://goerli.infura.io/v3/{credential}"

    def test_requires_placeholder(self) -> None:
        """Test that a template without placeholder is rejected."""
        with pytest.raises(ValueError, match="placeholder"):
            get_gateway_url("https://mainnet.infura.io/v3/")


@pytest.mark.usefixtures("clean_env")
class TestGetExplorerUrl:
    """Tests for get_explorer_url function."""

    def test_default(self) -> None:
        """Test the default explorer URL."""
        assert get_explorer_url() == DEFAULT_EXPLORER_URL

    def test_parameter_takes_precedence(self) -> None:
        """Test that the parameter wins over EXPLORER_URL."""
        os.environ["EXPLORER_URL"] = "https://api-goerli.etherscan.io/api"
        assert get_explorer_url("https://other/api") == "https://other/api"

    def test_reads_env(self) -> None:
        """Test that EXPLORER_URL overrides the default."""
        os.environ["EXPLORER_URL"] = "https://api-goerli.etherscan.io/api"
        assert get_explorer_url() == "https://api-goerli.etherscan.io/api"
