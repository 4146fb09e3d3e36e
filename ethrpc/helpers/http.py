"""HTTP transport used by every provider variant."""

from typing import Any, Protocol

import httpx

from ethrpc.errors import TransportError
from ethrpc.helpers.constants import (
    DEFAULT_TIMEOUT,
    MAX_CONNECTIONS,
    MAX_KEEPALIVE_CONNECTIONS,
)
from ethrpc.helpers.http_models import HttpRequest
from ethrpc.helpers.logging import get_logger


logger = get_logger(__name__)


class Transport(Protocol):
    """Anything able to perform one HTTP exchange."""

    async def send(self, request: HttpRequest) -> tuple[int, bytes]:
        """Send the request and return (status, body)."""
        ...

    async def aclose(self) -> None:
        """Release the underlying connections."""
        ...


def create_http_client(
    timeout: float = DEFAULT_TIMEOUT, **kwargs: Any
) -> httpx.AsyncClient:
    """Create a configured httpx AsyncClient.

    Args:
        timeout: Default timeout in seconds (default: DEFAULT_TIMEOUT)
        **kwargs: Additional httpx.AsyncClient kwargs

    Returns:
        Configured AsyncClient instance

    Example:
        ```python
        from ethrpc.helpers.http import create_http_client

        async with create_http_client(timeout=60.0) as client:
            response = await client.get("https://example.com")
        ```
    """
    kwargs.setdefault(
        "limits",
        httpx.Limits(
            max_keepalive_connections=MAX_KEEPALIVE_CONNECTIONS,
            max_connections=MAX_CONNECTIONS,
        ),
    )
    return httpx.AsyncClient(timeout=timeout, **kwargs)


class HttpTransport:
    """Transport backed by an httpx AsyncClient.

    Status codes are returned to the caller untouched; deciding what a
    non-200 status means is left to the provider. Connection failures and
    timeouts raise TransportError.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize the transport.

        Args:
            client: Client to reuse; a new one is created (and owned) if None
            timeout: Per-request timeout in seconds
        """
        self._owns_client = client is None
        self.client = client or create_http_client(timeout=timeout)
        self.timeout = timeout

    async def send(self, request: HttpRequest) -> tuple[int, bytes]:
        """Perform one HTTP exchange.

        Args:
            request: Request description

        Returns:
            Tuple of (status code, raw response body)

        Raises:
            TransportError: If the request could not be completed
        """
        try:
            if request.method == "GET":
                response = await self.client.get(
                    request.url, params=request.params, timeout=self.timeout
                )
            else:
                response = await self.client.post(
                    request.url,
                    params=request.params or None,
                    json=request.json_body,
                    timeout=self.timeout,
                )
        except httpx.TimeoutException as e:
            msg = f"{request.method} {request.url} timed out"
            raise TransportError(msg) from e
        except httpx.HTTPError as e:
            msg = f"{request.method} {request.url} failed: {e}"
            raise TransportError(msg) from e

        logger.debug(
            "%s %s -> %d (%d bytes)",
            request.method,
            request.url,
            response.status_code,
            len(response.content),
        )
        return response.status_code, response.content

    async def aclose(self) -> None:
        """Close the client if this transport created it."""
        if self._owns_client:
            await self.client.aclose()


__all__ = [
    "HttpTransport",
    "Transport",
    "create_http_client",
]
