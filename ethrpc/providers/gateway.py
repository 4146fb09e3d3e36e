"""Hosted gateway backend (Infura-style): JSON-RPC with rotating project keys."""

from collections.abc import Sequence

from ethrpc.helpers.constants import DEFAULT_GATEWAY_URL, DEFAULT_TIMEOUT, RATE_LIMIT_BACKOFF
from ethrpc.helpers.http import Transport
from ethrpc.helpers.http_models import HttpRequest, JsonValue
from ethrpc.providers.node import NodeProvider
from ethrpc.retry import RetryableCaller, require_credentials


class GatewayProvider(NodeProvider):
    """JSON-RPC client for a rate-limited hosted gateway.

    The wire shape is the node's; only the endpoint differs. The credential
    is substituted into ``url_template`` on each attempt and rotated when
    the gateway throttles (403/429).
    """

    def __init__(
        self,
        credentials: Sequence[str],
        transport: Transport | None = None,
        *,
        url_template: str = DEFAULT_GATEWAY_URL,
        timeout: float = DEFAULT_TIMEOUT,
        backoff: float = RATE_LIMIT_BACKOFF,
        debug: bool = False,
    ) -> None:
        """Initialize the gateway provider.

        Args:
            credentials: Ordered project credentials to rotate through
            transport: Optional transport override
            url_template: Endpoint with a {credential} placeholder
            timeout: Default timeout for requests in seconds
            backoff: Seconds to wait after a throttled attempt
            debug: Log every request and raw response

        Raises:
            ValueError: If no credential is given or the template lacks the
                placeholder
        """
        if "{credential}" not in url_template:
            msg = "Gateway URL must contain a {credential} placeholder"
            raise ValueError(msg)
        credentials = require_credentials(credentials)

        super().__init__(url_template, transport, timeout=timeout, debug=debug)
        self.url_template = url_template
        self.caller = RetryableCaller(self.transport, credentials, backoff=backoff)

    def __str__(self) -> str:
        return "gateway"

    async def _post(self, payload: JsonValue) -> bytes:
        return await self.caller.call(
            lambda credential: HttpRequest(
                method="POST",
                url=self.url_template.format(credential=credential),
                json_body=payload,
            )
        )


__all__ = ["GatewayProvider"]
