"""Credential rotation for rate-limited backends."""

import asyncio
from collections.abc import Callable, Sequence

from ethrpc.errors import RetryExhaustedError, TransportError
from ethrpc.helpers.constants import (
    MAX_ATTEMPTS,
    RATE_LIMIT_BACKOFF,
    RATE_LIMIT_STATUSES,
)
from ethrpc.helpers.http import Transport
from ethrpc.helpers.http_models import HttpRequest
from ethrpc.helpers.logging import get_logger


logger = get_logger(__name__)


def require_credentials(credentials: Sequence[str]) -> tuple[str, ...]:
    """Return the credentials as a tuple, rejecting an empty set.

    Raises:
        ValueError: If no credential is given
    """
    if not credentials:
        msg = "At least one credential is required"
        raise ValueError(msg)
    return tuple(credentials)


class RetryableCaller:
    """Send requests with a rotating credential, retrying when throttled.

    Attempt ``k`` uses ``credentials[k % len(credentials)]``. A 403/429
    status sleeps ``backoff`` seconds and moves on to the next credential;
    any other non-200 status fails at once. The attempt counter lives in
    each ``call()``, so concurrent calls never share a cursor.
    """

    def __init__(
        self,
        transport: Transport,
        credentials: Sequence[str],
        *,
        max_attempts: int = MAX_ATTEMPTS,
        backoff: float = RATE_LIMIT_BACKOFF,
    ) -> None:
        """Initialize the caller.

        Args:
            transport: Transport performing each exchange
            credentials: Ordered credentials to rotate through
            max_attempts: Total attempts, initial one included
            backoff: Seconds to wait after a rate-limited attempt

        Raises:
            ValueError: If no credential is given
        """
        self.credentials = require_credentials(credentials)
        self.transport = transport
        self.max_attempts = max_attempts
        self.backoff = backoff

    def credential_for(self, attempt: int) -> str:
        """Return the credential used by a 0-indexed attempt."""
        return self.credentials[attempt % len(self.credentials)]

    async def call(self, build_request: Callable[[str], HttpRequest]) -> bytes:
        """Perform a request, rotating credentials on rate limiting.

        Args:
            build_request: Builds the request for a given credential

        Returns:
            Body of the first successful response

        Raises:
            TransportError: On a non-200, non-rate-limit status or IO failure
            RetryExhaustedError: If every attempt was rate limited
        """
        for attempt in range(self.max_attempts):
            request = build_request(self.credential_for(attempt))
            status, body = await self.transport.send(request)

            if status in RATE_LIMIT_STATUSES:
                logger.warning(
                    "%s returned %d, rotating credential (attempt %d/%d)",
                    request.url,
                    status,
                    attempt + 1,
                    self.max_attempts,
                )
                # Don't sleep after the last attempt
                if attempt < self.max_attempts - 1:
                    await asyncio.sleep(self.backoff)
                continue

            if status != 200:
                msg = f"http status code error {status}"
                raise TransportError(msg, status_code=status)

            return body

        logger.error("Rate limited on all %d attempts", self.max_attempts)
        raise RetryExhaustedError(self.max_attempts)


async def send_once(transport: Transport, request: HttpRequest) -> bytes:
    """Perform a request without retry, failing on any non-200 status."""
    status, body = await transport.send(request)
    if status != 200:
        msg = f"http status code error {status}"
        raise TransportError(msg, status_code=status)
    return body


__all__ = ["RetryableCaller", "require_credentials", "send_once"]
