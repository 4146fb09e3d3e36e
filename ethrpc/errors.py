"""Exceptions raised by the Ethereum RPC client.

Every failure surfaces to the caller as a subclass of ``EthRPCError``. The
only condition retried internally is a rate-limited transport status, and
only inside ``RetryableCaller``.
"""


class EthRPCError(Exception):
    """Base class for all client errors."""


class TransportError(EthRPCError):
    """Network/IO failure or an unhandled non-success HTTP status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ProtocolError(EthRPCError):
    """Malformed envelope, JSON-RPC error object, or batch correlation failure.

    When the node answered with a JSON-RPC ``error`` object its ``code`` and
    ``message`` are preserved on the exception.
    """

    def __init__(
        self,
        message: str,
        *,
        code: int | None = None,
        rpc_message: str | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.rpc_message = rpc_message

    @classmethod
    def from_rpc_error(cls, code: int, message: str) -> "ProtocolError":
        """Build from a JSON-RPC error object."""
        return cls(f"RPC error {code} ({message})", code=code, rpc_message=message)


class DecodeError(EthRPCError, ValueError):
    """Hex parse failure or a required field missing from a payload."""


class NotFoundError(EthRPCError):
    """The lookup succeeded but the node has no such block/transaction/receipt."""


class UnsupportedOperationError(EthRPCError):
    """The backend variant cannot serve the requested operation."""

    def __init__(self, backend: str, operation: str) -> None:
        super().__init__(f"{operation} is not supported by {backend}")
        self.backend = backend
        self.operation = operation


class RetryExhaustedError(EthRPCError):
    """Every credential attempt was rate limited."""

    def __init__(self, attempts: int) -> None:
        super().__init__(f"rate limited on all {attempts} attempts")
        self.attempts = attempts


__all__ = [
    "DecodeError",
    "EthRPCError",
    "NotFoundError",
    "ProtocolError",
    "RetryExhaustedError",
    "TransportError",
    "UnsupportedOperationError",
]
