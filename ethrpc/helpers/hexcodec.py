"""Conversion between wire hex quantities and Python integers.

Ethereum encodes every integer as a variable-length, ``0x``-prefixed hex
string with no leading zeros (zero is ``0x0``).
"""

import re
from datetime import UTC, datetime

from typing import Any

from ethrpc.errors import DecodeError
from ethrpc.helpers.constants import MAX_NATIVE_INT


_HEX_QUANTITY = re.compile(r"0x([0-9a-fA-F]+)")


def parse_big_int(value: Any) -> int:
    """Parse a hex quantity with no range limit.

    Args:
        value: Hex string such as "0xffffffffffffffffffffffff"

    Returns:
        int: Parsed value

    Raises:
        DecodeError: If value is not a string, lacks the 0x prefix, or
            contains no or non-hex digits

    Example:
        >>> parse_big_int("0xde0b6b3a7640000")
        1000000000000000000
    """
    if not isinstance(value, str):
        msg = f"hex quantity must be a string, got {type(value).__name__}"
        raise DecodeError(msg)

    match = _HEX_QUANTITY.fullmatch(value)
    if match is None:
        msg = f"invalid hex quantity: {value!r}"
        raise DecodeError(msg)

    return int(match.group(1), 16)


def parse_int(value: Any) -> int:
    """Parse a hex quantity that must fit a signed 64-bit integer.

    Args:
        value: Hex string such as "0x1234"

    Returns:
        int: Parsed value

    Raises:
        DecodeError: On any parse_big_int failure, or if the value exceeds
            MAX_NATIVE_INT

    Example:
        >>> parse_int("0x1234")
        4660
    """
    result = parse_big_int(value)
    if result > MAX_NATIVE_INT:
        msg = f"hex quantity {value} overflows native integer range"
        raise DecodeError(msg)
    return result


def format_hex(value: int) -> str:
    """Format a non-negative integer as a wire quantity.

    Args:
        value: Integer to encode

    Returns:
        str: Lowercase 0x-prefixed hex without leading zeros

    Raises:
        ValueError: If value is negative

    Example:
        >>> format_hex(0)
        '0x0'
        >>> format_hex(4660)
        '0x1234'
    """
    if value < 0:
        msg = f"quantities are never negative, got {value}"
        raise ValueError(msg)
    return f"0x{value:x}"


def parse_hex_timestamp(hex_timestamp: str) -> datetime:
    """Parse Unix timestamp from hex string to datetime.

    Args:
        hex_timestamp: Hex-encoded Unix timestamp string

    Returns:
        datetime: UTC datetime of the Unix timestamp

    Example:
        >>> parse_hex_timestamp("0x5b734e23")
        datetime.datetime(2018, 8, 14, 21, 48, 19, tzinfo=datetime.timezone.utc)
    """
    return datetime.fromtimestamp(parse_int(hex_timestamp), tz=UTC)


__all__ = [
    "format_hex",
    "parse_big_int",
    "parse_hex_timestamp",
    "parse_int",
]
