"""Human-readable formatting for uptime durations and byte counts."""

from __future__ import annotations

from fractions import Fraction
from typing import Final

from .errors import InvalidArgumentError

BYTE_UNIT_BASE: Final[int] = 1024
BYTE_UNIT_PREFIXES: Final[str] = "KMGTPE"


def _status_require_non_negative_int(value: object, argument_name: str) -> int:
    # bool is an int subclass and is never a valid counter
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{argument_name} must be an integer, got {type(value).__name__}", argument_name)
    if value < 0:
        raise InvalidArgumentError(f"{argument_name} must be non-negative, got {value}", argument_name)
    return value


def status_format_uptime(uptime_millis: int) -> str:
    """Format a millisecond duration using its two coarsest units.

    Args:
        uptime_millis: Non-negative duration in milliseconds.

    Returns:
        str: Text such as `1 days, 1 hours` or `30 seconds`.

    Raises:
        InvalidArgumentError: Raised when uptime_millis is negative or not an integer.
    """

    uptime_millis = _status_require_non_negative_int(uptime_millis, "uptime_millis")
    seconds = uptime_millis // 1000
    minutes = seconds // 60
    hours = minutes // 60
    days = hours // 24

    if days > 0:
        return f"{days} days, {hours % 24} hours"
    if hours > 0:
        return f"{hours} hours, {minutes % 60} minutes"
    if minutes > 0:
        return f"{minutes} minutes, {seconds % 60} seconds"
    return f"{seconds} seconds"


def status_resolve_byte_exponent(byte_count: int) -> int:
    """Resolve the 1024-based unit exponent with exact integer arithmetic.

    Args:
        byte_count: Byte count of at least 1024.

    Returns:
        int: Largest exponent `exp >= 1` with `1024 ** exp <= byte_count`.

    Raises:
        InvalidArgumentError: Raised when the exponent exceeds the unit prefix table.
    """

    exponent = 1
    while byte_count >= BYTE_UNIT_BASE ** (exponent + 1):
        exponent += 1
    if exponent > len(BYTE_UNIT_PREFIXES):
        raise InvalidArgumentError(
            f"byte_count {byte_count} exceeds the largest supported unit ({BYTE_UNIT_PREFIXES[-1]}B)",
            "byte_count",
        )
    return exponent


def status_format_bytes(byte_count: int) -> str:
    """Format a byte count with a 1024 divisor and one decimal digit.

    Units are labelled `KB`, `MB`, `GB`... (not `KiB`). Rounding is half-up on
    the exact quotient.

    Args:
        byte_count: Non-negative byte count.

    Returns:
        str: Text such as `512 B` or `1.5 KB`.

    Raises:
        InvalidArgumentError: Raised when byte_count is negative, not an integer, or too large.
    """

    byte_count = _status_require_non_negative_int(byte_count, "byte_count")
    if byte_count < BYTE_UNIT_BASE:
        return f"{byte_count} B"

    exponent = status_resolve_byte_exponent(byte_count)
    scaled_value = Fraction(byte_count, BYTE_UNIT_BASE**exponent)
    tenths = int(scaled_value * 10 + Fraction(1, 2))
    unit_prefix = BYTE_UNIT_PREFIXES[exponent - 1]
    return f"{tenths // 10}.{tenths % 10} {unit_prefix}B"
