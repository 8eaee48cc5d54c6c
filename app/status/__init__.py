"""Status layer package for uptime/byte formatting and snapshot assembly."""

from .errors import InvalidArgumentError
from .formatting import status_format_bytes, status_format_uptime, status_resolve_byte_exponent
from .reporter import StatusReporter, status_build_snapshot

__all__ = [
    "InvalidArgumentError",
    "StatusReporter",
    "status_build_snapshot",
    "status_format_bytes",
    "status_format_uptime",
    "status_resolve_byte_exponent",
]
