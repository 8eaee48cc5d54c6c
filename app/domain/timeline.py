"""Shared timestamp rendering helpers."""

from __future__ import annotations

from datetime import datetime, timezone


def domain_format_local_timestamp(moment: datetime) -> str:
    """Render one instant as ISO-8601 local time without offset.

    Args:
        moment: Naive local datetime, or offset-aware datetime converted to local time.

    Returns:
        str: ISO-8601 local timestamp such as `2026-10-17T09:30:00`.

    Raises:
        ValueError: Raised when moment is not a datetime.
    """

    if not isinstance(moment, datetime):
        raise ValueError("moment must be a datetime")
    if moment.tzinfo is not None:
        moment = moment.astimezone().replace(tzinfo=None)
    return moment.isoformat()


def domain_format_utc_timestamp(moment: datetime | None = None) -> str:
    """Render one instant as ISO-8601 UTC with millisecond precision and `Z` suffix.

    Args:
        moment: Optional instant, defaults to the current time.

    Returns:
        str: Timestamp such as `2026-10-17T09:30:00.000Z`.
    """

    resolved_moment = moment or datetime.now(timezone.utc)
    if resolved_moment.tzinfo is None:
        resolved_moment = resolved_moment.astimezone()
    utc_moment = resolved_moment.astimezone(timezone.utc)
    return utc_moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")
