"""Shared serialization helpers.

Provides the ``snake_to_camel`` alias generator used by the Pydantic
model configs and the UTC timestamp format written into reports.
"""

from __future__ import annotations

from datetime import UTC, datetime


def snake_to_camel(name: str) -> str:
    """Convert a snake_case string to camelCase.

    Args:
        name: A snake_case identifier such as
            ``"suspicious_cookie_count"``.

    Returns:
        The camelCase equivalent, e.g. ``"suspiciousCookieCount"``.
    """
    parts = name.split("_")
    return parts[0] + "".join(w.capitalize() for w in parts[1:])


def to_iso_timestamp(moment: datetime) -> str:
    """Render *moment* as UTC ISO-8601 with milliseconds and a ``Z`` suffix."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    utc = moment.astimezone(UTC)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def epoch_to_iso(seconds: float) -> str:
    """Render an epoch-seconds value as a report timestamp."""
    return to_iso_timestamp(datetime.fromtimestamp(seconds, UTC))
