"""RFC-3339 timestamp helpers with nanosecond precision.

`datetime` stops at microseconds, so instants travel through the service as
integer nanoseconds since the Unix epoch and are only converted to text at the
wire boundary.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from typing import Final

NANOSECONDS_PER_SECOND: Final[int] = 1_000_000_000

_EPOCH_UTC: Final[datetime] = datetime(1970, 1, 1, tzinfo=timezone.utc)
_RFC3339_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?P<date>\d{4}-\d{2}-\d{2})[Tt](?P<time>\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<fraction>\d{1,9}))?"
    r"(?P<offset>[Zz]|[+-]\d{2}:\d{2})$"
)


def domain_format_rfc3339_nano(timestamp_ns: int) -> str:
    """Render epoch nanoseconds as an RFC-3339 UTC timestamp.

    Args:
        timestamp_ns: Nanoseconds since the Unix epoch.

    Returns:
        str: Timestamp like `2024-05-01T12:30:45.123456789Z` with exactly nine
            fractional digits.

    Raises:
        OverflowError: Raised when the instant falls outside the `datetime` range.
    """

    seconds, nanoseconds = divmod(timestamp_ns, NANOSECONDS_PER_SECOND)
    instant = _EPOCH_UTC + timedelta(seconds=seconds)
    whole_seconds = instant.replace(tzinfo=None).isoformat(timespec="seconds")
    return f"{whole_seconds}.{nanoseconds:09d}Z"


def domain_parse_rfc3339_nano(value: str) -> int:
    """Parse an RFC-3339 timestamp into UTC epoch nanoseconds.

    Accepts zero to nine fractional digits and either a `Z` suffix or a
    numeric `+HH:MM` / `-HH:MM` offset.

    Args:
        value: Timestamp text.

    Returns:
        int: Nanoseconds since the Unix epoch.

    Raises:
        ValueError: Raised when the text is not a valid RFC-3339 timestamp.
    """

    match = _RFC3339_PATTERN.match(value.strip())
    if match is None:
        raise ValueError(f"invalid RFC-3339 timestamp: {value!r}")

    naive_instant = datetime.fromisoformat(f"{match.group('date')}T{match.group('time')}")
    offset_text = match.group("offset")
    if offset_text in ("Z", "z"):
        offset = timezone.utc
    else:
        sign = -1 if offset_text[0] == "-" else 1
        offset_hours, offset_minutes = int(offset_text[1:3]), int(offset_text[4:6])
        if offset_minutes >= 60:
            raise ValueError(f"invalid RFC-3339 offset: {offset_text!r}")
        offset = timezone(sign * timedelta(hours=offset_hours, minutes=offset_minutes))

    delta = naive_instant.replace(tzinfo=offset) - _EPOCH_UTC
    whole_seconds = delta.days * 86_400 + delta.seconds
    fraction_ns = int((match.group("fraction") or "").ljust(9, "0"))
    return whole_seconds * NANOSECONDS_PER_SECOND + fraction_ns
