"""Typed domain models shared across runtime layers.

The status snapshot is the only value the service produces. It is built per
request, serialized at once and never stored.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final

from .timestamps import domain_format_rfc3339_nano, domain_parse_rfc3339_nano

STATUS_FIELD_TIME_STAMP: Final[str] = "time_stamp"
STATUS_FIELD_HOSTNAME: Final[str] = "hostname"
_STATUS_FIELDS: Final[frozenset[str]] = frozenset({STATUS_FIELD_TIME_STAMP, STATUS_FIELD_HOSTNAME})


@dataclass(frozen=True)
class StatusSnapshot:
    """Point-in-time description of the serving host.

    Attributes:
        timestamp_ns: Capture instant as UTC nanoseconds since the Unix epoch.
        hostname: Host/container name reported by the OS, empty when unavailable.
    """

    timestamp_ns: int
    hostname: str


def domain_serialize_status_snapshot(snapshot: StatusSnapshot) -> dict[str, str]:
    """Map a snapshot to its JSON wire representation.

    Args:
        snapshot: Snapshot to serialize.

    Returns:
        dict[str, str]: Mapping with exactly the `time_stamp` and `hostname` keys.

    Raises:
        OverflowError: Raised when the timestamp cannot be rendered.
    """

    return {
        STATUS_FIELD_TIME_STAMP: domain_format_rfc3339_nano(snapshot.timestamp_ns),
        STATUS_FIELD_HOSTNAME: snapshot.hostname,
    }


def domain_deserialize_status_snapshot(payload: Mapping[str, object]) -> StatusSnapshot:
    """Rebuild a snapshot from its JSON wire representation.

    Args:
        payload: Decoded JSON object.

    Returns:
        StatusSnapshot: Snapshot equal to the one that was serialized.

    Raises:
        ValueError: Raised when keys are missing or unexpected, or values are not strings.
    """

    payload_keys = set(payload)
    if payload_keys != _STATUS_FIELDS:
        missing_keys = sorted(_STATUS_FIELDS - payload_keys)
        unexpected_keys = sorted(payload_keys - _STATUS_FIELDS)
        raise ValueError(f"status payload key mismatch: missing={missing_keys} unexpected={unexpected_keys}")

    time_stamp = payload[STATUS_FIELD_TIME_STAMP]
    hostname = payload[STATUS_FIELD_HOSTNAME]
    if not isinstance(time_stamp, str) or not isinstance(hostname, str):
        raise ValueError("status payload values must be strings")

    return StatusSnapshot(timestamp_ns=domain_parse_rfc3339_nano(time_stamp), hostname=hostname)
