"""Domain models used across application layer boundaries."""

from .models import (
    STATUS_FIELD_HOSTNAME,
    STATUS_FIELD_TIME_STAMP,
    StatusSnapshot,
    domain_deserialize_status_snapshot,
    domain_serialize_status_snapshot,
)
from .timestamps import domain_format_rfc3339_nano, domain_parse_rfc3339_nano

__all__ = [
    "STATUS_FIELD_HOSTNAME",
    "STATUS_FIELD_TIME_STAMP",
    "StatusSnapshot",
    "domain_deserialize_status_snapshot",
    "domain_format_rfc3339_nano",
    "domain_parse_rfc3339_nano",
    "domain_serialize_status_snapshot",
]
