"""Snapshot layer package for per-request status capture."""

from .interfaces import StatusSnapshotPort
from .service import StatusSnapshotService

__all__ = ["StatusSnapshotPort", "StatusSnapshotService"]
