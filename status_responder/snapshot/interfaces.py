"""Typed interfaces for status snapshot capture."""

from typing import Protocol

from status_responder.domain import StatusSnapshot


class StatusSnapshotPort(Protocol):
    """Port definition for capturing a fresh status snapshot."""

    def snapshot_capture(self) -> StatusSnapshot:
        """Capture hostname and current instant for one request.

        Returns:
            StatusSnapshot: Freshly built snapshot, never shared between requests.

        Raises:
            RuntimeError: Implementations must not raise for hostname lookup failures.
        """
