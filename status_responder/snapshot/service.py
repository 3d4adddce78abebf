"""Status snapshot assembly service."""
# pylint: disable=too-few-public-methods

from __future__ import annotations

from status_responder.domain import StatusSnapshot
from status_responder.host import ClockPort, HostIdentityPort

from .interfaces import StatusSnapshotPort


class StatusSnapshotService(StatusSnapshotPort):
    """Build status snapshots from host identity and clock probes.

    The service holds no mutable state, so concurrent request handlers may
    share one instance.
    """

    def __init__(self, host_identity: HostIdentityPort, clock: ClockPort):
        """Initialize snapshot service dependencies.

        Args:
            host_identity: Hostname lookup probe.
            clock: Wall-clock probe.

        Raises:
            ValueError: Raised when a dependency is None.
        """

        if host_identity is None:
            raise ValueError("host_identity must not be None")
        if clock is None:
            raise ValueError("clock must not be None")
        self._host_identity = host_identity
        self._clock = clock

    def snapshot_capture(self) -> StatusSnapshot:
        """Capture hostname first, then the current instant.

        Returns:
            StatusSnapshot: Snapshot for the request being handled.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        hostname = self._host_identity.host_resolve_hostname()
        timestamp_ns = self._clock.clock_now_ns()
        return StatusSnapshot(timestamp_ns=timestamp_ns, hostname=hostname)
