"""Tests for status snapshot assembly."""

import pytest

from status_responder.domain import StatusSnapshot
from status_responder.snapshot import StatusSnapshotService


class _RecordingHostIdentity:
    """Hostname probe stub that records call order."""

    def __init__(self, calls: list[str], hostname: str):
        self._calls = calls
        self._hostname = hostname

    def host_resolve_hostname(self) -> str:
        self._calls.append("hostname")
        return self._hostname


class _RecordingClock:
    """Clock stub that records call order and returns a fixed instant."""

    def __init__(self, calls: list[str], now_ns: int):
        self._calls = calls
        self._now_ns = now_ns

    def clock_now_ns(self) -> int:
        self._calls.append("clock")
        return self._now_ns


def test_snapshot_capture_queries_hostname_before_clock() -> None:
    """Build a snapshot from the probes, resolving hostname before the instant.

    Returns:
        None: Assertions validate snapshot content and probe order.

    Raises:
        AssertionError: Raised when snapshot content or order is wrong.
    """

    calls: list[str] = []
    service = StatusSnapshotService(
        host_identity=_RecordingHostIdentity(calls, "node-a"),
        clock=_RecordingClock(calls, 1_700_000_000_000_000_042),
    )

    snapshot = service.snapshot_capture()

    assert snapshot == StatusSnapshot(timestamp_ns=1_700_000_000_000_000_042, hostname="node-a")
    assert calls == ["hostname", "clock"]


def test_snapshot_capture_builds_a_fresh_value_per_call() -> None:
    """Return independent snapshot values for repeated captures."""

    calls: list[str] = []
    service = StatusSnapshotService(
        host_identity=_RecordingHostIdentity(calls, ""),
        clock=_RecordingClock(calls, 5),
    )

    first_snapshot = service.snapshot_capture()
    second_snapshot = service.snapshot_capture()

    assert first_snapshot == second_snapshot
    assert first_snapshot is not second_snapshot
    assert calls == ["hostname", "clock", "hostname", "clock"]


@pytest.mark.parametrize("missing", ["host_identity", "clock"])
def test_snapshot_service_rejects_missing_dependencies(missing: str) -> None:
    """Raise ValueError when a probe dependency is None.

    Args:
        missing: Name of the dependency passed as None.

    Raises:
        AssertionError: Raised when construction succeeds.
    """

    dependencies = {
        "host_identity": _RecordingHostIdentity([], "h"),
        "clock": _RecordingClock([], 0),
    }
    dependencies[missing] = None

    with pytest.raises(ValueError, match=f"{missing} must not be None"):
        StatusSnapshotService(**dependencies)
