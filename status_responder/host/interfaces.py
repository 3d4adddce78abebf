"""Typed interfaces for host environment probes."""

from typing import Protocol


class HostIdentityPort(Protocol):
    """Port definition for host/container name lookup."""

    def host_resolve_hostname(self) -> str:
        """Return the current host/container name.

        Returns:
            str: Hostname reported by the environment, empty when unavailable.

        Raises:
            RuntimeError: Implementations must not raise for lookup failures.
        """


class ClockPort(Protocol):
    """Port definition for wall-clock reads."""

    def clock_now_ns(self) -> int:
        """Return the current wall-clock instant.

        Returns:
            int: UTC nanoseconds since the Unix epoch.
        """
