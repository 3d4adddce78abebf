"""Host environment probes for hostname and wall-clock lookups."""

from .clock import SystemClockService
from .identity import SocketHostIdentityService
from .interfaces import ClockPort, HostIdentityPort

__all__ = ["ClockPort", "HostIdentityPort", "SocketHostIdentityService", "SystemClockService"]
