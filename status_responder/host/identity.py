"""Hostname lookup backed by the operating system."""

from __future__ import annotations

import logging
import socket
from typing import Callable

from .interfaces import HostIdentityPort

logger = logging.getLogger(__name__)


class SocketHostIdentityService(HostIdentityPort):
    """Best-effort hostname lookup that never fails the caller."""

    def __init__(self, hostname_resolver: Callable[[], str] = socket.gethostname):
        """Initialize hostname lookup service.

        Args:
            hostname_resolver: Zero-argument callable returning the hostname.

        Raises:
            ValueError: Raised when hostname_resolver is None.
        """

        if hostname_resolver is None:
            raise ValueError("hostname_resolver must not be None")
        self._hostname_resolver = hostname_resolver

    def host_resolve_hostname(self) -> str:
        """Return the OS hostname, or an empty string when the lookup fails.

        Returns:
            str: Hostname text, empty on lookup failure.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        try:
            return self._hostname_resolver()
        except OSError as error:
            logger.warning("hostname lookup failed, responding with empty hostname: %s", error)
            return ""
