"""Listener lifecycle around a uvicorn server.

The listening socket is bound here rather than inside uvicorn so a bind
failure is logged and reported to the caller instead of terminating the
process through `sys.exit`.
"""

from __future__ import annotations

import logging
import socket
import threading
import time

import uvicorn
from fastapi import FastAPI

from status_responder.config import ResponderSettings

logger = logging.getLogger(__name__)

_STARTUP_POLL_SECONDS = 0.01


class ServerLifecycleError(RuntimeError):
    """Raised when a background listener fails to start or stop in time."""


class ResponderServer:
    """Bind, serve and stop one status responder listener."""

    def __init__(self, application: FastAPI, settings: ResponderSettings):
        """Initialize server wrapper.

        Args:
            application: ASGI application to serve.
            settings: Validated settings providing host, port and log level.

        Raises:
            ValueError: Raised when application or settings is None.
        """

        if application is None:
            raise ValueError("application must not be None")
        if settings is None:
            raise ValueError("settings must not be None")
        self._settings = settings
        self._server = uvicorn.Server(
            uvicorn.Config(
                application,
                host=settings.application_host,
                port=settings.application_port,
                log_level=settings.log_level,
                log_config=None,
                http="h11",
            )
        )
        self._socket: socket.socket | None = None
        self._thread: threading.Thread | None = None

    def server_bind(self) -> bool:
        """Bind the listening socket on the configured host and port.

        Returns:
            bool: True when bound, False when the bind failed. Failures are
                logged and never retried.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        if self._socket is not None:
            return True

        host = self._settings.application_host
        port = self._settings.application_port
        address_family = socket.AF_INET6 if ":" in host else socket.AF_INET
        listener = socket.socket(address_family, socket.SOCK_STREAM)
        try:
            listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            listener.bind((host, port))
        except OSError as error:
            listener.close()
            logger.error("failed to stand up server on %s:%s: %s", host, port, error)
            return False

        self._socket = listener
        logger.info("status responder bound to %s:%s", host, self.server_bound_port())
        return True

    def server_bound_port(self) -> int:
        """Return the port the listener is bound to.

        Returns:
            int: Actual TCP port, resolved by the OS when configured as `0`.

        Raises:
            ServerLifecycleError: Raised when the socket is not bound.
        """

        if self._socket is None:
            raise ServerLifecycleError("server socket is not bound")
        return int(self._socket.getsockname()[1])

    def server_run(self) -> bool:
        """Bind and serve in the foreground until uvicorn exits.

        uvicorn installs its own signal handlers, so SIGINT/SIGTERM stop the
        loop after in-flight requests drain.

        Returns:
            bool: False when the bind failed and nothing was served, True otherwise.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        if not self.server_bind():
            return False
        try:
            self._server.run(sockets=[self._socket])
        finally:
            self._server_close_socket()
        return True

    def server_start_background(self, timeout_seconds: float = 5.0) -> bool:
        """Bind and serve from a daemon thread, waiting until requests are accepted.

        Args:
            timeout_seconds: Maximum time to wait for uvicorn startup.

        Returns:
            bool: False when the bind failed, True once the listener is accepting.

        Raises:
            ServerLifecycleError: Raised when startup does not finish within the timeout.
        """

        if not self.server_bind():
            return False

        self._thread = threading.Thread(
            target=self._server.run,
            kwargs={"sockets": [self._socket]},
            name="status-responder",
            daemon=True,
        )
        self._thread.start()

        deadline = time.monotonic() + timeout_seconds
        try:
            while not self._server.started:
                if not self._thread.is_alive():
                    raise ServerLifecycleError("status responder thread exited during startup")
                if time.monotonic() >= deadline:
                    raise ServerLifecycleError(f"status responder did not start within {timeout_seconds}s")
                time.sleep(_STARTUP_POLL_SECONDS)
        except ServerLifecycleError:
            self._server.should_exit = True
            self._thread.join(timeout_seconds)
            self._thread = None
            self._server_close_socket()
            raise
        return True

    def server_stop(self, timeout_seconds: float = 5.0) -> None:
        """Ask uvicorn to exit, drain in-flight requests and join the thread.

        Args:
            timeout_seconds: Maximum time to wait for the serving thread.

        Raises:
            ServerLifecycleError: Raised when the serving thread does not exit in time.
        """

        self._server.should_exit = True
        if self._thread is not None:
            self._thread.join(timeout_seconds)
            if self._thread.is_alive():
                raise ServerLifecycleError(f"status responder did not stop within {timeout_seconds}s")
            self._thread = None
        self._server_close_socket()

    def _server_close_socket(self) -> None:
        if self._socket is not None:
            self._socket.close()
            self._socket = None
