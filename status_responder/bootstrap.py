"""Application bootstrap wiring for startup validation and dependency assembly."""

import logging

from fastapi import FastAPI

from status_responder.api import create_api_application
from status_responder.config import ResponderSettings
from status_responder.host import SocketHostIdentityService, SystemClockService
from status_responder.server import ResponderServer
from status_responder.snapshot import StatusSnapshotService

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def bootstrap_configure_logging(log_level: str) -> None:
    """Configure root logging for the process.

    Args:
        log_level: Validated level name such as `info`.
    """

    logging.basicConfig(level=getattr(logging, log_level.upper()), format=_LOG_FORMAT)


def bootstrap_create_application(settings: ResponderSettings) -> FastAPI:
    """Assemble the runtime application with OS-backed probes.

    Args:
        settings: Validated runtime settings.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        ValueError: Raised when settings is None.
    """

    status_service = StatusSnapshotService(
        host_identity=SocketHostIdentityService(),
        clock=SystemClockService(),
    )
    return create_api_application(settings=settings, status_service=status_service)


def bootstrap_create_server(settings: ResponderSettings) -> ResponderServer:
    """Build the listener wrapper around a freshly assembled application.

    Args:
        settings: Validated runtime settings.

    Returns:
        ResponderServer: Unbound server ready for `server_run` or `server_start_background`.

    Raises:
        ValueError: Raised when settings is None.
    """

    return ResponderServer(application=bootstrap_create_application(settings), settings=settings)
