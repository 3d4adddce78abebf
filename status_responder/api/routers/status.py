"""Catch-all status endpoint answering every request with a status snapshot."""

from typing import Callable, Final

from fastapi import Request, status
from fastapi.responses import JSONResponse

from status_responder.domain import domain_serialize_status_snapshot
from status_responder.snapshot import StatusSnapshotPort

STATUS_ROUTE_PATH: Final[str] = "/{request_path:path}"


def api_create_status_endpoint(status_service: StatusSnapshotPort) -> Callable[[Request], JSONResponse]:
    """Create the endpoint returning the status payload for any path and method.

    The endpoint is registered as a plain route with no method list, so every
    HTTP method, including extension methods, reaches it.

    Args:
        status_service: Snapshot capture service.

    Returns:
        Callable[[Request], JSONResponse]: Request handler for `STATUS_ROUTE_PATH`.

    Raises:
        ValueError: Raised when status_service is invalid.
    """

    if status_service is None:
        raise ValueError("status_service must not be None")

    def api_status_snapshot(_request: Request) -> JSONResponse:
        """Return the current timestamp and hostname.

        Method, path and body do not influence the response. `JSONResponse`
        fixes the content type header before any body bytes reach the transport.

        Args:
            _request: Incoming request, ignored.

        Returns:
            JSONResponse: HTTP 200 payload with `time_stamp` and `hostname`.
        """

        snapshot = status_service.snapshot_capture()
        return JSONResponse(
            content=domain_serialize_status_snapshot(snapshot),
            status_code=status.HTTP_200_OK,
            media_type="application/json",
        )

    return api_status_snapshot
