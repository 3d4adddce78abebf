"""FastAPI application factory for the status responder.

Interactive docs and the OpenAPI schema are disabled so that the catch-all
status route owns every path, `/docs` and `/openapi.json` included.
"""

from fastapi import FastAPI

from status_responder import __version__
from status_responder.config import ResponderSettings
from status_responder.snapshot import StatusSnapshotPort

from .routers import STATUS_ROUTE_PATH, api_create_status_endpoint


def create_api_application(settings: ResponderSettings, status_service: StatusSnapshotPort) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated settings, exposed as `application.state.settings`.
        status_service: Snapshot capture service used by the status route.

    Returns:
        FastAPI: Framework application answering every request with a status snapshot.

    Raises:
        ValueError: Raised when settings or status_service is invalid.
    """

    if settings is None:
        raise ValueError("settings must not be None")

    application = FastAPI(
        title="Status Responder",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    application.state.settings = settings
    # No method list: every HTTP method, extension methods included, reaches the endpoint.
    application.add_route(
        STATUS_ROUTE_PATH,
        api_create_status_endpoint(status_service=status_service),
        methods=None,
        include_in_schema=False,
    )

    return application
