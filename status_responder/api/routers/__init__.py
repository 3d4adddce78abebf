"""API router package for endpoint composition."""

from .status import STATUS_ROUTE_PATH, api_create_status_endpoint

__all__ = ["STATUS_ROUTE_PATH", "api_create_status_endpoint"]
