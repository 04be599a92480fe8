"""Data collectors for the dashboard backend."""

from .dashboard_api import DashboardAPIClient
from .errors import DashboardFetchError, HttpStatusError, MalformedPayloadError, NetworkError

__all__ = [
    "DashboardAPIClient",
    "DashboardFetchError",
    "HttpStatusError",
    "MalformedPayloadError",
    "NetworkError",
]
