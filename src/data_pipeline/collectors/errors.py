"""Exceptions raised by the dashboard API client."""

from typing import Optional


class DashboardFetchError(Exception):
    """Base class for any failure retrieving dashboard data."""

    def __init__(self, message: str, *, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class NetworkError(DashboardFetchError):
    """Backend unreachable, connection dropped, or request timed out."""


class HttpStatusError(DashboardFetchError):
    """Backend answered with a non-2xx status."""

    def __init__(self, message: str, *, url: Optional[str] = None, status_code: int = 0):
        super().__init__(message, url=url)
        self.status_code = status_code


class MalformedPayloadError(DashboardFetchError):
    """Response body is not JSON or lacks the ``data`` envelope."""
