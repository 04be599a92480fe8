"""Async client for the traffic reports dashboard API.

Both dashboard resources are requested concurrently and joined: the join
succeeds only when both requests succeed. Failure detail is logged here and
surfaced to callers as a :class:`DashboardFetchError` subclass.
"""

import asyncio
from typing import Any, List, Optional, Tuple

import httpx

from config.config import FETCH_TIMEOUT_S, RECENT_ACTIVITY_PATH, SUMMARY_PATH
from config.models import normalize_base_url
from config.schemas import ActivityEntry, DashboardSummary
from data_pipeline.collectors.errors import (
    HttpStatusError,
    MalformedPayloadError,
    NetworkError,
)
from data_pipeline.processors.payloads import parse_activity, parse_summary
from utils.logging import get_logger

logger = get_logger(__name__)


class DashboardAPIClient:
    """Fetches summary aggregates and recent activity from the backend.

    Args:
        timeout_s: Deadline in seconds for each whole request, body included.
        transport: Optional httpx transport, used by tests to stub the backend.
    """

    def __init__(
        self,
        *,
        timeout_s: float = FETCH_TIMEOUT_S,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.timeout_s = timeout_s
        self.transport = transport

    async def _get_data(self, client: httpx.AsyncClient, path: str) -> Any:
        """GET ``path`` and return the ``data`` member of the JSON envelope."""
        url = f"{str(client.base_url).rstrip('/')}{path}"
        try:
            response = await asyncio.wait_for(client.get(path), self.timeout_s)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"Dashboard request {url} returned HTTP {e.response.status_code}")
            raise HttpStatusError(
                f"HTTP {e.response.status_code} from {url}",
                url=url,
                status_code=e.response.status_code,
            ) from e
        except (httpx.TimeoutException, asyncio.TimeoutError) as e:
            logger.error(f"Dashboard request {url} timed out after {self.timeout_s}s")
            raise NetworkError(f"Timed out requesting {url}", url=url) from e
        except httpx.HTTPError as e:
            logger.error(f"Dashboard request {url} failed: {e!r}")
            raise NetworkError(f"Could not reach {url}", url=url) from e

        try:
            body = response.json()
        except ValueError as e:
            logger.error(f"Dashboard response from {url} is not valid JSON: {e}")
            raise MalformedPayloadError(f"Invalid JSON from {url}", url=url) from e

        if not isinstance(body, dict) or "data" not in body:
            logger.error(f"Dashboard response from {url} has no 'data' envelope")
            raise MalformedPayloadError(f"Missing 'data' envelope from {url}", url=url)
        return body["data"]

    def _client(self, base_url: str) -> httpx.AsyncClient:
        if not base_url or not base_url.strip():
            raise ValueError("base_url must be a non-empty address")
        return httpx.AsyncClient(
            base_url=normalize_base_url(base_url),
            timeout=httpx.Timeout(self.timeout_s),
            transport=self.transport,
        )

    async def _summary(self, client: httpx.AsyncClient) -> DashboardSummary:
        data = await self._get_data(client, SUMMARY_PATH)
        if data is not None and not isinstance(data, dict):
            raise MalformedPayloadError("Summary 'data' is not an object", url=str(client.base_url))
        return parse_summary(data)

    async def _recent_activity(self, client: httpx.AsyncClient) -> List[ActivityEntry]:
        data = await self._get_data(client, RECENT_ACTIVITY_PATH)
        if data is not None and not isinstance(data, list):
            raise MalformedPayloadError("Recent activity 'data' is not a list", url=str(client.base_url))
        return parse_activity(data)

    async def fetch_summary(self, base_url: str) -> DashboardSummary:
        """Fetch ``/api/dashboard/summary``."""
        async with self._client(base_url) as client:
            return await self._summary(client)

    async def fetch_recent_activity(self, base_url: str) -> List[ActivityEntry]:
        """Fetch ``/api/dashboard/recent-activity``."""
        async with self._client(base_url) as client:
            return await self._recent_activity(client)

    async def fetch_dashboard(self, base_url: str) -> Tuple[DashboardSummary, List[ActivityEntry]]:
        """Fetch both resources concurrently and wait for both to settle.

        Raises:
            DashboardFetchError: If either request failed. When both failed,
                the summary failure is raised.
        """
        async with self._client(base_url) as client:
            results = await asyncio.gather(
                self._summary(client),
                self._recent_activity(client),
                return_exceptions=True,
            )

        for result in results:
            if isinstance(result, asyncio.CancelledError):
                # gather returned, so this task was not the one cancelled
                logger.error(f"Dashboard request to {base_url} was cancelled")
                raise NetworkError(f"Request to {base_url} was cancelled", url=base_url) from result
            if isinstance(result, BaseException):
                raise result

        summary, activity = results
        logger.debug(
            f"Fetched dashboard from {base_url}: total_queries={summary['total_queries']}, "
            f"activity={len(activity)}"
        )
        return summary, activity
