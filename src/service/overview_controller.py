"""State machine behind the dashboard overview page.

Owns the fetch -> transform -> render pipeline for a single view:

- OverviewController.reload(): fetch summary and recent activity for an address
- OverviewController.view_model(): derived chart views, only once READY
- ViewState: IDLE -> LOADING -> READY | FAILED, re-entered only via reload()

Every reload takes a generation token. A result is applied only if no newer
reload has started and the configured address still matches, so an in-flight
response for an old address can never overwrite newer state.
"""

import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from config.config import FETCH_ERROR_MESSAGE
from config.models import DashboardConfig, normalize_base_url
from config.schemas import ActivityEntry, DashboardSummary
from data_pipeline.collectors.dashboard_api import DashboardAPIClient
from data_pipeline.collectors.errors import DashboardFetchError
from data_pipeline.processors.payloads import empty_summary
from data_pipeline.transformers.aggregates import OverviewViewModel, build_overview
from utils.logging import get_logger

logger = get_logger(__name__)


class ViewState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class FetchFailure:
    """User-facing failure; the cause is only ever logged."""
    message: str = FETCH_ERROR_MESSAGE


class OverviewController:
    """Single writer of the overview page state.

    Args:
        config: Injected dashboard configuration.
        client: API client; defaults to one honouring ``config.timeout_s``.
    """

    def __init__(self, config: DashboardConfig, client: Optional[DashboardAPIClient] = None):
        self.config = config
        self.client = client or DashboardAPIClient(timeout_s=config.timeout_s)
        self.backend_url = config.backend_url
        self.state = ViewState.IDLE
        self.summary: DashboardSummary = empty_summary()
        self.recent_activity: List[ActivityEntry] = []
        self.error: Optional[FetchFailure] = None
        self._generation = 0

    @property
    def error_message(self) -> Optional[str]:
        return self.error.message if self.error else None

    def needs_reload(self, backend_url: Optional[str] = None) -> bool:
        """True before the first load, or when ``backend_url`` differs from the current address."""
        if self.state is ViewState.IDLE:
            return True
        if backend_url is None:
            return False
        return normalize_base_url(backend_url) != self.backend_url

    def _is_stale(self, generation: int, address: str) -> bool:
        return generation != self._generation or address != self.backend_url

    async def reload(self, backend_url: Optional[str] = None) -> ViewState:
        """Fetch both dashboard resources and apply them all-or-nothing.

        Args:
            backend_url: New backend address. ``None`` reloads the current one.

        Returns:
            The view state after this reload settled. A superseded reload
            returns the state as left by the newer one.
        """
        if backend_url is not None:
            address = normalize_base_url(backend_url)
            if not address:
                raise ValueError("backend_url must be a non-empty address")
            self.backend_url = address

        self._generation += 1
        generation = self._generation
        address = self.backend_url
        previous_state = self.state
        self.state = ViewState.LOADING
        logger.info(f"Loading dashboard data from {address} (generation {generation})")

        try:
            summary, activity = await self.client.fetch_dashboard(address)
        except asyncio.CancelledError:
            if not self._is_stale(generation, address):
                self.state = previous_state
            raise
        except DashboardFetchError as e:
            return self._fail(generation, address, e)
        except Exception as e:
            logger.exception(f"Unexpected error loading dashboard data from {address}")
            return self._fail(generation, address, e)

        if self._is_stale(generation, address):
            logger.debug(f"Discarding stale dashboard data from {address} (generation {generation})")
            return self.state

        self.summary = summary
        self.recent_activity = list(activity)
        self.error = None
        self.state = ViewState.READY
        logger.info(
            f"Dashboard ready: {summary['total_queries']} reports, "
            f"{len(self.recent_activity)} recent activity entries"
        )
        return self.state

    def _fail(self, generation: int, address: str, error: Exception) -> ViewState:
        if self._is_stale(generation, address):
            logger.debug(f"Discarding stale failure from {address} (generation {generation}): {error}")
            return self.state
        self.error = FetchFailure()
        self.state = ViewState.FAILED
        logger.warning(f"Dashboard load failed for {address}: {error}")
        return self.state

    def view_model(self) -> Optional[OverviewViewModel]:
        """Derived views for the current data, or ``None`` unless READY."""
        if self.state is not ViewState.READY:
            return None
        return build_overview(
            self.summary,
            self.recent_activity,
            activity_limit=self.config.recent_activity_limit,
        )
