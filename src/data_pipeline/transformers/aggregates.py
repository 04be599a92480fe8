"""Pure transforms from dashboard aggregates to chart-ready shapes.

Nothing here performs I/O or keeps state; the overview recomputes these views
on every render from the current summary and activity.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from config.config import (
    ADDRESS_SEGMENTS,
    DISPLAY_TZ,
    RECENT_ACTIVITY_LIMIT,
)
from config.schemas import (
    ActivityEntry,
    ActivityRow,
    CategoryPoint,
    DailyCount,
    DashboardSummary,
    QueryTypeCount,
    TimeSeriesPoint,
    TwoValueRatio,
)
from utils.datetime import format_local_timestamp, format_month_day, parse_bucket_date
from utils.logging import get_logger

logger = get_logger(__name__)


def to_category_points(query_types: Optional[Sequence[QueryTypeCount]]) -> List[CategoryPoint]:
    """Map ``{label, count}`` pairs to ``{name, value}`` points, keeping order."""
    return [
        CategoryPoint(name=item["label"], value=item["count"])
        for item in (query_types or [])
    ]


def to_two_value_ratio(
    partial: int,
    total: int,
    partial_label: str,
    total_label: str,
) -> TwoValueRatio:
    """Split ``total`` into ``partial`` and the remainder.

    The remainder is ``total - partial`` and is not clamped; an inconsistent
    upstream (``partial > total``) yields a negative second value.
    """
    remainder = total - partial
    if remainder < 0:
        logger.debug(f"Negative remainder for {partial_label!r}: {partial} > {total}")
    return TwoValueRatio(
        label_a=partial_label,
        value_a=partial,
        label_b=total_label,
        value_b=remainder,
    )


def to_time_series(queries_per_day: Optional[Sequence[DailyCount]]) -> List[TimeSeriesPoint]:
    """Label each day bucket as ``Mon D`` and pair it with its count.

    ``None`` and empty input both produce an empty series. A bucket whose date
    cannot be parsed keeps its raw value as the label.
    """
    if not queries_per_day:
        return []

    points: List[TimeSeriesPoint] = []
    for item in queries_per_day:
        day = parse_bucket_date(item["bucket_date"])
        name = format_month_day(day) if day is not None else item["bucket_date"]
        points.append(TimeSeriesPoint(name=name, value=item["count"]))
    return points


def short_address(address: str, segments: int = ADDRESS_SEGMENTS) -> str:
    """Keep the first ``segments`` comma-separated parts of ``address``."""
    return ",".join(address.split(",")[:segments])


def to_activity_rows(
    entries: Sequence[ActivityEntry],
    limit: int = RECENT_ACTIVITY_LIMIT,
    tz_name: str = DISPLAY_TZ,
) -> List[ActivityRow]:
    """Display rows for the first ``limit`` entries, in received order.

    The entries themselves are left untouched; only the row carries the
    shortened address.
    """
    return [
        ActivityRow(
            type=entry.query_type,
            description=entry.description,
            location=short_address(entry.location.address),
            status=entry.status,
            time=format_local_timestamp(entry.timestamp, tz_name),
        )
        for entry in list(entries)[:limit]
    ]


@dataclass(frozen=True)
class RadialCard:
    title: str
    ratio: TwoValueRatio


@dataclass(frozen=True)
class OverviewViewModel:
    """Every derived view the overview page renders."""
    radial_cards: List[RadialCard] = field(default_factory=list)
    total_queries: int = 0
    time_series: List[TimeSeriesPoint] = field(default_factory=list)
    categories: List[CategoryPoint] = field(default_factory=list)
    activity_rows: List[ActivityRow] = field(default_factory=list)


def build_radial_cards(summary: DashboardSummary) -> List[RadialCard]:
    status = summary["query_status"]
    total = summary["total_queries"]
    return [
        RadialCard("Pending Queries", to_two_value_ratio(status["pending"], total, "Pending", "Total")),
        RadialCard("In Progress", to_two_value_ratio(status["in_progress"], total, "In Progress", "Total")),
        RadialCard("Resolved Issues", to_two_value_ratio(status["resolved"], total, "Resolved", "Total")),
        RadialCard(
            "Active Users",
            to_two_value_ratio(
                summary["active_sessions"], summary["user_count"], "Active Sessions", "Total Users"
            ),
        ),
    ]


def build_overview(
    summary: DashboardSummary,
    activity: Sequence[ActivityEntry],
    *,
    activity_limit: int = RECENT_ACTIVITY_LIMIT,
    tz_name: str = DISPLAY_TZ,
) -> OverviewViewModel:
    """Compose the overview from the current summary and activity."""
    return OverviewViewModel(
        radial_cards=build_radial_cards(summary),
        total_queries=summary["total_queries"],
        time_series=to_time_series(summary.get("queries_per_day")),
        categories=to_category_points(summary.get("query_types")),
        activity_rows=to_activity_rows(activity, limit=activity_limit, tz_name=tz_name),
    )
