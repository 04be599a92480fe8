"""Coerce raw dashboard JSON into typed summaries and activity entries.

The backend is an aggregation service, so labels arrive under ``_id`` and
summary keys are camelCase. Every reader here is tolerant: missing or
mistyped optional fields degrade to zero/empty defaults instead of failing.
"""

from typing import Any, Dict, List, Optional

from config.schemas import (
    ActivityEntry,
    DailyCount,
    DashboardSummary,
    Location,
    QueryStatus,
    QueryTypeCount,
)


def _as_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return 0


def _as_str(value: Any) -> str:
    return "" if value is None else str(value)


def _first(record: Dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in record:
            return record[key]
    return None


def _records(value: Any) -> List[Dict[str, Any]]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


def empty_summary() -> DashboardSummary:
    """Zero-initialized summary used before the first successful fetch."""
    return DashboardSummary(
        queries_per_day=[],
        query_types=[],
        query_status=QueryStatus(pending=0, in_progress=0, resolved=0, rejected=0),
        total_queries=0,
        user_count=0,
        active_sessions=0,
    )


def parse_query_status(raw: Any) -> QueryStatus:
    status = raw if isinstance(raw, dict) else {}
    return QueryStatus(
        pending=_as_int(status.get("pending")),
        in_progress=_as_int(_first(status, "inProgress", "in_progress")),
        resolved=_as_int(status.get("resolved")),
        rejected=_as_int(status.get("rejected")),
    )


def parse_summary(raw: Optional[Dict[str, Any]]) -> DashboardSummary:
    """Build a :class:`DashboardSummary` from the ``data`` member of the summary response."""
    if not isinstance(raw, dict):
        return empty_summary()

    queries_per_day = [
        DailyCount(
            bucket_date=_as_str(_first(item, "_id", "bucketDate", "bucket_date")),
            count=_as_int(item.get("count")),
        )
        for item in _records(_first(raw, "queriesPerDay", "queries_per_day"))
    ]
    query_types = [
        QueryTypeCount(
            label=_as_str(_first(item, "_id", "label")),
            count=_as_int(item.get("count")),
        )
        for item in _records(_first(raw, "queryTypes", "query_types"))
    ]

    return DashboardSummary(
        queries_per_day=queries_per_day,
        query_types=query_types,
        query_status=parse_query_status(_first(raw, "queryStatus", "query_status")),
        total_queries=_as_int(_first(raw, "totalQueries", "total_queries")),
        user_count=_as_int(_first(raw, "userCount", "user_count")),
        active_sessions=_as_int(_first(raw, "activeSessions", "active_sessions")),
    )


def parse_activity_entry(raw: Dict[str, Any]) -> ActivityEntry:
    location = raw.get("location")
    address = location.get("address") if isinstance(location, dict) else None
    return ActivityEntry(
        id=_as_str(_first(raw, "_id", "id")),
        query_type=_as_str(_first(raw, "query_type", "queryType")),
        description=_as_str(raw.get("description")),
        location=Location(address=_as_str(address)),
        status=_as_str(raw.get("status")),
        timestamp=_as_str(raw.get("timestamp")),
    )


def parse_activity(raw: Any) -> List[ActivityEntry]:
    """Build activity entries in received order, skipping non-object items."""
    return [parse_activity_entry(item) for item in _records(raw)]
