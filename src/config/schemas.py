"""Schema definitions for structured data used in the project."""

from dataclasses import dataclass
from typing import TypedDict, Dict, List


class DailyCount(TypedDict):
    bucket_date: str  # ISO date of the bucket, e.g. "2024-01-15"
    count: int


class QueryTypeCount(TypedDict):
    label: str
    count: int


class QueryStatus(TypedDict):
    pending: int
    in_progress: int
    resolved: int
    rejected: int


class DashboardSummary(TypedDict):
    queries_per_day: List[DailyCount]
    query_types: List[QueryTypeCount]
    query_status: QueryStatus
    total_queries: int
    user_count: int
    active_sessions: int


class CategoryPoint(TypedDict):
    name: str
    value: int


class TimeSeriesPoint(TypedDict):
    name: str  # "Jan 15"
    value: int


class ActivityRow(TypedDict):
    type: str
    description: str
    location: str
    status: str
    time: str


# ---- Immutable entities ----
@dataclass(frozen=True)
class Location:
    address: str = ""


@dataclass(frozen=True)
class ActivityEntry:
    id: str
    query_type: str
    description: str
    location: Location
    status: str
    timestamp: str  # ISO8601 as received


@dataclass(frozen=True)
class TwoValueRatio:
    label_a: str
    value_a: int
    label_b: str
    value_b: int  # total - partial, not clamped

    def as_points(self) -> List[CategoryPoint]:
        return [
            CategoryPoint(name=self.label_a, value=self.value_a),
            CategoryPoint(name=self.label_b, value=self.value_b),
        ]

    def as_dict(self) -> Dict[str, int]:
        return {self.label_a: self.value_a, self.label_b: self.value_b}
