"""Data transformers shaping aggregates for chart renderers."""

from .aggregates import (
    build_overview,
    short_address,
    to_activity_rows,
    to_category_points,
    to_time_series,
    to_two_value_ratio,
)

__all__ = [
    "build_overview",
    "short_address",
    "to_activity_rows",
    "to_category_points",
    "to_time_series",
    "to_two_value_ratio",
]
