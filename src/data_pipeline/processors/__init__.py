"""Data processors coercing raw dashboard payloads."""

from .payloads import empty_summary, parse_activity, parse_summary

__all__ = ["empty_summary", "parse_activity", "parse_summary"]
