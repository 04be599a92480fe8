"""
Shared layout helpers for dashboard components.

Provides common UI utilities for the page header, stat cards, status badges
and the recent activity table.
"""

import html
from typing import Dict, Sequence

import streamlit as st

from config.schemas import ActivityRow

ACTIVITY_COLUMNS = ("Type", "Description", "Location", "Status", "Time")


def status_color(status: str) -> Dict[str, str]:
    """
    Get badge colors for an activity status.

    Args:
        status: Activity status as received from the backend

    Returns:
        Dict with ``background`` and ``text`` CSS colors
    """
    if status == "Pending":
        return {"background": "#854d0e", "text": "#fef9c3"}
    elif status == "In Progress":
        return {"background": "#1e40af", "text": "#dbeafe"}
    else:
        return {"background": "#166534", "text": "#dcfce7"}


def render_header(title: str) -> None:
    """Render the page header."""
    st.title(title)


def render_total_card(label: str, value: int) -> None:
    """
    Render a wide stat card with a single large number.

    Args:
        label: Card label
        value: Value to display
    """
    st.markdown(f"""
    <div style="
        background-color: #1f2937;
        border: 1px solid #374151;
        border-radius: 0.75rem;
        padding: 1.5rem;
        margin: 0.5rem 0 1.5rem 0;
        display: flex;
        justify-content: space-between;
        align-items: center;
    ">
        <div style="color: #f3f4f6; font-size: 1.125rem; font-weight: 500;">{label}</div>
        <div style="color: #818cf8; font-size: 1.875rem; font-weight: 700;">{value}</div>
    </div>
    """, unsafe_allow_html=True)


def activity_table_html(rows: Sequence[ActivityRow]) -> str:
    """
    Build the recent activity table as HTML with colored status badges.

    Args:
        rows: Display rows, already truncated and formatted

    Returns:
        HTML string
    """
    head = "".join(f"<th style='text-align:left;padding:0.5rem'>{c}</th>" for c in ACTIVITY_COLUMNS)
    body = []
    for row in rows:
        colors = status_color(row["status"])
        badge = (
            f"<span style='background:{colors['background']};color:{colors['text']};"
            f"padding:0.1rem 0.5rem;border-radius:9999px;font-size:0.75rem'>{html.escape(row['status'])}</span>"
        )
        cells = [html.escape(row[key]) for key in ("type", "description", "location")]
        cells += [badge, html.escape(row["time"])]
        body.append("<tr>" + "".join(f"<td style='padding:0.5rem'>{c}</td>" for c in cells) + "</tr>")

    return (
        "<table style='width:100%;border-collapse:collapse'>"
        f"<thead><tr>{head}</tr></thead>"
        f"<tbody>{''.join(body)}</tbody>"
        "</table>"
    )


def render_activity_table(rows: Sequence[ActivityRow]) -> None:
    """Render the recent activity table."""
    st.subheader("Recent Activity")
    if not rows:
        st.info("No recent activity.")
        return
    st.markdown(activity_table_html(rows), unsafe_allow_html=True)
