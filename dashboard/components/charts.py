"""
Chart renderers for the overview page.

Each renderer is a pure function of pre-shaped data returning a matplotlib
figure, so it can be embedded with ``st.pyplot`` or saved directly.
"""

from typing import List, Sequence

import matplotlib.pyplot as plt

from config.config import (
    DIVISION_INFRACTIONS,
    DIVISION_TITLE,
    RADIAL_HEIGHT,
    RADIAL_INNER_RADIUS,
    RADIAL_OUTER_RADIUS,
)
from config.schemas import CategoryPoint, TimeSeriesPoint, TwoValueRatio

PALETTE = ["#6366F1", "#8B5CF6", "#EC4899", "#10B981", "#F59E0B", "#3B82F6", "#EF4444"]
RADIAL_COLORS = ["#6366F1", "#374151"]


def _empty_figure(title: str, figsize=(6, 4)) -> plt.Figure:
    fig, ax = plt.subplots(figsize=figsize)
    ax.text(0.5, 0.5, "No data available",
            ha="center", va="center", transform=ax.transAxes)
    ax.set_title(title)
    ax.set_axis_off()
    return fig


def time_series_chart(points: Sequence[TimeSeriesPoint], title: str) -> plt.Figure:
    """
    Line chart of daily report counts.

    Args:
        points: ``{name, value}`` points in chronological order
        title: Chart title

    Returns:
        Matplotlib figure
    """
    if not points:
        return _empty_figure(title)

    labels = [p["name"] for p in points]
    values = [p["value"] for p in points]

    fig, ax = plt.subplots(figsize=(6, 4))
    ax.plot(range(len(values)), values, color=PALETTE[0], linewidth=2, marker="o", markersize=4)
    ax.set_xticks(range(len(labels)))
    ax.set_xticklabels(labels, rotation=45, ha="right")
    ax.set_title(title)
    ax.set_ylabel("Reports")
    ax.grid(True, alpha=0.3)

    plt.tight_layout()
    return fig


def category_chart(points: Sequence[CategoryPoint], title: str) -> plt.Figure:
    """
    Pie chart of report categories.

    Args:
        points: ``{name, value}`` points, one per category
        title: Chart title

    Returns:
        Matplotlib figure
    """
    visible = [p for p in points if p["value"] > 0]
    if not visible:
        return _empty_figure(title)

    fig, ax = plt.subplots(figsize=(6, 4))
    ax.pie(
        [p["value"] for p in visible],
        labels=[p["name"] for p in visible],
        colors=[PALETTE[i % len(PALETTE)] for i in range(len(visible))],
        autopct="%1.0f%%",
        startangle=90,
    )
    ax.set_title(title)
    ax.axis("equal")

    plt.tight_layout()
    return fig


def two_value_radial(
    ratio: TwoValueRatio,
    title: str,
    inner_radius: int = RADIAL_INNER_RADIUS,
    outer_radius: int = RADIAL_OUTER_RADIUS,
    height: int = RADIAL_HEIGHT,
) -> plt.Figure:
    """
    Donut chart comparing a partial value against the remainder.

    Radii and height are in pixels at 100 dpi. Negative values are drawn as
    empty wedges but still shown in the legend with their real value.

    Args:
        ratio: Two-value split to draw
        title: Card title
        inner_radius: Inner radius of the ring
        outer_radius: Outer radius of the ring
        height: Figure height

    Returns:
        Matplotlib figure
    """
    size_in = max(height, 2 * outer_radius) / 100 * 2
    fig, ax = plt.subplots(figsize=(size_in * 1.6, size_in), dpi=100)

    points = ratio.as_points()
    sizes = [max(p["value"], 0) for p in points]
    if sum(sizes) == 0:
        sizes = [0, 1]

    ring_width = (outer_radius - inner_radius) / outer_radius if outer_radius else 1.0
    ax.pie(
        sizes,
        radius=1.0,
        colors=RADIAL_COLORS,
        startangle=90,
        counterclock=False,
        wedgeprops={"width": ring_width, "edgecolor": "white"},
    )
    ax.text(0, 0, f"{ratio.value_a}", ha="center", va="center", fontsize=10, fontweight="bold")
    ax.set_title(title, fontsize=10)
    ax.legend(
        [f"{p['name']}: {p['value']}" for p in points],
        loc="center left",
        bbox_to_anchor=(1.0, 0.5),
        fontsize=7,
        frameon=False,
    )
    ax.axis("equal")

    plt.tight_layout()
    return fig


def division_chart() -> plt.Figure:
    """Bar chart of infractions per division."""
    divisions: List[str] = [name for name, _ in DIVISION_INFRACTIONS]
    counts: List[int] = [count for _, count in DIVISION_INFRACTIONS]

    fig, ax = plt.subplots(figsize=(6, 4))
    ax.bar(divisions, counts, color=[PALETTE[i % len(PALETTE)] for i in range(len(divisions))])
    ax.set_title(DIVISION_TITLE)
    ax.set_ylabel("Infractions")
    ax.grid(True, axis="y", alpha=0.3)

    plt.tight_layout()
    return fig
